"""Reporter implementations - console (rich), GitHub Actions annotations, JSON."""

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shoptet_review.domain.entities import OutputFormat

if TYPE_CHECKING:
    from shoptet_review.domain.entities import Finding, ReviewResult
    from shoptet_review.domain.protocols import FileSystemProtocol, GuidanceServiceProtocol
    from shoptet_review.interface.reporters import ReviewReporter


class TerminalReviewReporter:
    """Human-readable summary with blocker and recommendation tables."""

    def __init__(
        self,
        filesystem: "FileSystemProtocol",
        guidance_service: "GuidanceServiceProtocol",
        console: Console | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._guidance = guidance_service
        self.console = console or Console(highlight=False)

    def report(self, result: "ReviewResult") -> None:
        self.console.print()
        self.console.print("[bold]📊 Review Summary[/]")
        self.console.print("=" * 50)
        self.console.print(f"❌ BLOCKERS: {result.blocker_count}")
        self.console.print(f"😊 RECOMMENDATIONS: {result.recommend_count}")
        self.console.print()

        if result.blockers:
            self.console.print(self._table("❌ Blockers", result.blockers, "red"))
        if result.recommendations:
            self.console.print(self._table("😊 Recommendations", result.recommendations, "yellow"))
        if not result.findings:
            self.console.print("[green]✅ No issues found! Code looks good.[/]")
        for warning in result.warnings:
            rel = self._filesystem.relative_path(warning.file)
            self.console.print(f"[yellow]⚠ Skipped {escape(rel)}: {escape(warning.message)}[/]")

    def report_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/] {escape(message)}")

    def _table(self, title: str, findings: "tuple[Finding, ...]", style: str) -> Table:
        table = Table(title=title, title_style=f"bold {style}", show_lines=False)
        table.add_column("Location", no_wrap=True)
        table.add_column("Rule")
        table.add_column("Message")
        for finding in findings:
            rel = self._filesystem.relative_path(finding.file)
            table.add_row(
                escape(f"{rel}:{finding.line}:{finding.column}"),
                escape(self._guidance.get_title(finding.rule_id)),
                escape(finding.message),
            )
        return table


class GitHubActionsReporter:
    """Workflow-command annotations, one line per finding, then a summary notice."""

    LEVELS = {"blocker": "error", "recommend": "warning"}

    def __init__(
        self,
        filesystem: "FileSystemProtocol",
        guidance_service: "GuidanceServiceProtocol",
    ) -> None:
        self._filesystem = filesystem
        self._guidance = guidance_service

    @staticmethod
    def _one_line(text: str) -> str:
        return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")

    def format_finding(self, finding: "Finding") -> str:
        level = self.LEVELS[finding.severity.value]
        rel = self._filesystem.relative_path(finding.file)
        title = self._guidance.get_title(finding.rule_id)
        return (
            f"::{level} file={rel},line={finding.line},col={finding.column},"
            f"title={title}::{self._one_line(finding.message)}"
        )

    def report(self, result: "ReviewResult") -> None:
        for finding in result.findings:
            print(self.format_finding(finding))
        for warning in result.warnings:
            rel = self._filesystem.relative_path(warning.file)
            print(f"::warning file={rel},title=ParseError::{self._one_line(warning.message)}")
        if not result.findings:
            print("::notice title=CodeReview::No issues found - code looks good!")
        else:
            print(
                "::notice title=ReviewSummary::Found "
                f"{result.blocker_count} blocker(s) and {result.recommend_count} recommendation(s)"
            )

    def report_error(self, message: str) -> None:
        print(f"::error::{self._one_line(message)}")


class JsonReporter:
    """Machine-readable result on stdout."""

    def report(self, result: "ReviewResult") -> None:
        print(json.dumps(result.to_dict(), indent=2))

    def report_error(self, message: str) -> None:
        print(json.dumps({"error": message}, indent=2))


class ReporterFactory:
    """Selects the reporter for an output format."""

    @staticmethod
    def create(
        output_format: OutputFormat,
        filesystem: "FileSystemProtocol",
        guidance_service: "GuidanceServiceProtocol",
    ) -> "ReviewReporter":
        if output_format is OutputFormat.GITHUB_ACTIONS:
            return GitHubActionsReporter(filesystem, guidance_service)
        if output_format is OutputFormat.JSON:
            return JsonReporter()
        return TerminalReviewReporter(filesystem, guidance_service)
