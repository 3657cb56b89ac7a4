"""CLI entry points for shoptet-review - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer

from shoptet_review.domain.config import ConfigurationLoader
from shoptet_review.domain.constants import DEFAULT_TARGET, REVIEW_BANNER
from shoptet_review.domain.entities import OutputFormat
from shoptet_review.domain.errors import ReviewTargetError
from shoptet_review.domain.protocols import (
    FileSystemProtocol,
    GuidanceServiceProtocol,
    LinterAdapterProtocol,
    ReviewContextWriterProtocol,
    TelemetryPort,
)
from shoptet_review.interface.reporters import ReviewReporter
from shoptet_review.use_cases.review_files import ReviewFilesUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    context_writer: ReviewContextWriterProtocol
    eslint_adapter: LinterAdapterProtocol
    cache_rule_adapter_factory: Callable[[Optional[int]], LinterAdapterProtocol]
    reporter_factory: Callable[[OutputFormat], ReviewReporter]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Explicit path, else the conventional src directory."""
        if path is not None:
            return str(path)
        return DEFAULT_TARGET

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="shoptet-review",
            help="Review Shoptet add-on scripts: every call to a Shoptet server must go through /cache/.",
            add_completion=False,
        )

        def _session_start() -> None:
            """Print banner then handshake."""
            print(REVIEW_BANNER)
            deps.telemetry.handshake()

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="File or directory to review (default: src)"),  # noqa: B008
            output_format: OutputFormat = typer.Option(
                OutputFormat.CONSOLE, "--format", help="Output format", case_sensitive=False),
            eslint: Optional[bool] = typer.Option(
                None, "--eslint/--no-eslint", help="Also run the Shoptet ESLint config (default: from config)"),
            context: bool = typer.Option(
                True, "--context/--no-context", help="Write the Markdown review context (console format only)"),
            jobs: Optional[int] = typer.Option(
                None, "--jobs", "-j", min=1, help="Worker threads for the cache rules (default: from config)"),
        ) -> None:
            """Review JavaScript sources. Exits 1 when any blocker is found."""
            if output_format is OutputFormat.CONSOLE:
                _session_start()
            reporter = deps.reporter_factory(output_format)
            target_path = CLIAppFactory.resolve_target_path(path)
            run_eslint = deps.config_loader.eslint_enabled if eslint is None else eslint

            use_case = ReviewFilesUseCase(
                cache_rule_adapter=deps.cache_rule_adapter_factory(jobs),
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                eslint_adapter=deps.eslint_adapter,
                extensions=deps.config_loader.extensions,
                exclude_dirs=deps.config_loader.exclude_dirs,
            )
            try:
                result = use_case.execute(target_path, run_eslint=run_eslint)
            except ReviewTargetError as exc:
                reporter.report_error(str(exc))
                sys.exit(1)

            reporter.report(result)
            if output_format is OutputFormat.CONSOLE:
                if context:
                    context_file = deps.config_loader.context_file
                    deps.context_writer.write(result, context_file)
                    print(f"\n📄 LLM review context saved to {context_file}")
                print("\nReview complete.")

            if result.has_blockers():
                sys.exit(1)
            sys.exit(0)

        @app.command()
        def rules() -> None:
            """List the review rules with severity and guidance."""
            registry = deps.guidance_service.get_registry()
            for rule_id, entry in sorted(registry.items()):
                severity = entry.get("severity", "")
                title = entry.get("display_name", rule_id)
                print(f"{rule_id} [{severity}] {title}")
                description = entry.get("short_description", "")
                if description:
                    print(f"    {description.strip()}")
                instructions = deps.guidance_service.get_manual_instructions(rule_id)
                if instructions:
                    print(f"    Fix: {instructions}")

        return app
