"""Markdown review context for a follow-up LLM review of the flagged files."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from shoptet_review.domain.constants import DEFAULT_CONTEXT_MAX_LINES

if TYPE_CHECKING:
    from shoptet_review.domain.entities import Finding, ReviewResult
    from shoptet_review.domain.protocols import FileSystemProtocol


class ReviewContextWriter:
    """
    Builds and writes the review context document.

    The document lists the summary counts, every blocker and recommendation,
    the source of each file that has findings (first ``max_lines`` lines) and
    closing instructions for the reviewer.
    """

    def __init__(
        self,
        filesystem: "FileSystemProtocol",
        max_lines: int = DEFAULT_CONTEXT_MAX_LINES,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._filesystem = filesystem
        self.max_lines = max_lines
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def write(self, result: "ReviewResult", path: str) -> str:
        """Render the context for ``result``, write it to ``path`` and return it."""
        content = self.render(result)
        self._filesystem.write_text(path, content)
        return content

    def render(self, result: "ReviewResult") -> str:
        parts = [
            "# Code Review Context\n\n",
            f"**Generated**: {self._clock().isoformat()}\n\n",
            "## Summary\n\n",
            f"- **Files reviewed**: {len(result.files)}\n",
            f"- **Blockers found**: {result.blocker_count}\n",
            f"- **Recommendations**: {result.recommend_count}\n\n",
            "---\n\n",
        ]
        if not result.findings:
            parts.append("## ✅ No Issues Found\n\nAll files passed automated checks.\n")
        else:
            parts.append("## ❌ Findings\n\n")
            parts.append(self._finding_list("Blockers", result.blockers))
            parts.append(self._finding_list("Recommendations", result.recommendations))
            parts.append("---\n\n")
            parts.append("## 📝 Code Context\n\n")
            for file in result.files:
                file_findings = result.findings_for(file)
                if file_findings:
                    parts.append(self._code_section(file, file_findings))
        parts.append(self._instructions())
        return "".join(parts)

    def _finding_list(self, title: str, findings: "tuple[Finding, ...]") -> str:
        if not findings:
            return ""
        lines = [f"### {title} ({len(findings)})\n\n"]
        for finding in findings:
            rel = self._filesystem.relative_path(finding.file)
            lines.append(f"- **{rel}:{finding.line}** – {finding.message}\n")
        lines.append("\n")
        return "".join(lines)

    def _code_section(self, file: str, findings: "tuple[Finding, ...]") -> str:
        section = [f"### {self._filesystem.relative_path(file)}\n\n"]
        try:
            code = self._filesystem.read_text(file)
        except (OSError, UnicodeDecodeError) as exc:
            section.append(f"*Could not read file: {exc}*\n\n")
            return "".join(section)

        lines = code.split("\n")
        if len(lines) > self.max_lines:
            section.append(
                f"*File too large ({len(lines)} lines), showing first {self.max_lines} lines*\n\n"
            )
        section.append("```javascript\n")
        section.append("\n".join(lines[: self.max_lines]))
        section.append("\n```\n\n")
        section.append("**Issues in this file:**\n\n")
        for finding in findings:
            section.append(f"- Line {finding.line}: {finding.message}\n")
        section.append("\n")
        return "".join(section)

    @staticmethod
    def _instructions() -> str:
        return (
            "---\n\n"
            "## 🤖 Instructions for LLM Review\n\n"
            "Please review the code above against Shoptet addon guidelines:\n\n"
            "1. Verify all automated findings are accurate\n"
            "2. Look for additional issues that automated checks might have missed\n"
            "3. Provide Czech-formatted comments for any additional concerns\n"
            "4. Focus on code quality, maintainability, and Shoptet best practices\n\n"
            "Use the format:\n"
            "❌ BLOCKER: `file:line` – Explanation\n"
            "😊 RECOMMEND: `file:line` – Suggestion\n"
        )
