"""Use Case: Review Files - discover sources, run the review passes, merge results."""

from typing import TYPE_CHECKING, Optional

from shoptet_review.domain.constants import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS
from shoptet_review.domain.entities import Finding, ParseWarning, ReviewResult
from shoptet_review.domain.errors import ReviewTargetError

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import (
        FileSystemProtocol,
        LinterAdapterProtocol,
        TelemetryPort,
    )


class ReviewFilesUseCase:
    """Orchestrate the cache rule pass and the optional ESLint pass over a target path."""

    def __init__(
        self,
        cache_rule_adapter: "LinterAdapterProtocol",
        filesystem: "FileSystemProtocol",
        telemetry: "TelemetryPort",
        eslint_adapter: Optional["LinterAdapterProtocol"] = None,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS,
    ) -> None:
        self.cache_rule_adapter = cache_rule_adapter
        self.eslint_adapter = eslint_adapter
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.extensions = extensions
        self.exclude_dirs = exclude_dirs

    def discover_files(self, target_path: str) -> list[str]:
        """
        Resolve ``target_path`` to the sorted list of files to review.

        Raises:
            ReviewTargetError: path missing, a file with an unreviewed
                extension, or a directory with no matching files.
        """
        if not self.filesystem.exists(target_path):
            raise ReviewTargetError(f"Path not found: {target_path}")

        if self.filesystem.is_directory(target_path):
            files = self.filesystem.glob_source_files(
                target_path, self.extensions, self.exclude_dirs
            )
            if not files:
                wanted = "/".join(self.extensions)
                raise ReviewTargetError(f"No {wanted} files found in {target_path}")
            self.telemetry.step(f"🔍 Reviewing {len(files)} file(s) in directory: {target_path}")
            return files

        if not target_path.endswith(self.extensions):
            raise ReviewTargetError(f"{target_path} is not a JavaScript file or directory")
        self.telemetry.step(f"🔍 Reviewing single file: {target_path}")
        return [self.filesystem.resolve_path(target_path)]

    def execute(self, target_path: str, run_eslint: bool = False) -> ReviewResult:
        """Review every discovered file and return the merged, file-ordered result."""
        files = self.discover_files(target_path)

        findings: list[Finding] = []
        warnings: list[ParseWarning] = []
        if run_eslint and self.eslint_adapter is not None:
            eslint_result = self.eslint_adapter.gather_results(files)
            findings.extend(eslint_result.findings)
            warnings.extend(eslint_result.warnings)

        cache_result = self.cache_rule_adapter.gather_results(files)
        findings.extend(cache_result.findings)
        warnings.extend(cache_result.warnings)

        # Stable sort: within a file each pass keeps its own order.
        findings.sort(key=lambda f: f.file)
        result = ReviewResult(files=tuple(files), findings=tuple(findings), warnings=tuple(warnings))
        self.telemetry.step(
            f"Review finished: {result.blocker_count} blocker(s), "
            f"{result.recommend_count} recommendation(s)"
        )
        return result
