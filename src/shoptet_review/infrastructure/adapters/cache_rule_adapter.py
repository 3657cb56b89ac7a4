"""Cache rule adapter: runs the core analysis over many files."""

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Optional

from shoptet_review.domain.constants import SOURCE_CACHE_RULE
from shoptet_review.domain.entities import AdapterResult, Finding, ParseWarning
from shoptet_review.domain.options import AnalysisOptions
from shoptet_review.use_cases.analyze_source import AnalyzeSourceUseCase

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import (
        FileSystemProtocol,
        SourceParserProtocol,
        TelemetryPort,
    )


class CacheRuleAdapter:
    """
    Standalone integration of the cache rules.

    Each file is an independent unit, so files may be analyzed in a thread
    pool. Findings are re-sorted by file path, keeping each file's traversal
    order, so the output does not depend on scheduling.
    """

    def __init__(
        self,
        parser: "SourceParserProtocol",
        filesystem: "FileSystemProtocol",
        options: Optional[AnalysisOptions] = None,
        telemetry: Optional["TelemetryPort"] = None,
        jobs: int = 1,
    ) -> None:
        self.options = options or AnalysisOptions()
        self.options.validate()
        self._use_case = AnalyzeSourceUseCase(parser)
        self._filesystem = filesystem
        self.telemetry = telemetry
        self.jobs = max(1, jobs)

    def gather_results(self, files: list[str]) -> AdapterResult:
        """Analyze ``files`` and return findings plus per-file warnings."""
        if self.telemetry:
            self.telemetry.step(f"Running cache rules on {len(files)} file(s)...")
        ordered = sorted(files)
        if self.jobs > 1 and len(ordered) > 1:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                per_file = list(pool.map(self._analyze_file, ordered))
        else:
            per_file = [self._analyze_file(path) for path in ordered]

        findings: list[Finding] = []
        warnings: list[ParseWarning] = []
        for file_findings, warning in per_file:
            findings.extend(file_findings)
            if warning is not None:
                warnings.append(warning)
                if self.telemetry:
                    self.telemetry.warning(f"{warning.file}: {warning.message}")
        return AdapterResult(findings=tuple(findings), warnings=tuple(warnings))

    def _analyze_file(self, path: str) -> tuple[list[Finding], Optional[ParseWarning]]:
        try:
            source = self._filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            return [], ParseWarning(file=path, message=f"Could not read file: {exc}")
        result = self._use_case.execute(source, self.options)
        if result.parse_error is not None:
            return [], ParseWarning(file=path, message=result.parse_error)
        return [
            Finding.from_violation(path, v, source=SOURCE_CACHE_RULE) for v in result.violations
        ], None
