"""ESLint adapter: runs the Shoptet add-on ESLint config and maps its JSON output."""

import json
import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from shoptet_review.domain.constants import (
    DEFAULT_ESLINT_COMMAND,
    ESLINT_FALLBACK_RULE_ID,
    SOURCE_ESLINT,
)
from shoptet_review.domain.entities import AdapterResult, Finding
from shoptet_review.domain.rules import Severity

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import TelemetryPort


class ESLintAdapter:
    """Adapter for running ESLint and parsing results."""

    def __init__(
        self,
        command: tuple[str, ...] = DEFAULT_ESLINT_COMMAND,
        config_path: Optional[str] = None,
        telemetry: Optional["TelemetryPort"] = None,
        timeout: int = 300,
    ) -> None:
        self.command = command
        if config_path is not None:
            self.config_path = Path(config_path)
        else:
            _base = Path(__file__).resolve().parent.parent
            self.config_path = _base / "resources" / "eslint-shoptet-addon.json"
        self.telemetry = telemetry
        self.timeout = timeout

    def build_command(self, files: list[str]) -> list[str]:
        return [
            *self.command,
            "--format",
            "json",
            "--no-eslintrc",
            "-c",
            str(self.config_path),
            *files,
        ]

    def gather_results(self, files: list[str]) -> AdapterResult:
        """Run ESLint over ``files``. Tool failures are reported and yield no findings."""
        if not files:
            return AdapterResult()
        if self.telemetry:
            self.telemetry.step(f"Running ESLint on {len(files)} file(s)...")

        env = os.environ.copy()
        # The add-on config is an eslintrc-style file.
        env["ESLINT_USE_FLAT_CONFIG"] = "false"
        try:
            result = subprocess.run(
                self.build_command(files),
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
                env=env,
            )
        except FileNotFoundError:
            self._warn("ESLint not found. Install it with: npm install --save-dev eslint@8")
            return AdapterResult()
        except subprocess.TimeoutExpired:
            self._warn(f"ESLint timed out after {self.timeout}s")
            return AdapterResult()

        # Exit code 2 means ESLint itself failed (bad config, crash).
        if result.returncode not in (0, 1):
            detail = (result.stderr or result.stdout or "").strip()
            self._warn(f"ESLint execution failed: {detail or f'exit code {result.returncode}'}")
            return AdapterResult()
        return AdapterResult(findings=tuple(self._parse_output(result.stdout)))

    def _parse_output(self, stdout: str) -> list[Finding]:
        if not stdout.strip():
            return []
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as exc:
            self._warn(f"Could not parse ESLint output: {exc}")
            return []
        if not isinstance(data, list):
            self._warn("Unexpected ESLint output shape")
            return []

        findings: list[Finding] = []
        for file_result in data:
            if not isinstance(file_result, dict):
                continue
            file_path = str(file_result.get("filePath", ""))
            for message in file_result.get("messages", []):
                findings.append(self._to_finding(file_path, message))
        return findings

    @staticmethod
    def _to_finding(file_path: str, message: dict[str, Any]) -> Finding:
        severity = Severity.BLOCKER if message.get("severity") == 2 else Severity.RECOMMEND
        return Finding(
            file=file_path,
            line=message.get("line") or 1,
            column=message.get("column") or 1,
            message=str(message.get("message", "")),
            rule_id=message.get("ruleId") or ESLINT_FALLBACK_RULE_ID,
            severity=severity,
            source=SOURCE_ESLINT,
        )

    def _warn(self, message: str) -> None:
        if self.telemetry:
            self.telemetry.warning(message)
