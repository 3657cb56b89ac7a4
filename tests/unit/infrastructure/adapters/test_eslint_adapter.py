"""Unit tests for ESLintAdapter."""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from shoptet_review.domain.rules import Severity
from shoptet_review.infrastructure.adapters.eslint_adapter import ESLintAdapter

RUN = "shoptet_review.infrastructure.adapters.eslint_adapter.subprocess.run"

ESLINT_OUTPUT = [
    {
        "filePath": "/p/src/app.js",
        "messages": [
            {"ruleId": "no-var", "severity": 2, "message": "Unexpected var.", "line": 3, "column": 1},
            {"ruleId": "complexity", "severity": 1, "message": "Too complex.", "line": 9, "column": 5},
            {"ruleId": None, "severity": 2, "message": "Parsing error: Unexpected token"},
        ],
    },
    {"filePath": "/p/src/ok.js", "messages": []},
]


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
    return MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)


class TestESLintAdapter:
    def test_default_config_is_packaged(self) -> None:
        adapter = ESLintAdapter()
        assert adapter.config_path.name == "eslint-shoptet-addon.json"
        assert adapter.config_path.exists()
        config = json.loads(Path(adapter.config_path).read_text(encoding="utf-8"))
        assert config["globals"]["Shoptet"] == "readonly"

    def test_build_command(self) -> None:
        adapter = ESLintAdapter(command=("eslint",), config_path="/cfg.json")
        assert adapter.build_command(["a.js"]) == [
            "eslint", "--format", "json", "--no-eslintrc", "-c", "/cfg.json", "a.js",
        ]

    def test_maps_severity_and_defaults(self, telemetry) -> None:
        adapter = ESLintAdapter(telemetry=telemetry)
        with patch(RUN, return_value=_completed(json.dumps(ESLINT_OUTPUT), returncode=1)) as run:
            result = adapter.gather_results(["/p/src/app.js", "/p/src/ok.js"])

        assert run.call_args.kwargs["env"]["ESLINT_USE_FLAT_CONFIG"] == "false"
        assert [(f.rule_id, f.severity, f.line, f.column) for f in result.findings] == [
            ("no-var", Severity.BLOCKER, 3, 1),
            ("complexity", Severity.RECOMMEND, 9, 5),
            ("CodeQuality", Severity.BLOCKER, 1, 1),
        ]
        assert all(f.source == "eslint" for f in result.findings)
        telemetry.warning.assert_not_called()

    def test_no_files_skips_subprocess(self) -> None:
        with patch(RUN) as run:
            assert ESLintAdapter().gather_results([]).findings == ()
        run.assert_not_called()

    def test_missing_binary_warns(self, telemetry) -> None:
        with patch(RUN, side_effect=FileNotFoundError("npx")):
            result = ESLintAdapter(telemetry=telemetry).gather_results(["a.js"])
        assert result.findings == ()
        assert "ESLint not found" in telemetry.warning.call_args.args[0]

    def test_timeout_warns(self, telemetry) -> None:
        with patch(RUN, side_effect=subprocess.TimeoutExpired("eslint", 300)):
            result = ESLintAdapter(telemetry=telemetry).gather_results(["a.js"])
        assert result.findings == ()
        assert "timed out" in telemetry.warning.call_args.args[0]

    def test_tool_failure_warns(self, telemetry) -> None:
        with patch(RUN, return_value=_completed(returncode=2, stderr="Oops! bad config")):
            result = ESLintAdapter(telemetry=telemetry).gather_results(["a.js"])
        assert result.findings == ()
        assert "Oops! bad config" in telemetry.warning.call_args.args[0]

    def test_invalid_json_warns(self, telemetry) -> None:
        with patch(RUN, return_value=_completed("not json", returncode=1)):
            result = ESLintAdapter(telemetry=telemetry).gather_results(["a.js"])
        assert result.findings == ()
        assert "Could not parse ESLint output" in telemetry.warning.call_args.args[0]
