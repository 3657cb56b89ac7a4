"""Unit tests for ReviewFilesUseCase."""

import unittest
from unittest.mock import MagicMock

from shoptet_review.domain.entities import AdapterResult, Finding, ParseWarning
from shoptet_review.domain.errors import ReviewTargetError
from shoptet_review.domain.rules import Severity
from shoptet_review.use_cases.review_files import ReviewFilesUseCase


def _finding(file: str, line: int, source: str) -> Finding:
    return Finding(file, line, 1, "m", "r", Severity.BLOCKER, source=source)


class TestDiscoverFiles(unittest.TestCase):
    def setUp(self) -> None:
        self.filesystem = MagicMock()
        self.telemetry = MagicMock()
        self.use_case = ReviewFilesUseCase(
            cache_rule_adapter=MagicMock(),
            filesystem=self.filesystem,
            telemetry=self.telemetry,
            extensions=(".js",),
            exclude_dirs=("node_modules",),
        )

    def test_missing_path(self) -> None:
        self.filesystem.exists.return_value = False
        with self.assertRaisesRegex(ReviewTargetError, "Path not found: nope"):
            self.use_case.discover_files("nope")

    def test_directory_is_globbed(self) -> None:
        self.filesystem.exists.return_value = True
        self.filesystem.is_directory.return_value = True
        self.filesystem.glob_source_files.return_value = ["/p/src/a.js"]
        self.assertEqual(self.use_case.discover_files("src"), ["/p/src/a.js"])
        self.filesystem.glob_source_files.assert_called_once_with("src", (".js",), ("node_modules",))

    def test_empty_directory(self) -> None:
        self.filesystem.exists.return_value = True
        self.filesystem.is_directory.return_value = True
        self.filesystem.glob_source_files.return_value = []
        with self.assertRaisesRegex(ReviewTargetError, r"No \.js files found in src"):
            self.use_case.discover_files("src")

    def test_single_file(self) -> None:
        self.filesystem.exists.return_value = True
        self.filesystem.is_directory.return_value = False
        self.filesystem.resolve_path.return_value = "/p/app.js"
        self.assertEqual(self.use_case.discover_files("app.js"), ["/p/app.js"])

    def test_single_file_with_wrong_extension(self) -> None:
        self.filesystem.exists.return_value = True
        self.filesystem.is_directory.return_value = False
        with self.assertRaisesRegex(ReviewTargetError, "not a JavaScript file or directory"):
            self.use_case.discover_files("style.css")


class TestExecute(unittest.TestCase):
    def setUp(self) -> None:
        self.filesystem = MagicMock()
        self.filesystem.exists.return_value = True
        self.filesystem.is_directory.return_value = True
        self.filesystem.glob_source_files.return_value = ["/p/a.js", "/p/b.js"]
        self.cache_adapter = MagicMock()
        self.cache_adapter.gather_results.return_value = AdapterResult(
            findings=(_finding("/p/a.js", 5, "cache-rule"), _finding("/p/b.js", 1, "cache-rule")),
            warnings=(ParseWarning("/p/c.js", "Parse error"),),
        )
        self.eslint_adapter = MagicMock()
        self.eslint_adapter.gather_results.return_value = AdapterResult(
            findings=(_finding("/p/b.js", 9, "eslint"), _finding("/p/a.js", 2, "eslint")),
        )
        self.use_case = ReviewFilesUseCase(
            cache_rule_adapter=self.cache_adapter,
            filesystem=self.filesystem,
            telemetry=MagicMock(),
            eslint_adapter=self.eslint_adapter,
        )

    def test_cache_rules_only_by_default(self) -> None:
        result = self.use_case.execute("src")
        self.eslint_adapter.gather_results.assert_not_called()
        self.cache_adapter.gather_results.assert_called_once_with(["/p/a.js", "/p/b.js"])
        self.assertEqual(result.files, ("/p/a.js", "/p/b.js"))
        self.assertEqual(len(result.findings), 2)
        self.assertEqual(result.warnings, (ParseWarning("/p/c.js", "Parse error"),))

    def test_eslint_findings_are_merged_per_file(self) -> None:
        result = self.use_case.execute("src", run_eslint=True)
        self.assertEqual(
            [(f.file, f.line, f.source) for f in result.findings],
            [
                ("/p/a.js", 2, "eslint"),
                ("/p/a.js", 5, "cache-rule"),
                ("/p/b.js", 9, "eslint"),
                ("/p/b.js", 1, "cache-rule"),
            ],
        )
        self.assertEqual(result.blocker_count, 4)
