"""Unit tests for static literal extraction."""

import pytest

from shoptet_review.domain.literals import cook, static_text


class TestCook:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            (r"a\/b", "a/b"),
            (r"\x2fcache\x2f", "/cache/"),
            (r"/cache/", "/cache/"),
            (r"\u{2F}cache\u{2F}", "/cache/"),
            (r"tab\tnew\n", "tab\tnew\n"),
            ("line\\\ncontinued", "linecontinued"),
            (r"quote\"s", 'quote"s'),
        ],
    )
    def test_resolves_escapes(self, raw: str, expected: str) -> None:
        assert cook(raw) == expected

    def test_out_of_range_code_point_is_unknown(self) -> None:
        assert cook(r"\u{110000}") is None


class TestStaticText:
    def test_double_quoted_string(self, parse, first_arg) -> None:
        node = first_arg(parse('f("https://a.shoptet.cz/x")'))
        assert static_text(node) == "https://a.shoptet.cz/x"

    def test_single_quoted_string_with_escapes(self, parse, first_arg) -> None:
        node = first_arg(parse(r"f('https://a.shoptet.cz\x2fcache/x')"))
        assert static_text(node) == "https://a.shoptet.cz/cache/x"

    def test_empty_string(self, parse, first_arg) -> None:
        assert static_text(first_arg(parse('f("")'))) == ""

    def test_template_without_substitution(self, parse, first_arg) -> None:
        node = first_arg(parse("f(`https://a.shoptet.cz/x`)"))
        assert static_text(node) == "https://a.shoptet.cz/x"

    def test_template_with_substitution_is_unknown(self, parse, first_arg) -> None:
        node = first_arg(parse("f(`https://a.shoptet.cz/${path}`)"))
        assert static_text(node) is None

    @pytest.mark.parametrize(
        "source",
        [
            "f(url)",
            'f("https://a." + "shoptet.cz/x")',
            "f(42)",
            "f({url: 'https://a.shoptet.cz/x'})",
        ],
    )
    def test_non_literals_are_unknown(self, parse, first_arg, source: str) -> None:
        assert static_text(first_arg(parse(source))) is None

    def test_parenthesized_string(self, parse, first_arg) -> None:
        node = first_arg(parse("f((('https://a.shoptet.cz/x')))"))
        assert node.kind == "parenthesized_expression"
        assert static_text(node) == "https://a.shoptet.cz/x"

    def test_none_is_unknown(self) -> None:
        assert static_text(None) is None
