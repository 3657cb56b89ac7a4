"""Unit tests for the lint engine plugin entry point."""

from unittest.mock import MagicMock, patch

from shoptet_review.domain.config import ConfigurationLoader
from shoptet_review.infrastructure.checker import register
from shoptet_review.use_cases.checks.cache import ShoptetCacheChecker


def test_register_uses_configured_options() -> None:
    container = MagicMock()
    container.get_config_loader.return_value = ConfigurationLoader({"required_segment": "/edge/"})
    linter = MagicMock()

    with patch(
        "shoptet_review.infrastructure.checker.ReviewContainer.get_instance",
        return_value=container,
    ):
        register(linter)

    linter.register_checker.assert_called_once()
    checker = linter.register_checker.call_args.args[0]
    assert isinstance(checker, ShoptetCacheChecker)
    assert checker.linter is linter
