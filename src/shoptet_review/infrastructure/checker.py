"""
Lint engine plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from shoptet_review.domain.protocols import HostLinterProtocol
from shoptet_review.infrastructure.di.container import ReviewContainer
from shoptet_review.use_cases.checks.cache import ShoptetCacheChecker


def register(linter: HostLinterProtocol) -> None:
    """Register checkers."""
    container = ReviewContainer.get_instance()
    options = container.get_config_loader().analysis_options()
    linter.register_checker(ShoptetCacheChecker(linter, options=options))
