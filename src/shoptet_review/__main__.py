"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os
import sys

from shoptet_review.domain.errors import ShoptetReviewError
from shoptet_review.infrastructure.di.container import ReviewContainer
from shoptet_review.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    level_name = os.environ.get("SHOPTET_REVIEW_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        container = ReviewContainer()
    except ShoptetReviewError as exc:
        print(f"Configuration error in [tool.shoptet-review]: {exc}", file=sys.stderr)
        sys.exit(2)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        context_writer=container.get_context_writer(),
        eslint_adapter=container.get_eslint_adapter(),
        cache_rule_adapter_factory=container.get_cache_rule_adapter,
        reporter_factory=container.get_reporter,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
