from typing import TYPE_CHECKING, Any, Optional, cast

from shoptet_review.domain.config import ConfigurationLoader
from shoptet_review.domain.entities import OutputFormat
from shoptet_review.infrastructure.adapters.cache_rule_adapter import CacheRuleAdapter
from shoptet_review.infrastructure.adapters.eslint_adapter import ESLintAdapter
from shoptet_review.infrastructure.config_file_loader import ConfigFileLoader
from shoptet_review.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from shoptet_review.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from shoptet_review.infrastructure.reporters import ReporterFactory
from shoptet_review.infrastructure.services.guidance_service import GuidanceService
from shoptet_review.infrastructure.services.review_context import ReviewContextWriter
from shoptet_review.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from shoptet_review.domain.protocols import (
        FileSystemProtocol,
        GuidanceServiceProtocol,
        LinterAdapterProtocol,
        ReviewContextWriterProtocol,
        SourceParserProtocol,
        TelemetryPort,
    )
    from shoptet_review.interface.reporters import ReviewReporter


class ReviewContainer:
    """Dependency Injection Container for the Shoptet review tool."""

    _instance: Optional["ReviewContainer"] = None

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("SHOPTET-REVIEW", "cyan", "Cache guard online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("TreeSitterGateway", TreeSitterGateway())
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton(
            "ReviewContextWriter",
            ReviewContextWriter(filesystem, max_lines=config_loader.context_max_lines),
        )
        self.register_singleton(
            "ESLintAdapter",
            ESLintAdapter(command=config_loader.eslint_command, telemetry=telemetry),
        )
        # Cache rule adapters are keyed by job count; options are validated here
        # so a bad [tool.shoptet-review] table fails at startup.
        self.get_cache_rule_adapter()

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_parser(self) -> "SourceParserProtocol":
        """Return the tree-sitter parser gateway."""
        return cast("SourceParserProtocol", self.get("TreeSitterGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        """Return the guidance service (rule registry)."""
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_context_writer(self) -> "ReviewContextWriterProtocol":
        """Return the Markdown review context writer."""
        return cast("ReviewContextWriterProtocol", self.get("ReviewContextWriter"))

    def get_eslint_adapter(self) -> "LinterAdapterProtocol":
        """Return the ESLint adapter."""
        return cast("LinterAdapterProtocol", self.get("ESLintAdapter"))

    def get_cache_rule_adapter(self, jobs: Optional[int] = None) -> "LinterAdapterProtocol":
        """Return the cache rule adapter for ``jobs`` workers (default: configured jobs)."""
        config_loader = self.get_config_loader()
        jobs = jobs or config_loader.jobs
        key = f"CacheRuleAdapter[{jobs}]"
        if key not in self._singletons:
            self.register_singleton(
                key,
                CacheRuleAdapter(
                    parser=self.get_parser(),
                    filesystem=self.get_filesystem_gateway(),
                    options=config_loader.analysis_options(),
                    telemetry=self.get_telemetry_port(),
                    jobs=jobs,
                ),
            )
        return cast("LinterAdapterProtocol", self.get(key))

    def get_reporter(self, output_format: OutputFormat = OutputFormat.CONSOLE) -> "ReviewReporter":
        """Return the reporter for ``output_format``."""
        return ReporterFactory.create(
            output_format, self.get_filesystem_gateway(), self.get_guidance_service()
        )

    @classmethod
    def get_instance(cls) -> "ReviewContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = ReviewContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
