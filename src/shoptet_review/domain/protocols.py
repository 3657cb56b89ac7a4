from typing import TYPE_CHECKING, Optional, Protocol

from shoptet_review.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from shoptet_review.domain.entities import AdapterResult, ReviewResult
    from shoptet_review.domain.syntax import SyntaxNode


class SourceParserProtocol(Protocol):
    """Turns source text into a SyntaxNode tree. Raises ParseError on malformed input."""

    def parse(self, source_text: str) -> "SyntaxNode": ...


class LinterAdapterProtocol(Protocol):
    """Protocol for linter adapters."""

    def gather_results(self, files: list[str]) -> "AdapterResult": ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def glob_source_files(
        self, path: str, extensions: tuple[str, ...], exclude_dirs: tuple[str, ...]
    ) -> list[str]:
        """Get all source files under path, sorted."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def relative_path(self, path: str, start: Optional[str] = None) -> str:
        """Path relative to start (default: CWD)."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Rule registry lookups for presentation."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]: ...
    def get_entry(self, rule_id: str) -> RuleRegistryEntry | None: ...
    def get_title(self, rule_id: str) -> str: ...
    def get_manual_instructions(self, rule_id: str) -> str: ...


class ReviewContextWriterProtocol(Protocol):
    """Writes the Markdown review context hand-over."""

    def write(self, result: "ReviewResult", path: str) -> str: ...


class HostLinterProtocol(Protocol):
    """A lint engine that hosts checkers and receives their messages."""

    def register_checker(self, checker: object) -> None: ...

    def add_message(
        self,
        msgid: str,
        *,
        node: object = None,
        args: tuple[str, ...] | None = None,
        line: int | None = None,
        col_offset: int | None = None,
    ) -> None: ...
