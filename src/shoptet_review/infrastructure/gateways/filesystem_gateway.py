"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import os
from pathlib import Path
from typing import Optional

from shoptet_review.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_source_files(
        self, path: str, extensions: tuple[str, ...], exclude_dirs: tuple[str, ...]
    ) -> list[str]:
        """All files under ``path`` with one of ``extensions``, skipping excluded dirs."""
        root = Path(path).resolve()
        excluded = set(exclude_dirs)
        found = [
            str(p)
            for p in root.rglob("*")
            if p.is_file()
            and p.suffix in extensions
            and not excluded.intersection(p.relative_to(root).parts[:-1])
        ]
        return sorted(found)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def relative_path(self, path: str, start: Optional[str] = None) -> str:
        """Path relative to ``start`` (CWD by default); unchanged when on another drive."""
        try:
            return os.path.relpath(path, start or os.getcwd())
        except ValueError:
            return path
