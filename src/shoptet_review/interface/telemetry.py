"""Project telemetry: progress lines on a rich console, mirrored to logging."""

import logging

from rich.console import Console
from rich.markup import escape

from shoptet_review.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """
    TelemetryPort backed by rich.

    Progress goes to stderr so report output on stdout (JSON, CI annotations)
    stays machine-readable.
    """

    def __init__(self, project_name: str, color: str = "cyan", welcome_msg: str = "") -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_msg = welcome_msg
        self.console = Console(stderr=True, highlight=False)
        self.logger = logging.getLogger(project_name.lower())

    def handshake(self) -> None:
        self.console.print(
            f"[bold {self.color}]{self.project_name}[/] {self.welcome_msg}".rstrip()
        )
        self.logger.info("%s %s", self.project_name, self.welcome_msg)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]›[/] {escape(message)}")
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]✖[/] {escape(message)}")
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/] {escape(message)}")
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
