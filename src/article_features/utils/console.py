"""Console output helpers shared across the package."""

from rich.console import Console
from rich.markup import escape

CONSOLE = Console()


def log_info(message: str) -> None:
    CONSOLE.print(f"[bold blue]INFO:[/] {escape(message)}")


def log_success(message: str) -> None:
    CONSOLE.print(f"[bold green]SUCCESS:[/] {escape(message)}")


def log_warning(message: str) -> None:
    CONSOLE.print(f"[bold yellow]WARNING:[/] {escape(message)}")


def log_error(message: str) -> None:
    CONSOLE.print(f"[bold red]ERROR:[/] {escape(message)}")


def log_debug(message: str) -> None:
    CONSOLE.print(f"[dim]DEBUG:[/] {escape(message)}")
