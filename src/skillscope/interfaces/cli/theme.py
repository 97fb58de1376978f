"""Rich consoles and message helpers shared by CLI commands.

Data goes to ``console`` (stdout); progress and diagnostics go to
``stderr_console`` so ``--json`` output stays machine-readable.
"""

from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.theme import Theme

try:
    VERSION = version("skillscope")
except PackageNotFoundError:
    VERSION = "0.0.0"

theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "dim": "dim",
        "score": "magenta",
    }
)

console = Console(theme=theme)
stderr_console = Console(theme=theme, stderr=True)


def print_success(message: str) -> None:
    stderr_console.print(f"[success]✓ {message}[/success]")


def print_warning(message: str) -> None:
    stderr_console.print(f"[warning]! {message}[/warning]")


def print_error(message: str, hint: str | None = None) -> None:
    stderr_console.print(f"[error]✗ {message}[/error]")
    if hint:
        stderr_console.print(f"[dim]  {hint}[/dim]")
