"""Rich console output helpers for the CLI.

Generated words are written to stdout as plain text; everything in this
module goes to stderr so it never mixes with word output.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sajka.utils import GenerationStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sajka[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_generation_summary(stats: GenerationStats, cells: int) -> None:
    """Print statistics of a generation run.

    Args:
        stats: Statistics collected by the word generator
        cells: Number of occupied cells in the generated word
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Syllables", str(stats.syllables))
    table.add_row("Syllable attempts", str(stats.syllable_attempts))
    table.add_row("Rejected syllables", str(stats.rejected_syllables))
    table.add_row("Placements", str(stats.adjoins))
    table.add_row("Failed placements", str(stats.adjoin_failures))
    table.add_row("Cells", str(cells))

    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", highlight=False)
    if details:
        console.print(f"  {escape(details)}", highlight=False)
