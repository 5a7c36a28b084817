"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

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
    console.print(f"\n[bold]pathgeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, description: str) -> None:
    """Print the input document and a one-line summary of its content.

    Args:
        path: Path to the input file
        description: Summary such as "path shape, 12 vertices"
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {description}")


def print_shape_summary(
    family_counts: dict[str, int],
    vertex_count: int,
    area: float,
    geom_type: str,
) -> None:
    """Print node counts per family and the decoded geometry summary.

    Args:
        family_counts: Number of nodes per shape family
        vertex_count: Total vertices across path nodes
        area: Area of the decoded geometry
        geom_type: Type name of the decoded geometry
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Family")
    table.add_column("Nodes", justify="right")
    for family, count in family_counts.items():
        table.add_row(family, f"{count:,}")
    console.print(table)
    console.print(f"  {vertex_count:,} vertices {SYM_DOT} {geom_type} {SYM_DOT} area {area:,.2f}")


def print_success(output_path: str, summary: str) -> None:
    """Print success message with the written file.

    Args:
        output_path: Path to output file
        summary: Short description of what was written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {summary}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
