"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
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
    console.print(f"\n[bold]Shapesmith[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_request_info(kind: str, width: float, height: float, opaque: bool) -> None:
    """Print what is about to be generated.

    Args:
        kind: Shape name
        width: Logical width
        height: Logical height
        opaque: Whether the image has a background
    """
    canvas = "opaque" if opaque else "transparent"
    console.print(f"  {kind} {SYM_DOT} {width:g}x{height:g} {SYM_DOT} {canvas}")


def print_shape_table(rows: list[tuple[str, str]]) -> None:
    """Print available shapes with their options.

    Args:
        rows: (shape name, relevant options) pairs
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Shape")
    table.add_column("Options")
    for name, options in rows:
        table.add_row(f"  {name}", options)
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    pixel_width: int,
    pixel_height: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total generation time in seconds
        pixel_width: Width of the written image in pixels
        pixel_height: Height of the written image in pixels
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {pixel_width}x{pixel_height} pixels")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
