"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for arrow routing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]elbowroute[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, element_count: int, shape_count: int) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        element_count: Total number of elements
        shape_count: Number of non-deleted bindable shapes
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    console.print(f"  {element_count:,} elements {SYM_DOT} {shape_count:,} bindable shapes")


def print_arrows_found(count: int, arrow_ids: list[str], verbose: bool) -> None:
    """Print elbow arrow discovery result.

    Args:
        count: Number of elbow arrows found
        arrow_ids: Ids of the elbow arrows
        verbose: Whether to show the id list
    """
    console.print(f"  [green]{count}[/green] elbow arrows")
    if verbose and arrow_ids:
        ids_str = ", ".join(arrow_ids[:20])
        if len(arrow_ids) > 20:
            ids_str += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(arrow_ids) - 20} more)"
        console.print(f"  {ids_str}")


def print_arrow_table(rows: list[tuple[str, str, str, int]]) -> None:
    """Print a table of arrows and their bindings.

    Args:
        rows: (arrow_id, start_binding, end_binding, point_count) tuples
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Arrow")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Points", justify="right")

    for arrow_id, start, end, point_count in rows:
        table.add_row(arrow_id, start, end, str(point_count))

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    routed: int,
    joints: int,
    non_converged: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None for a dry run)
        total_time_s: Total processing time in seconds
        routed: Number of arrows routed
        joints: Joint points added across all arrows
        non_converged: Arrows that hit the step ceiling
        errors: Number of errors encountered
        avg_time_ms: Average routing time per arrow in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)
    else:
        console.print("  Dry run, no file written")

    warn_style = "yellow" if non_converged > 0 else "green"
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {routed} arrows {SYM_DOT} {joints} joints {SYM_DOT} "
        f"[{warn_style}]{non_converged} hit step limit[/{warn_style}] {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.2f}ms avg per arrow")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelled, no output file created")
