"""CLI application entry point for elbowroute.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from elbowroute import __version__
from elbowroute.cli.output import (
    console,
    create_progress,
    print_arrow_table,
    print_arrows_found,
    print_cancellation_notice,
    print_error,
    print_header,
    print_scene_info,
    print_step,
    print_success,
)
from elbowroute.config import (
    ElbowRouteSettings,
    LoggingConfig,
    ProcessingConfig,
    RoutingConfig,
)
from elbowroute.core import SceneProcessor
from elbowroute.domain import Arrow
from elbowroute.exceptions import (
    ElbowRouteError,
    ProcessingCancelledError,
    SceneFormatError,
    SceneLoadError,
)
from elbowroute.io import SceneReader, SceneWriter

# Create the Typer app
app = typer.Typer(
    name="elbowroute",
    help="Re-route the elbow arrows of an Excalidraw scene with orthogonal paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]elbowroute[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def route(
    scene: Annotated[
        Path,
        typer.Argument(
            help="Path to input .excalidraw/.json scene file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-routed.{ext})",
        ),
    ] = None,
    step_limit: Annotated[
        int,
        typer.Option(
            "--step-limit",
            help="Maximum routing steps per arrow",
            min=1,
            max=1000,
        ),
    ] = 50,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes (1 = route in-process)",
            min=1,
        ),
    ] = 1,
    list_arrows: Annotated[
        bool,
        typer.Option(
            "--list-arrows",
            help="List all elbow arrows with their bindings and exit",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Route arrows and report without writing a file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Re-route every elbow arrow of a scene with orthogonal paths.

    Arrows marked as elbowed get fresh joint points that leave and enter
    their bound shapes from the attached side and avoid the shapes' boxes.

    Example:
        elbowroute diagram.excalidraw

    This will create diagram-routed.excalidraw next to the input file.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not scene.exists():
        print_error(
            f"Input file not found: {scene}",
            details=f"The file '{scene}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not scene.is_file():
        print_error(
            f"Input path is not a file: {scene}",
            details="Please provide a path to an Excalidraw scene file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = ElbowRouteSettings(
        routing=RoutingConfig(step_count_limit=step_limit),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
            quiet=quiet,
        ),
    )

    try:
        if list_arrows:
            _handle_list_arrows(scene, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Loading scene")

        try:
            reader = SceneReader(scene)
            reader.load()
            element_count = reader.element_count
            shape_count = len(reader.snapshot())
            elbow_arrows = _elbow_arrows(reader)
            reader.close()
        except SceneFormatError:
            raise
        except Exception as e:
            raise SceneLoadError(str(scene), str(e)) from e

        if not quiet:
            print_scene_info(str(scene), element_count, shape_count)
            print_arrows_found(
                count=len(elbow_arrows),
                arrow_ids=[a.id for a in elbow_arrows],
                verbose=verbose,
            )

        if not elbow_arrows:
            if not quiet:
                console.print("\nNo elbow arrows found. Nothing to route.")
            raise typer.Exit(code=0)

        actual_output_path = output if output is not None else SceneWriter.get_routed_path(scene)

        if not quiet:
            print_step("Routing (dry run)" if dry_run else "Routing")

        processor = SceneProcessor(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Routing {len(elbow_arrows)} arrows",
                        total=len(elbow_arrows),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        scene_path=scene,
                        output_path=actual_output_path,
                        max_workers=workers,
                        progress_callback=update_progress,
                        dry_run=dry_run,
                    )
            else:
                stats = processor.process(
                    scene_path=scene,
                    output_path=actual_output_path,
                    max_workers=workers,
                    dry_run=dry_run,
                )
        except (KeyboardInterrupt, ProcessingCancelledError):
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_path=None if dry_run else str(actual_output_path),
                total_time_s=stats.duration_seconds,
                routed=stats.routed_count,
                joints=stats.joints_added,
                non_converged=stats.non_converged_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_arrow_time_ms,
            )
            if verbose and stats.errors:
                for arrow_id, message in stats.errors:
                    console.print(f"  [red]{arrow_id}[/red]: {message}")

    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1)
    except SceneFormatError as e:
        print_error(f"Invalid scene: {e.details}")
        raise typer.Exit(code=1)
    except ElbowRouteError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _elbow_arrows(reader: SceneReader) -> list[Arrow]:
    """Non-deleted elbow arrows of a loaded scene."""
    return [a for a in reader.iter_arrows() if a.elbowed and not a.is_deleted]


def _handle_list_arrows(scene_path: Path, quiet: bool) -> None:
    """Handle --list-arrows mode.

    Args:
        scene_path: Path to scene file
        quiet: Suppress output
    """
    if not quiet:
        print_step("Loading scene")

    try:
        with SceneReader(scene_path) as reader:
            snapshot = reader.snapshot()
            if not quiet:
                print_scene_info(str(scene_path), reader.element_count, len(snapshot))
            arrows = _elbow_arrows(reader)
    except Exception as e:
        print_error(f"Could not read scene: {e}")
        raise typer.Exit(code=1)

    def describe(binding_id: str | None) -> str:
        if binding_id is None:
            return "-"
        return binding_id if binding_id in snapshot else f"{binding_id} (missing)"

    rows = [
        (
            arrow.id,
            describe(arrow.start_binding.element_id if arrow.start_binding else None),
            describe(arrow.end_binding.element_id if arrow.end_binding else None),
            len(arrow.points),
        )
        for arrow in arrows
    ]

    if not quiet:
        console.print(f"\n[bold]{len(rows)} elbow arrows[/bold]\n")

    print_arrow_table(rows)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
