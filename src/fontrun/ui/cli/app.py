"""Typer application wiring for the fontrun CLI."""

from __future__ import annotations

import typer

from fontrun.core.exceptions import exception_hint
from fontrun.version import get_version

from ._options import DebugOption, VerbosityOption
from .commands import fonts, layout
from .state import configure_logging, debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Lay out text with per-character font fallback.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the installed version and exit.",
    ),
) -> None:
    """Configure diagnostics shared by every command."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    configure_logging(state)


app.command("layout")(layout)
app.command("fonts")(fonts)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(exception_hint(exc) or str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
