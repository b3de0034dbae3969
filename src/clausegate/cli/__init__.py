"""ClauseGate CLI -- run validated contract analyses from the terminal.

This module is NEVER imported from clausegate/__init__.py.
It is only loaded via the ``clausegate`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install clausegate[cli]"
    ) from None

from clausegate.cli.formatting import format_error, get_console

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from clausegate.pipeline import Pipeline


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline activity to stderr.")
@click.option(
    "--standin",
    is_flag=True,
    envvar="CLAUSEGATE_FORCE_STANDIN",
    help="Use the deterministic stand-in generator even if an API key is set.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, standin: bool) -> None:
    """ClauseGate: validated structured analysis of contracts."""
    ctx.ensure_object(dict)
    ctx.obj["standin"] = standin
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(show_time=False, show_path=False)],
            force=True,
        )
        # keep httpx wire logging out of the pipeline trace
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    elif not logging.getLogger("clausegate").handlers:
        # pipeline diagnostics stay out of the terminal unless --verbose
        logging.getLogger("clausegate").addHandler(logging.NullHandler())


def read_document(source: str) -> str:
    """Read document text from a path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as fh:
        return fh.read()


@contextmanager
def _pipeline_session(ctx: click.Context) -> Iterator[tuple[Pipeline, Console]]:
    """Context manager that builds a Pipeline, yields (pipeline, console), and handles cleanup.

    Ensures the generator is closed on exit and formats exceptions as CLI errors.
    """
    from clausegate.config import ClauseGateConfig, build_generator
    from clausegate.exceptions import CorrectionExhaustedError
    from clausegate.pipeline import Pipeline

    console = get_console()
    try:
        config = ClauseGateConfig.from_env()
        if ctx.obj.get("standin"):
            config = config.model_copy(update={"force_standin": True})
        generator = build_generator(config)
        try:
            yield Pipeline(generator, max_corrections=config.max_corrections), console
        finally:
            generator.close()
    except SystemExit:
        raise
    except CorrectionExhaustedError as e:
        logger.debug("Last diagnostics for '%s': %s", e.contract, e.diagnostics)
        format_error(
            f"Analysis failed: the generated result did not pass validation after "
            f"{e.attempts} attempt(s). Try again, or use --verbose for details.",
            console,
        )
        raise SystemExit(1) from None
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from clausegate.cli.commands.benchmark import benchmark  # noqa: E402
from clausegate.cli.commands.review import review  # noqa: E402
from clausegate.cli.commands.contracts import contracts  # noqa: E402

cli.add_command(benchmark)
cli.add_command(review)
cli.add_command(contracts)
