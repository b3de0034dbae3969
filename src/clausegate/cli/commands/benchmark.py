"""clausegate benchmark -- compare a document against a playbook."""

from __future__ import annotations

import click

from clausegate.cli.formatting import format_comparison, format_json


@click.command()
@click.argument("document")
@click.option(
    "--playbook",
    "playbook_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file describing the standard playbook.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the validated JSON payload.")
@click.pass_context
def benchmark(ctx: click.Context, document: str, playbook_path: str, as_json: bool) -> None:
    """Benchmark DOCUMENT (a path, or - for stdin) against a playbook."""
    from clausegate.cli import _pipeline_session, read_document
    from clausegate.models.playbook import load_playbook

    with _pipeline_session(ctx) as (pipeline, console):
        playbook = load_playbook(playbook_path)
        result = pipeline.analyze("comparison", read_document(document), playbook)
        if as_json:
            format_json(result, console)
        else:
            format_comparison(result, console)
