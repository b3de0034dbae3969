"""clausegate review -- general risk review of a document."""

from __future__ import annotations

import click

from clausegate.cli.formatting import format_json, format_review


@click.command()
@click.argument("document")
@click.option("--jurisdiction", default=None, help="Assess risks under this jurisdiction.")
@click.option("--json", "as_json", is_flag=True, help="Print the validated JSON payload.")
@click.pass_context
def review(ctx: click.Context, document: str, jurisdiction: str | None, as_json: bool) -> None:
    """Review DOCUMENT (a path, or - for stdin) for legal risks."""
    from clausegate.cli import _pipeline_session, read_document

    with _pipeline_session(ctx) as (pipeline, console):
        result = pipeline.analyze(
            "review", read_document(document), {"jurisdiction": jurisdiction}
        )
        if as_json:
            format_json(result, console)
        else:
            format_review(result, console)
