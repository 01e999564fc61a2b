"""Command-line driver: load a record file, project it, print one record."""

from __future__ import annotations

from typing import Any

import click
from pydantic import BaseModel
from pydantic_core import to_json

from record_projection.config import LoggingConfig
from record_projection.engine.projector import ProjectionEngine
from record_projection.ingest.loader import IngestError, load_result
from record_projection.models.user import User
from record_projection.obs.logging import configure_logging
from record_projection.obs.tracing import Timer

DEMO_FIELDS: tuple[str, ...] = (
    "first_name",
    "\a\b\ncompany\n",
    "first_name",
    "first_name",
    "\t\nfirst_name\t",
    "first_name\n",
    "archived_at",
    "middle_name",
    "last_name",
    "surname",
    "picture_url",
    "trashed_at",
    "",
    "\ntz\n",
    "created_at",
    "address",
    "phone_number",
    "phone",
    "email",
    "ip_address",
    "id",
)


@click.command(name="record-projection")
@click.argument("source", type=click.Path(dir_okay=False), default="mock_data.json")
@click.option("-f", "--field", "fields", multiple=True, help="Field to keep (repeatable).")
@click.option("--dynamic", is_flag=True, help="Treat records as free-form mappings.")
@click.option("--record", "record_index", type=int, default=-1, help="Index of the record to print.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def main(
    source: str,
    fields: tuple[str, ...],
    dynamic: bool,
    record_index: int,
    verbose: bool,
    log_json: bool,
) -> None:
    """Project SOURCE (a JSON array of records) onto the requested fields."""
    configure_logging(LoggingConfig(verbose=verbose, log_json=log_json))

    click.echo(f"Parsing records from {source!r}... ", nl=False)
    with Timer() as parse_timer:
        try:
            result = load_result(source, None if dynamic else User)
        except IngestError as exc:
            click.echo("Failed.")
            raise click.ClickException(str(exc)) from exc
    click.echo(
        f"Done. Parsed {len(result.payload)} records in {parse_timer.elapsed_seconds:.3f}s"
    )

    click.echo("Performing projection... ", nl=False)
    with Timer() as project_timer:
        projected = ProjectionEngine().project(result, fields or DEMO_FIELDS)
    click.echo(f"Done in {project_timer.elapsed_seconds:.3f}s")

    if not projected.payload:
        click.echo("Projection produced no records.")
        return

    try:
        partial = projected.payload[record_index]
        original = result.payload[record_index]
    except IndexError as exc:
        raise click.BadParameter(
            f"record {record_index} out of range for {len(projected.payload)} records",
            param_hint="--record",
        ) from exc

    position = record_index % len(projected.payload)
    click.echo(f"Record {position} in payload is:")
    click.echo("Partial:")
    click.echo(_dump(partial))
    click.echo("Original:")
    click.echo(_dump(original))


def _dump(record: Any) -> str:
    if isinstance(record, BaseModel):
        return record.model_dump_json(by_alias=True, indent=2)
    return to_json(record, indent=2).decode("utf-8")


if __name__ == "__main__":
    main()
