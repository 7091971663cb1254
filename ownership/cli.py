"""Ownership mapping CLI."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from ownership import __version__
from ownership.core.logging import setup_logging
from ownership.core.settings import get_settings
from ownership.export.json_exporter import JSONExporter, render_payload
from ownership.lexicon.registry import LexiconRegistry
from ownership.owners.engine import OwnershipEngine
from ownership.readers.registry import get_reader

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="ownership")
def main():
    """Map raw property-owner strings to typed, dated owner records."""
    setup_logging()


@main.command("map")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for owner_data.json (default: OUTPUT_DIR setting).",
)
@click.option(
    "--jurisdiction",
    default=None,
    help="Lexicon id to classify with (default: DEFAULT_JURISDICTION setting).",
)
@click.option(
    "--stdout/--no-stdout",
    "to_stdout",
    default=False,
    help="Also print the output document.",
)
def map_owners(paths: tuple[Path, ...], output_dir: Path | None, jurisdiction: str | None, to_stdout: bool):
    """Read each PATH, resolve its owners and write one merged document.

    PATH may be an HTML assessor page (.html/.htm) or an assessor JSON
    payload (.json).
    """
    settings = get_settings()
    lexicon_id = jurisdiction or settings.default_jurisdiction

    try:
        lexicon = LexiconRegistry.default().get(lexicon_id)
    except KeyError:
        raise click.BadParameter(f"unknown jurisdiction {lexicon_id!r}", param_hint="--jurisdiction")
    except ValueError as e:
        click.echo(f"Error: invalid lexicon configuration: {e}", err=True)
        raise SystemExit(1)

    engine = OwnershipEngine(lexicon=lexicon, settings=settings)
    exporter = JSONExporter()
    failed = 0

    for path in paths:
        try:
            record = get_reader(path).read()
        except (OSError, ValueError, json.JSONDecodeError) as e:
            click.echo(f"Error: cannot read {path}: {e}", err=True)
            failed += 1
            continue

        result = engine.process_record(record)
        key = exporter.add(record.record_id, result)
        click.echo(
            f"{path.name}: {key}  owners={len(result.all_owners())}"
            f"  invalid={len(result.invalid_owners)}"
            + (f"  unknown_dates={result.unknown_dates}" if result.unknown_dates else "")
        )

    if len(exporter):
        out_path = exporter.write(output_dir or Path(settings.output_dir), settings.output_filename)
        click.echo(f"Wrote {len(exporter)} record(s) to {out_path}")
        if to_stdout:
            click.echo(render_payload(exporter.payload), nl=False)

    if failed:
        click.echo(f"{failed} file(s) could not be read.", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
