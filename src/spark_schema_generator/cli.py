"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from spark_schema_generator.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_generation,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="spark-schema-generator")
@click.option(
    "--model",
    "model_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the document model definition (.py, .yaml, .yml or .json)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the Spark schema JSON file to write (prints to stdout when omitted)",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log translation progress to stderr.",
)
def cli(model_path: str | None, output_path: str | None, verbose: bool) -> None:
    """Generate Spark StructType schema JSON from a document model."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=_LOG_FORMAT)
    try:
        outcome = execute_schema_generation(
            RunRequest(model_path=model_path, output_path=output_path)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path), err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
