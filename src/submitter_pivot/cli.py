"""Command-line interface of submitter-pivot.

Thin `click` wrapper around the validator, the extractor and the renderer.
Every command works on a single pivot table produced by the GNU datamash
pivot function.
"""
from pathlib import Path
from typing import List, Optional

import click

from ._version import __version__
from .config import Settings
from .exceptions import PivotTableError
from .extraction import LATEST, extract_top_submitters, is_valid_month
from .rendering import TableRenderer
from .table import Table
from .utils import check_dir, configure_logger, set_package_level
from .validation import Severity, ValidationResult, build_engine

logger = configure_logger(__name__)

INPUT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)
OUTPUT_FILE = click.Path(dir_okay=False, path_type=Path)


def _print_results(results: List[ValidationResult], verbose: bool) -> None:
    for result in results:
        if verbose or result.severity != Severity.INFO:
            click.echo(f'  - {result.message}' if result.severity == Severity.INFO else str(result))


def _load_valid_table(ctx: click.Context, input_file: Path, verbose: bool = False) -> Table:
    """Validate the input and return its table, exiting with status 1 on failure."""
    settings: Settings = ctx.obj
    engine = build_engine(verbose=verbose, delimiter=settings.delimiter, encoding=settings.encoding)
    results = engine.validate_file(input_file)
    _print_results(results, verbose)

    if not engine.is_valid:
        click.echo('Check failed.')
        ctx.exit(1)

    return engine.table


def _write(renderer: TableRenderer, output_file: Path, table: Table) -> None:
    try:
        check_dir(output_file)
        renderer.render(output_file, table)
    except PivotTableError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(__version__, prog_name='submitter-pivot')
@click.option('--env-file', type=click.Path(dir_okay=False), default=None,
              help='Read SUBMITTER_PIVOT_* settings from this .env file.')
@click.pass_context
def cli(ctx: click.Context, env_file: Optional[str]) -> None:
    """Validates and reformats submitter pivot tables."""
    try:
        ctx.obj = Settings.from_env(dotenv_path=env_file)
    except ValueError as e:
        raise click.UsageError(str(e))

    set_package_level(ctx.obj.log_level)


@cli.command()
@click.argument('input_file', type=INPUT_FILE)
@click.option('--verbose', is_flag=True, default=False,
              help="Displays useful info about the checked file.")
@click.pass_context
def check(ctx: click.Context, input_file: Path, verbose: bool) -> None:
    """Validates if INPUT_FILE has the correct format.

    The file must be generated by the GNU "datamash" pivot function in order
    to be successfully processed.
    """
    verbose = verbose or ctx.obj.verbose

    click.echo(f'Checking {input_file}')
    _load_valid_table(ctx, input_file, verbose=verbose)
    click.echo(
        f'\nSuccessfully checked "{input_file}"\n'
        '   It is a valid submitter pivot table and can be processed\n'
    )


@cli.command()
@click.argument('input_file', type=INPUT_FILE)
@click.argument('output_file', type=OUTPUT_FILE)
@click.option('--intro', default=None, help='Text written before a Markdown table.')
@click.option('--header-row', type=click.IntRange(min=0), default=None,
              help='Index of the row underlined in a Markdown table.')
@click.pass_context
def render(ctx: click.Context, input_file: Path, output_file: Path,
           intro: Optional[str], header_row: Optional[int]) -> None:
    """Writes INPUT_FILE as CSV, or as a Markdown table when OUTPUT_FILE ends with .md."""
    table = _load_valid_table(ctx, input_file)
    renderer = TableRenderer(
        header_row=ctx.obj.header_row if header_row is None else header_row,
        introduction=intro,
    )
    _write(renderer, output_file, table)
    click.echo(f'Wrote {output_file}')


@cli.command()
@click.argument('input_file', type=INPUT_FILE)
@click.argument('output_file', type=OUTPUT_FILE)
@click.option('--month', default=LATEST, show_default=True,
              help='Last month of the extraction ("YYYY-MM" or "latest").')
@click.option('--months', type=click.IntRange(min=1), default=12, show_default=True,
              help='Number of months to total.')
@click.option('--top', type=click.IntRange(min=1), default=None,
              help='Only keep this many submitters.')
@click.option('--intro', default=None, help='Text written before a Markdown table.')
@click.pass_context
def extract(ctx: click.Context, input_file: Path, output_file: Path, month: str,
            months: int, top: Optional[int], intro: Optional[str]) -> None:
    """Extracts the top submitters of a period from INPUT_FILE into OUTPUT_FILE."""
    if not is_valid_month(month):
        raise click.BadParameter(
            f'{month} is not a valid month. Should be "YYYY-MM" and later than 2010, or "latest"',
            param_hint='--month',
        )

    table = _load_valid_table(ctx, input_file)

    try:
        extracted = extract_top_submitters(table, month=month, months=months, top=top)
    except PivotTableError as e:
        raise click.ClickException(str(e))

    logger.info(f'{len(extracted.data_rows)} submitters extracted')
    _write(TableRenderer(introduction=intro), output_file, extracted)
    click.echo(f'Wrote {output_file}')


def main() -> None:
    """Console script entry point."""
    cli(prog_name='submitter-pivot')
