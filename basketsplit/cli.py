import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from basketsplit.config import (
    SplitConfig,
    create_default_config,
    from_environment,
    get_config,
)
from basketsplit.exceptions import BasketSplitError, ConfigurationError
from basketsplit.loader import SourceLoader
from basketsplit.output import ResultWriter
from basketsplit.splitter import BasketSplitter, SplitReport

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name='basketsplit',
    help='Split shopping baskets into as few delivery groups as possible',
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_settings(
    config: str | None,
    catalogue: str | None,
    output: str | None,
    strict: bool | None,
) -> SplitConfig:
    if catalogue and not config:
        settings = from_environment(catalogue=catalogue)
    else:
        settings = get_config(config)

    overrides = {
        'catalogue': catalogue,
        'output': output,
        'strict': strict,
    }
    return settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )


def _report_dropped(report: SplitReport, label: str) -> None:
    if report.unknown:
        err_console.print(
            f'[yellow]{label}Skipped {len(report.unknown)} products missing from the '
            f'catalogue:[/yellow] {escape(", ".join(report.unknown))}'
        )
    if report.unassignable:
        err_console.print(
            f'[yellow]{label}Skipped {len(report.unassignable)} products without a '
            f'delivery method:[/yellow] {escape(", ".join(report.unassignable))}'
        )


@app.command()
def split(
    baskets: Annotated[
        list[str] | None,
        typer.Argument(
            help='Paths or URLs of baskets (JSON or YAML lists of products)'
        ),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
    ] = None,
    catalogue: Annotated[
        str | None,
        typer.Option('--catalogue', help='Path or URL of the product catalogue'),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='Write the result to this file'),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            '--strict/--no-strict',
            help='Reject catalogue products without a delivery method',
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log every selection step')
    ] = False,
) -> None:
    """Split one or more baskets into delivery groups.

    The catalogue and basket come from the options, or from a configuration
    file when none are given. With several baskets the result is keyed by
    basket source.

    Examples:
        basketsplit split basket.json --catalogue config.json
        basketsplit split basket-1.json basket-2.json --catalogue config.json
        basketsplit split --config basketsplit.yaml -o result.json
    """
    _configure_logging(verbose)

    try:
        settings = _resolve_settings(config, catalogue, output, strict)
        sources = list(baskets or []) or ([settings.basket] if settings.basket else [])
        if not sources:
            raise ConfigurationError('No basket to split', field='basket')

        loader = SourceLoader()
        splitter = BasketSplitter(
            loader.load_catalogue(settings.catalogue, strict=settings.strict)
        )
        reports = {
            source: splitter.split_report(loader.load_basket(source))
            for source in sources
        }

        if len(reports) == 1:
            document = reports[sources[0]].groups
            summary = f'into {len(document)} delivery groups'
        else:
            document = {source: report.groups for source, report in reports.items()}
            summary = f'from {len(reports)} baskets'

        writer = ResultWriter(indent=settings.indent)
        if settings.output:
            writer.write(document, settings.output)
            assigned = sum(report.assigned for report in reports.values())
            console.print(
                f'[green]Split {assigned} products {summary}[/green] '
                f'-> {escape(settings.output)}'
            )
        else:
            typer.echo(writer.dumps(document))

        for source, report in reports.items():
            _report_dropped(report, f'{escape(source)}: ' if len(reports) > 1 else '')

    except (BasketSplitError, FileNotFoundError) as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)


@app.command()
def init(
    path: Annotated[
        str, typer.Option('--path', '-p', help='Where to write the configuration file')
    ] = 'basketsplit.yaml',
) -> None:
    """Create a starter configuration file."""
    target = Path(path)
    if target.exists():
        console.print(f'[red]Error:[/red] {escape(path)} already exists')
        raise typer.Exit(1)

    target.write_text(yaml.safe_dump(create_default_config(), sort_keys=False))
    console.print(f'[green]Created {escape(path)}[/green]')


@app.command()
def version() -> None:
    """Show the version of basketsplit."""
    from basketsplit import __version__

    console.print(f'basketsplit version: {__version__}')


if __name__ == '__main__':
    app()
