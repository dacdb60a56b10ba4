"""CLI entry point for seqtest."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import click

from seqtest import __version__, bootstrap
from seqtest.config import RunConfig, load_config
from seqtest.core.errors import SeqtestError
from seqtest.loader import load_suite
from seqtest.reporting import ReporterOptions, create_reporter
from seqtest.session import run_suite

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"seqtest {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the seqtest version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for seqtest."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file (defaults to ./seqtest.yaml when present).",
)
@click.option("--reporter", type=str, help="Reporter name (terminal, json or a plugin reporter).")
@click.option("--report-path", type=str, help="When --reporter json, write to this path.")
@click.option(
    "--name",
    "names",
    multiple=True,
    help="Only run cases whose '<group> <test>' name matches this glob (repeatable).",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    paths: Tuple[str, ...],
    config_path: Optional[str],
    reporter: Optional[str],
    report_path: Optional[str],
    names: Tuple[str, ...],
    no_color: bool,
) -> None:
    """Load test files and execute their cases."""

    try:
        config = _prepare(config_path).merged(
            paths=paths,
            reporter=reporter,
            report_path=report_path,
            names=names,
            color=False if no_color else None,
        )
        suite = load_suite(_require_paths(config))
        reporter_impl = create_reporter(
            config.reporter,
            ReporterOptions(use_color=config.color, report_path=config.report_path),
        )
        exit_code = run_suite(suite, [reporter_impl], name_patterns=config.names)
    except SeqtestError as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command(name="list")
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file (defaults to ./seqtest.yaml when present).",
)
def list_cases(paths: Tuple[str, ...], config_path: Optional[str]) -> None:
    """List registered cases without running them."""

    try:
        config = _prepare(config_path).merged(paths=paths)
        suite = load_suite(_require_paths(config))
    except SeqtestError as exc:
        raise click.ClickException(str(exc)) from exc
    for case in suite.cases():
        click.echo(case.identifier())


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="seqtest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _prepare(config_path: Optional[str]) -> RunConfig:
    config = load_config(config_path)
    bootstrap(config.plugins)
    return config


def _require_paths(config: RunConfig) -> Tuple[str, ...]:
    if not config.paths:
        raise click.UsageError("No test paths given on the command line or in the config file.")
    return tuple(config.paths)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
