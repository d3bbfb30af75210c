"""Main CLI application entry point.

Muse calls every analyzer the same way:

    muse-outdated <directory> <commit> <version|applicable|run>

Files are read from the current working directory; directory and commit
are accepted for the Muse contract but not used.
"""

import logging
from enum import Enum
from typing import Annotated

import typer

from muse_outdated.checker.outdated import OutdatedChecker
from muse_outdated.cli.commands.applicable import check_applicable
from muse_outdated.cli.commands.run import run_analysis
from muse_outdated.cli.commands.version import show_version
from muse_outdated.core.config import AnalyzerConfig, ConfigError, load_config
from muse_outdated.scanners.cargo import CargoManifestScanner
from muse_outdated.utils.formatting import print_error, print_warning, setup_logging

logger = logging.getLogger(__name__)


class AnalyzerCommand(str, Enum):
    """Commands Muse can ask the analyzer to perform."""

    VERSION = "version"
    APPLICABLE = "applicable"
    RUN = "run"


app = typer.Typer(
    name="muse-outdated",
    help="Muse analyzer reporting out-of-date Cargo dependencies.",
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _load_config(*, strict: bool = True) -> AnalyzerConfig:
    """Load the analyzer config.

    Args:
        strict: Exit with code 1 on config errors instead of falling back
            to the defaults.
    """
    try:
        return load_config()
    except ConfigError as e:
        if strict:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_warning(f"{e}. Using defaults.")
        return AnalyzerConfig()


@app.command()
def main(
    directory: Annotated[
        str,
        typer.Argument(help="Repository directory (unused, part of the Muse contract)."),
    ],
    commit: Annotated[
        str,
        typer.Argument(help="Commit under review (unused, part of the Muse contract)."),
    ],
    command: Annotated[
        AnalyzerCommand,
        typer.Argument(help="Analyzer command: version, applicable or run."),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr.",
        ),
    ] = False,
) -> None:
    """Report out-of-date Cargo dependencies as Muse findings."""
    setup_logging(verbose)
    logger.debug("directory=%s commit=%s command=%s", directory, commit, command.value)

    if command == AnalyzerCommand.VERSION:
        show_version()
        return

    # applicable must always exit 0
    config = _load_config(strict=command == AnalyzerCommand.RUN)
    scanner = CargoManifestScanner(
        manifest_name=config.manifest_name,
        lockfile_name=config.lockfile_name,
    )

    if command == AnalyzerCommand.APPLICABLE:
        check_applicable(scanner)
        return

    checker = OutdatedChecker(
        cargo_path=config.cargo_path,
        args=config.outdated_args,
        timeout=config.timeout_seconds,
    )
    run_analysis(scanner, checker)


if __name__ == "__main__":
    app()
