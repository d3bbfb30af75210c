"""Run command implementation.

Scans Cargo.toml, runs cargo-outdated and prints the findings as a
JSON array for Muse.
"""

import json
import logging
from pathlib import Path

import typer

from muse_outdated.checker.outdated import OutdatedChecker
from muse_outdated.core.response import OutdatedParseError, build_findings
from muse_outdated.models.finding import Finding
from muse_outdated.scanners.base import Scanner
from muse_outdated.utils.formatting import print_error, print_warning

logger = logging.getLogger(__name__)


def format_findings(findings: list[Finding]) -> str:
    """Serialize findings as a compact JSON array."""
    return json.dumps(
        [finding.to_dict() for finding in findings],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def run_analysis(
    scanner: Scanner,
    checker: OutdatedChecker,
    directory: Path | None = None,
) -> list[Finding]:
    """Run the analysis and print the findings.

    Args:
        scanner: Scanner for the project manifest.
        checker: cargo-outdated checker.
        directory: Project directory. If None, uses the current directory.

    Returns:
        The printed findings.

    Raises:
        typer.Exit: With code 1 if the manifest cannot be read or the
            cargo-outdated output cannot be parsed.
    """
    project_dir = directory or Path.cwd()
    manifest_path = project_dir / scanner.manifest_name

    try:
        packages = scanner.scan(manifest_path)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Unable to read {scanner.manifest_name} packages: {e}")
        raise typer.Exit(code=1) from e

    if not checker.is_available():
        print_warning(f"{checker.cargo_path} was not found in PATH.")

    result = checker.invoke()

    try:
        findings = build_findings(result, packages, manifest_name=scanner.manifest_name)
    except OutdatedParseError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug("Reporting %d findings", len(findings))
    typer.echo(format_findings(findings))
    return findings
