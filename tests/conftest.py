"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import shutil
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def cargo_manifest() -> Path:
    """Path to the sample Cargo.toml fixture."""
    return FIXTURES_DIR / "Cargo.toml"


@pytest.fixture
def cargo_project(tmp_path: Path, cargo_manifest: Path) -> Path:
    """Project directory containing Cargo.toml and Cargo.lock."""
    shutil.copy(cargo_manifest, tmp_path / "Cargo.toml")
    (tmp_path / "Cargo.lock").write_text("# This file is automatically @generated by Cargo.\n")
    return tmp_path


@pytest.fixture
def outdated_empty_output() -> str:
    """cargo-outdated output with no out-of-date dependencies."""
    return """
    {
        "crate_name": "foobar",
        "dependencies": []
    }
    """


@pytest.fixture
def outdated_single_output() -> str:
    """cargo-outdated output with one development dependency."""
    return """
    {
        "crate_name": "foobar",
        "dependencies": [
            {
                "name": "baz",
                "project": "1.2.3",
                "compat": "---",
                "latest": "3.0.0",
                "kind": "Development",
                "platform": "null"
            }
        ]
    }
    """


@pytest.fixture
def outdated_multiple_output() -> str:
    """cargo-outdated output with transitive dependencies."""
    return """
    {
        "crate_name": "muse-rust-analyzer",
        "dependencies": [
            {
                "name": "execute-command-macro-impl->syn",
                "project": "1.0.68",
                "compat": "1.0.69",
                "latest": "1.0.69",
                "kind": "Normal",
                "platform": null
            },
            {
                "name": "serde_derive->syn",
                "project": "1.0.68",
                "compat": "1.0.69",
                "latest": "1.0.69",
                "kind": "Normal",
                "platform": null
            }
        ]
    }
    """


@pytest.fixture
def outdated_manifest_output() -> str:
    """cargo-outdated output matching the Cargo.toml fixture."""
    return """
    {
        "crate_name": "muse-rust-analyzer",
        "dependencies": [
            {
                "name": "execute",
                "project": "0.2.8",
                "compat": "0.2.9",
                "latest": "0.2.13",
                "kind": "Normal",
                "platform": null
            },
            {
                "name": "serde_json->itoa",
                "project": "0.4.7",
                "compat": "0.4.8",
                "latest": "1.0.10",
                "kind": "Normal",
                "platform": null
            }
        ]
    }
    """
