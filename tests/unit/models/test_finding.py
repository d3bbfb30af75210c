"""Unit tests for Finding and DeclaredPackage models."""

import pytest
from muse_outdated.models.finding import NO_FILE, Finding, FindingType
from muse_outdated.models.package import DeclaredPackage


class TestFinding:
    """Tests for Finding dataclass."""

    def test_to_dict_has_exactly_four_keys(self) -> None:
        """Serialized findings carry type, message, file and line only."""
        finding = Finding(
            type=FindingType.OUT_OF_DATE,
            message="### serde\nVersion is at 1.0 but could be upgrade to 2.0",
            file="Cargo.toml",
            line=12,
        )

        assert finding.to_dict() == {
            "type": "Out of date",
            "message": "### serde\nVersion is at 1.0 but could be upgrade to 2.0",
            "file": "Cargo.toml",
            "line": 12,
        }

    def test_defaults(self) -> None:
        """File defaults to the N/A sentinel and line to 0."""
        finding = Finding(type=FindingType.STDERR, message="boom")

        assert finding.file == NO_FILE == "N/A"
        assert finding.line == 0
        assert finding.to_dict()["type"] == "stderr"

    def test_negative_line_rejected(self) -> None:
        """Line numbers cannot be negative."""
        with pytest.raises(ValueError, match="negative"):
            Finding(type=FindingType.STDERR, message="boom", line=-1)


class TestDeclaredPackage:
    """Tests for DeclaredPackage dataclass."""

    def test_matches_exact_name_and_version(self) -> None:
        """matches requires both name and version to be equal."""
        pkg = DeclaredPackage(name="execute", version="0.2.8", line=11)

        assert pkg.matches("execute", "0.2.8")
        assert not pkg.matches("execute", "0.2.9")
        assert not pkg.matches("serde", "0.2.8")

    def test_no_semantic_version_matching(self) -> None:
        """Version strings are compared literally."""
        pkg = DeclaredPackage(name="serde_json", version="1.0", line=10)

        assert not pkg.matches("serde_json", "1.0.0")

    def test_negative_line_rejected(self) -> None:
        """Line numbers cannot be negative."""
        with pytest.raises(ValueError, match="negative"):
            DeclaredPackage(name="serde", version="1.0", line=-1)
