"""Models for the cargo-outdated JSON report.

cargo-outdated emits one JSON document per crate when run with
``--format json``:

    {
        "crate_name": "foobar",
        "dependencies": [
            {
                "name": "baz",
                "project": "1.2.3",
                "compat": "---",
                "latest": "3.0.0",
                "kind": "Development",
                "platform": null
            }
        ]
    }

The schema is owned by cargo-outdated; these models only validate it.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class DependencyKind(str, Enum):
    """Dependency category reported by cargo-outdated."""

    NORMAL = "Normal"
    DEVELOPMENT = "Development"
    BUILD = "Build"


class OutdatedDependency(BaseModel):
    """Single out-of-date dependency entry.

    Attributes:
        name: Dependency name, possibly with a transitive path (e.g., 'serde_derive->syn').
        current_version: Version currently used by the project ('project' in JSON).
        compatible_version: Latest version allowed by the declared requirement ('compat').
        latest_version: Latest published version ('latest').
        kind: Normal, Development or Build dependency.
        platform: Target platform restriction, if any.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    current_version: Annotated[str, Field(alias="project")]
    compatible_version: Annotated[str, Field(alias="compat")]
    latest_version: Annotated[str, Field(alias="latest")]
    kind: DependencyKind
    platform: str | None = None


class OutdatedReport(BaseModel):
    """Complete cargo-outdated report for one crate.

    Attributes:
        crate_name: Name of the crate that was checked.
        dependencies: Out-of-date dependencies in the order reported.
    """

    model_config = ConfigDict(frozen=True)

    crate_name: str
    dependencies: list[OutdatedDependency]
