# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from enum import Enum

from pip_sbom.module_graph.module import CheckSum

# Value used for every field we could not assert, distinct from an empty
# value that was actually found in the package metadata.
NOASSERTION = "NOASSERTION"


class ResolutionState(Enum):
    RESOLVED = "Resolved"
    UNASSERTED = "Unasserted"
    SKIPPED = "Skipped"


@dataclass
class Package:
    """A package as listed by the environment, before any metadata is fetched."""

    name: str
    version: str = ""


@dataclass
class PackageMetadata:
    """Metadata class to store the pip metadata of a single package."""

    name: str = ""
    version: str = ""
    description: str = ""
    home_page: str = ""
    author: str = ""
    author_email: str = ""
    license: str = ""
    location: str = ""
    modules: list[str] = field(default_factory=list)  # names from "Requires"

    # derived from name, version, location and home_page
    project_url: str = ""
    package_url: str = ""
    package_json_url: str = ""
    dist_info_path: str = ""
    local_path: str = ""
    license_path: str = ""
    metadata_path: str = ""
    wheel_path: str = ""

    checksum: CheckSum | None = None
    state: ResolutionState = ResolutionState.SKIPPED
    error: str | None = None


def unasserted_metadata(package_name: str, error: str | None = None) -> PackageMetadata:
    """Build a record where everything but the name is NOASSERTION."""
    return PackageMetadata(
        name=package_name,
        version=NOASSERTION,
        description=NOASSERTION,
        home_page=NOASSERTION,
        author=NOASSERTION,
        author_email=NOASSERTION,
        license=NOASSERTION,
        location=NOASSERTION,
        modules=[],
        project_url=NOASSERTION,
        package_url=NOASSERTION,
        package_json_url=NOASSERTION,
        dist_info_path=NOASSERTION,
        local_path=NOASSERTION,
        license_path=NOASSERTION,
        metadata_path=NOASSERTION,
        wheel_path=NOASSERTION,
        checksum=None,
        state=ResolutionState.UNASSERTED,
        error=error,
    )
