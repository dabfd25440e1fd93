# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import re
from dataclasses import dataclass

from pip_sbom.errors import EmptyModuleListError
from pip_sbom.metadata_collector.metadata import PackageMetadata, ResolutionState
from pip_sbom.module_graph.module import Module

logger = logging.getLogger("pip_sbom")


def normalize_package_name(name: str) -> str:
    # PEP 503: runs of "-", "_" and "." are equivalent, case insensitive
    return re.sub(r"[-_.]+", "-", name).lower()


@dataclass
class GraphLink:
    owner: str
    dependency: str
    state: ResolutionState


def build_dependency_graph(
    modules: list[Module], metadata_table: dict[str, PackageMetadata]
) -> list[GraphLink]:
    """Link every module to copies of the modules it requires.

    Names are compared after PEP 503 normalization. The modules are updated
    in place. A requirement whose owner or dependency is not among the modules
    is skipped, never raised. Returns one GraphLink per requirement found in
    the metadata table.
    """
    module_map: dict[str, Module] = {}
    for module in modules:
        module_map[normalize_package_name(module.name)] = module

    links: list[GraphLink] = []
    for package_metadata in metadata_table.values():
        owner = module_map.get(normalize_package_name(package_metadata.name))
        for dependency_name in package_metadata.modules:
            dependency = module_map.get(normalize_package_name(dependency_name))
            if owner is None or dependency is None:
                logger.debug(
                    "Skipping dependency %s of %s, module not resolved",
                    dependency_name,
                    package_metadata.name,
                )
                links.append(
                    GraphLink(
                        package_metadata.name, dependency_name, ResolutionState.SKIPPED
                    )
                )
                continue
            owner.modules[dependency.name] = dependency.snapshot()
            links.append(
                GraphLink(owner.name, dependency.name, ResolutionState.RESOLVED)
            )
    return links


def merge_metadata_map(
    root: dict[str, PackageMetadata], nonroot: dict[str, PackageMetadata]
) -> dict[str, PackageMetadata]:
    # root entries win over non root ones with the same key
    for key, value in root.items():
        nonroot[key] = value
    return nonroot


def remove_duplicate_root_module(modules: list[Module]) -> list[Module]:
    if not modules:
        raise EmptyModuleListError(
            "Cannot remove duplicated root module from an empty module list"
        )
    root_module = modules[0]
    return [
        module
        for index, module in enumerate(modules)
        if index == 0 or module.name != root_module.name
    ]
