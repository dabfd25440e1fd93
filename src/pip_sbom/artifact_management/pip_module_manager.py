# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
import subprocess

from pip_sbom.adaptors.os import is_directory, list_dir, run_command_with_output
from pip_sbom.config.cli_configs import default_config
from pip_sbom.errors import (
    PipCommandError,
    RootModuleResolutionError,
    UnresolvedPackagesError,
)
from pip_sbom.metadata_collector.metadata import (
    Package,
    PackageMetadata,
    ResolutionState,
)
from pip_sbom.metadata_collector.metadata_decoder import MetadataDecoder
from pip_sbom.module_graph.dependency_graph import (
    build_dependency_graph,
    merge_metadata_map,
    remove_duplicate_root_module,
)
from pip_sbom.module_graph.module import Module

logger = logging.getLogger("pip_sbom")


class PipModuleManager:
    """Lists the modules installed in a python environment using pip."""

    def __init__(
        self,
        project_path: str,
        python_executable: str = "python",
        command_timeout: int = default_config.command_timeout,
    ) -> None:
        self.project_path = project_path
        self.python_executable = python_executable
        self.command_timeout = command_timeout
        self.root_module: Module | None = None
        self.metadata_table: dict[str, PackageMetadata] = {}

    @staticmethod
    def is_valid(path: str) -> bool:
        if not is_directory(path):
            return False
        files = list_dir(path)
        return any(x in files for x in default_config.preset_project_manifest_files)

    def _run_pip(self, *args: str) -> str:
        command = [self.python_executable, "-m", "pip", *args]
        try:
            return_code, output = run_command_with_output(
                command, cwd=self.project_path, timeout=self.command_timeout
            )
        except subprocess.TimeoutExpired:
            raise PipCommandError(
                f"'{' '.join(command)}' did not finish in {self.command_timeout} seconds"
            )
        except OSError as e:
            raise PipCommandError(f"Unable to run '{' '.join(command)}': {e}")
        if return_code != 0:
            raise PipCommandError(
                f"'{' '.join(command)}' failed with exit code {return_code}"
            )
        return output

    def get_package_details(self, package_name: str) -> str:
        output = self._run_pip("show", package_name)
        if not output.strip():
            raise PipCommandError(f"pip show returned no metadata for {package_name}")
        return output

    def list_installed_packages(self) -> list[Package]:
        output = self._run_pip("list", "--format=json")
        try:
            json_out = json.loads(output)
        except json.JSONDecodeError as e:
            raise PipCommandError(f"Unable to parse pip list output: {e}")
        packages = [
            Package(name=x["name"], version=x.get("version", ""))
            for x in json_out
            if x["name"].lower() not in default_config.preset_ignored_packages
        ]
        if not packages:
            raise PipCommandError(
                "No modules installed, install the project dependencies before "
                "generating the module list, e.g.: `pip install .`"
            )
        return packages

    def push_root_module_to_env(self) -> bool:
        try:
            self._run_pip("install", ".")
        except PipCommandError as e:
            logger.warning("Unable to install the root project: %s", e)
            return False
        return True

    def _new_decoder(self) -> MetadataDecoder:
        return MetadataDecoder(self.get_package_details)

    def get_root_module(self, root_package: str) -> Module:
        if self.root_module is None:
            self.root_module = self._fetch_root_module(root_package)
        return self.root_module

    def _fetch_root_module(self, root_package: str) -> Module:
        if not is_directory(self.project_path):
            raise RootModuleResolutionError(
                f"Project path {self.project_path} is not a directory"
            )
        if self.is_valid(self.project_path) and not self.push_root_module_to_env():
            raise RootModuleResolutionError(
                f"Unable to install the project at {self.project_path}"
            )
        modules: list[Module] = []
        self.metadata_table = self._new_decoder().convert_metadata_to_modules(
            True, [Package(name=root_package)], modules
        )
        root_metadata = self.metadata_table.get(root_package.lower())
        if (
            not modules
            or root_metadata is None
            or root_metadata.state is not ResolutionState.RESOLVED
        ):
            raise RootModuleResolutionError(
                f"Root module {root_package} could not be resolved"
            )
        return modules[0]

    def list_used_modules(self, root_package: str) -> list[Module]:
        modules = [self.get_root_module(root_package)]
        packages = self.list_installed_packages()
        nonroot = self._new_decoder().convert_metadata_to_modules(
            False, packages, modules
        )
        if not any(m.state is ResolutionState.RESOLVED for m in nonroot.values()):
            raise UnresolvedPackagesError(
                f"None of the {len(packages)} installed packages could be resolved"
            )
        self.metadata_table = merge_metadata_map(self.metadata_table, nonroot)
        return remove_duplicate_root_module(modules)

    def list_modules_with_deps(self, root_package: str) -> list[Module]:
        modules = self.list_used_modules(root_package)
        build_dependency_graph(modules, self.metadata_table)
        return modules
