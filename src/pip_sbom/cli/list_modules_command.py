# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command listing the modules of a python project with their dependency graph

import logging
from typing import Annotated, Optional

import typer

from pip_sbom.adaptors.os import write_file
from pip_sbom.artifact_management.pip_module_manager import PipModuleManager
from pip_sbom.errors import PipSbomError
from pip_sbom.report_generator.report_generator import ReportGenerator
from pip_sbom.report_generator.writters.json_reporting_writter import (
    JSONReportingWritter,
)
from pip_sbom.utils.logging import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def list_modules(
    project_path: Annotated[
        str,
        typer.Argument(help="Path to the python project to inventory."),
    ],
    root_package: Annotated[
        str,
        typer.Argument(help="Distribution name of the project itself."),
    ],
    python_executable: Annotated[
        str,
        typer.Option(
            "--python",
            help="Python interpreter of the environment where the project is installed.",
        ),
    ] = "python",
    only_root: Annotated[
        bool,
        typer.Option(
            "--only-root",
            help="Only report the root module, without listing its dependencies.",
        ),
    ] = False,
    output_file: Annotated[
        Optional[str],
        typer.Option(
            "--output",
            "-o",
            help="Write the JSON module list to this file instead of stdout.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Log level, one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        ),
    ] = "WARNING",
) -> None:
    """
    List the modules installed for a python project and link them in a dependency graph.
    """
    if log_level.upper() not in LOG_LEVELS:
        typer.echo(f"Error: Invalid log level '{log_level}'.", err=True)
        raise typer.Exit(code=1)
    setup_logging(getattr(logging, log_level.upper()))

    manager = PipModuleManager(project_path, python_executable=python_executable)
    try:
        if only_root:
            modules = [manager.get_root_module(root_package)]
        else:
            modules = manager.list_modules_with_deps(root_package)
    except PipSbomError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    report = ReportGenerator(JSONReportingWritter()).generate_report(modules)
    if output_file is None:
        typer.echo(report)
    else:
        write_file(output_file, report)
