# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from pip_sbom.cli.main_cli import app
from pip_sbom.errors import RootModuleResolutionError
from pip_sbom.module_graph.module import Module


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def linked_modules() -> list[Module]:
    root = Module(name="my-app", version="0.1.0", root=True)
    idna = Module(name="idna", version="3.6", license_declared="BSD-3-Clause")
    root.modules["idna"] = idna.snapshot()
    return [root, idna]


@patch("pip_sbom.cli.list_modules_command.setup_logging")
@patch("pip_sbom.cli.list_modules_command.PipModuleManager")
def test_list_modules_prints_json_report(
    manager_mock: Mock, setup_logging_mock: Mock, runner: CliRunner
) -> None:
    manager_mock.return_value.list_modules_with_deps.return_value = linked_modules()

    result = runner.invoke(
        app, ["list-modules", "project", "my-app", "--python", "venv/bin/python"]
    )

    assert result.exit_code == 0
    manager_mock.assert_called_once_with("project", python_executable="venv/bin/python")
    manager_mock.return_value.list_modules_with_deps.assert_called_once_with("my-app")
    report = json.loads(result.stdout)
    assert [m["name"] for m in report] == ["my-app", "idna"]
    assert report[0]["root"] is True
    assert report[0]["modules"]["idna"]["license_declared"] == "BSD-3-Clause"
    setup_logging_mock.assert_called_once_with(30)


@patch("pip_sbom.cli.list_modules_command.setup_logging")
@patch("pip_sbom.cli.list_modules_command.PipModuleManager")
def test_list_modules_only_root(
    manager_mock: Mock, setup_logging_mock: Mock, runner: CliRunner
) -> None:
    manager_mock.return_value.get_root_module.return_value = Module(
        name="my-app", version="0.1.0", root=True
    )

    result = runner.invoke(
        app, ["list-modules", "project", "my-app", "--only-root", "--log-level", "debug"]
    )

    assert result.exit_code == 0
    manager_mock.return_value.list_modules_with_deps.assert_not_called()
    assert [m["name"] for m in json.loads(result.stdout)] == ["my-app"]
    setup_logging_mock.assert_called_once_with(10)


@patch("pip_sbom.cli.list_modules_command.write_file")
@patch("pip_sbom.cli.list_modules_command.setup_logging")
@patch("pip_sbom.cli.list_modules_command.PipModuleManager")
def test_list_modules_writes_output_file(
    manager_mock: Mock,
    setup_logging_mock: Mock,
    write_file_mock: Mock,
    runner: CliRunner,
) -> None:
    manager_mock.return_value.list_modules_with_deps.return_value = linked_modules()

    result = runner.invoke(
        app, ["list-modules", "project", "my-app", "-o", "modules.json"]
    )

    assert result.exit_code == 0
    write_file_mock.assert_called_once()
    path, content = write_file_mock.call_args.args
    assert path == "modules.json"
    assert json.loads(content)[1]["name"] == "idna"


@patch("pip_sbom.cli.list_modules_command.setup_logging")
@patch("pip_sbom.cli.list_modules_command.PipModuleManager")
def test_list_modules_root_failure_exits_with_error(
    manager_mock: Mock, setup_logging_mock: Mock, runner: CliRunner
) -> None:
    manager_mock.return_value.list_modules_with_deps.side_effect = (
        RootModuleResolutionError("Root module my-app could not be resolved")
    )

    result = runner.invoke(app, ["list-modules", "project", "my-app"])

    assert result.exit_code == 1
    assert "Error: Root module my-app could not be resolved" in result.output


@patch("pip_sbom.cli.list_modules_command.PipModuleManager")
def test_list_modules_invalid_log_level(manager_mock: Mock, runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["list-modules", "project", "my-app", "--log-level", "LOUD"]
    )

    assert result.exit_code == 1
    assert "Error: Invalid log level 'LOUD'." in result.output
    manager_mock.assert_not_called()
