# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    project_url_template: str
    package_url_template: str
    package_json_url_template: str
    license_file_name: str
    metadata_file_name: str
    wheel_file_name: str
    preset_license_file_locations: list[str]
    preset_project_manifest_files: list[str]
    preset_ignored_packages: list[str]
    command_timeout: int
    checksum_request_timeout: int
    max_fetch_workers: int | None


default_config = Config(
    project_url_template="https://pypi.org/project/{name}/{version}",
    package_url_template="pypi.org/project/{name}/{version}",
    package_json_url_template="https://pypi.org/pypi/{name}/{version}/json",
    license_file_name="LICENSE",
    metadata_file_name="METADATA",
    wheel_file_name="WHEEL",
    preset_license_file_locations=[
        "LICENSE",
        "LICENSE.txt",
        "LICENSE.md",
        "LICENSE.rst",
        "COPYING",
        "COPYING.txt",
        "LICENCE",  # I know it is misspelled, but it is common in the wild
        "LICENCE.txt",  # I know it is misspelled, but it is common in the wild
        "NOTICE",
        "AUTHORS",
    ],
    preset_project_manifest_files=[
        "requirements.txt",
        "setup.py",
        "setup.cfg",
        "pyproject.toml",
    ],
    preset_ignored_packages=[
        "pip",
        "setuptools",
        "wheel",
    ],
    command_timeout=120,
    checksum_request_timeout=10,
    max_fetch_workers=None,
)
