# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any

import requests

from pip_sbom.adaptors.os import open_file
from pip_sbom.config.cli_configs import default_config
from pip_sbom.metadata_collector.record_parser import parse_metadata
from pip_sbom.module_graph.module import CheckSum, HashAlgorithm

logger = logging.getLogger("pip_sbom")

BDIST_WHEEL = "bdist_wheel"


def get_wheel_last_tag(wheel_path: str) -> str | None:
    try:
        wheel_details = open_file(wheel_path)
    except OSError:
        return None
    return parse_metadata(wheel_details).get("tag")


def _get_metadata_from_pypi(package_json_url: str) -> dict[str, Any] | None:
    try:
        response = requests.get(
            package_json_url, timeout=default_config.checksum_request_timeout
        )
    except requests.RequestException as e:
        logger.warning("Failed to reach %s: %s", package_json_url, e)
        return None
    if response.status_code != 200:
        logger.warning(
            "pypi.org is returning a %s for %s. Skipping checksum.",
            response.status_code,
            package_json_url,
        )
        return None
    return response.json()  # type: ignore


def _select_digest(files: list[dict[str, Any]], wheel_tag: str | None) -> str:
    wheels = [f for f in files if f.get("packagetype") == BDIST_WHEEL]
    if wheel_tag is not None:
        tagged = [f for f in wheels if f.get("filename", "").endswith(f"-{wheel_tag}.whl")]
        candidates = tagged or wheels or files
    else:
        candidates = wheels or files
    for candidate in candidates:
        digest = candidate.get("digests", {}).get("sha256")
        if digest:
            return str(digest)
    return ""


def get_package_checksum(
    package_name: str, package_json_url: str, wheel_path: str
) -> CheckSum:
    """Best effort SHA256 of the distribution file installed for a package.

    An empty value is returned when the digest can not be determined.
    """
    wheel_tag = get_wheel_last_tag(wheel_path)
    pypi_metadata = _get_metadata_from_pypi(package_json_url)
    if pypi_metadata is None:
        return CheckSum(algorithm=HashAlgorithm.SHA256, value="")

    digest = _select_digest(pypi_metadata.get("urls", []), wheel_tag)
    if not digest:
        logger.warning("No sha256 digest published for %s.", package_name)
    return CheckSum(algorithm=HashAlgorithm.SHA256, value=digest)
