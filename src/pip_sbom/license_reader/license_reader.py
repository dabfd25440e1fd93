# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Reads the license files shipped inside a dist-info directory."""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

import scancode.api
from license_expression import Licensing, get_spdx_licensing

from pip_sbom.adaptors.os import is_directory, list_dir, open_file, path_join
from pip_sbom.config.cli_configs import default_config
from pip_sbom.errors import LicenseReadError
from pip_sbom.metadata_collector.metadata import NOASSERTION

logger = logging.getLogger("pip_sbom")

LICENSE_REF_PREFIX = "LicenseRef-"
# PEP 639 puts license files under a licenses/ subdirectory
LICENSES_SUBDIR = "licenses"
UNKNOWN_LICENSE_REFERENCES = [
    "LicenseRef-scancode-unknown-license-reference",
    "LicenseRef-scancode-generic-cla",
]


@dataclass
class LicenseRecord:
    id: str
    extracted_text: str
    comments: str
    copyright: str


@lru_cache(maxsize=1)
def _spdx_licensing() -> Licensing:
    return get_spdx_licensing()


def license_spdx_exists(license_id: str) -> bool:
    if not license_id or license_id.startswith(LICENSE_REF_PREFIX):
        return False
    info = _spdx_licensing().validate(license_id)
    return not info.errors and not info.invalid_symbols


def to_license_ref(license_id: str) -> str:
    if license_id.startswith(LICENSE_REF_PREFIX):
        return license_id
    return LICENSE_REF_PREFIX + re.sub(r"[^A-Za-z0-9.-]", "-", license_id)


def non_spdx_license_ids(license_id: str) -> list[str]:
    """Parts of an AND expression that are not on the SPDX license list."""
    if not license_id:
        return []
    return [
        part for part in license_id.split(" AND ") if not license_spdx_exists(part)
    ]


def build_license_declared(license_id: str) -> str:
    if not license_id:
        return NOASSERTION
    return " AND ".join(
        part if license_spdx_exists(part) else to_license_ref(part)
        for part in license_id.split(" AND ")
    )


def build_license_concluded(license_id: str) -> str:
    if not license_id:
        return NOASSERTION
    return license_id


def cleanup_licenses(licenses: list[str]) -> list[str]:
    ret_licenses: list[str] = []
    for license in licenses:
        for part in license.split(" AND "):
            if part not in ret_licenses and part not in UNKNOWN_LICENSE_REFERENCES:
                ret_licenses.append(part)
    return ret_licenses


def find_license_files(dist_info_path: str) -> list[str]:
    if not is_directory(dist_info_path):
        raise LicenseReadError(f"dist-info directory {dist_info_path} does not exist")
    candidate_names = [f.lower() for f in default_config.preset_license_file_locations]

    candidates = [
        path_join(dist_info_path, f)
        for f in sorted(list_dir(dist_info_path))
        if f.lower() in candidate_names
    ]
    licenses_dir = path_join(dist_info_path, LICENSES_SUBDIR)
    if is_directory(licenses_dir):
        # every file under licenses/ is a license file, whatever its name
        candidates.extend(
            path_join(licenses_dir, f)
            for f in sorted(list_dir(licenses_dir))
            if not is_directory(path_join(licenses_dir, f))
        )
    return candidates


def read_license_file(dist_info_path: str) -> LicenseRecord:
    """Detect the license of an installed package from its dist-info files.

    Raises LicenseReadError when no license file exists or scancode can not
    detect any license in them.
    """
    files = find_license_files(dist_info_path)
    if not files:
        raise LicenseReadError(f"No license file found in {dist_info_path}")

    detected: list[str] = []
    texts: list[str] = []
    holders: list[str] = []
    scanned_files: list[str] = []
    for file_path in files:
        license = scancode.api.get_licenses(file_path)
        expression = license.get("detected_license_expression_spdx")
        if expression:
            detected.append(expression)
            texts.append(open_file(file_path))
            scanned_files.append(file_path)
        copyright = scancode.api.get_copyrights(file_path)
        for c in copyright.get("holders", []):
            if c["holder"] not in holders:
                holders.append(c["holder"])

    licenses = cleanup_licenses(detected)
    if not licenses:
        raise LicenseReadError(f"No license detected in {dist_info_path}")

    logger.debug("Detected licenses %s in %s", licenses, dist_info_path)
    return LicenseRecord(
        id=" AND ".join(licenses),
        extracted_text="\n".join(texts),
        comments="License detected by scancode in " + ", ".join(scanned_files),
        copyright=", ".join(holders),
    )
