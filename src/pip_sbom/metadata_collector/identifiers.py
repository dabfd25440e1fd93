# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Builders for the registry URLs and dist-info paths of a package.

All functions are pure: the same name, version, location and home page always
produce the same identifiers.
"""

from pip_sbom.adaptors.os import path_join
from pip_sbom.config.cli_configs import default_config
from pip_sbom.metadata_collector.metadata import PackageMetadata

URL_SCHEMES = ("https://", "http://")


def strip_url_scheme(url: str) -> str:
    for scheme in URL_SCHEMES:
        if url.startswith(scheme):
            return url[len(scheme) :]
    return url


def build_project_url(name: str, version: str) -> str:
    return default_config.project_url_template.format(name=name, version=version)


def build_package_url(name: str, version: str) -> str:
    return default_config.package_url_template.format(name=name, version=version)


def build_package_json_url(name: str, version: str) -> str:
    return default_config.package_json_url_template.format(name=name, version=version)


def build_dist_info_path(location: str, name: str, version: str) -> str:
    # installers write dist-info directories with "_" in place of "-"
    dist_name = name.replace("-", "_")
    return path_join(location, f"{dist_name}-{version}.dist-info")


def build_local_path(location: str, name: str) -> str:
    return path_join(location, name)


def build_license_path(dist_info_path: str) -> str:
    return path_join(dist_info_path, default_config.license_file_name)


def build_metadata_path(dist_info_path: str) -> str:
    return path_join(dist_info_path, default_config.metadata_file_name)


def build_wheel_path(dist_info_path: str) -> str:
    return path_join(dist_info_path, default_config.wheel_file_name)


def apply_identifiers(metadata: PackageMetadata) -> None:
    """Fill the derived fields of a record whose raw fields are final."""
    metadata.project_url = build_project_url(metadata.name, metadata.version)
    metadata.package_url = build_package_url(metadata.name, metadata.version)
    if metadata.home_page:
        metadata.package_url = strip_url_scheme(metadata.home_page)
    metadata.package_json_url = build_package_json_url(
        metadata.name, metadata.version
    )

    metadata.dist_info_path = build_dist_info_path(
        metadata.location, metadata.name, metadata.version
    )
    metadata.local_path = build_local_path(metadata.location, metadata.name)
    metadata.license_path = build_license_path(metadata.dist_info_path)
    metadata.metadata_path = build_metadata_path(metadata.dist_info_path)
    metadata.wheel_path = build_wheel_path(metadata.dist_info_path)
