# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Parser for the ``Key: Value`` text printed by ``pip show``."""

from pip_sbom.metadata_collector.metadata import PackageMetadata

KEY_NAME = "name"
KEY_VERSION = "version"
KEY_SUMMARY = "summary"
KEY_HOME_PAGE = "home-page"
KEY_AUTHOR = "author"
KEY_AUTHOR_EMAIL = "author-email"
KEY_LICENSE = "license"
KEY_LOCATION = "location"
KEY_REQUIRES = "requires"


def parse_metadata(package_details: str) -> dict[str, str]:
    """Turn raw package details into a map of lower cased keys to values.

    Every colon splits the line, the second element is the value and any
    further elements are glued back with ":" so values such as URLs or
    timestamps keep their colons. Lines without a colon or without a value
    are ignored. When a key repeats, the last line wins.
    """
    fields: dict[str, str] = {}
    for line in package_details.splitlines():
        parts = line.split(":")
        if len(parts) <= 1:
            continue
        value = parts[1].strip()
        if len(parts) > 2:
            for part in parts[2:]:
                value += ":" + part
        if not value:
            continue
        fields[parts[0].strip().lower()] = value
    return fields


def parse_requires(requires: str) -> list[str]:
    if not requires:
        return []
    return [name.strip() for name in requires.split(",") if name.strip()]


def set_metadata_values(metadata: PackageMetadata, fields: dict[str, str]) -> None:
    metadata.name = fields.get(KEY_NAME, "")
    metadata.version = fields.get(KEY_VERSION, "")
    metadata.description = fields.get(KEY_SUMMARY, "")
    metadata.home_page = fields.get(KEY_HOME_PAGE, "")
    metadata.author = fields.get(KEY_AUTHOR, "")
    metadata.author_email = fields.get(KEY_AUTHOR_EMAIL, "")
    metadata.license = fields.get(KEY_LICENSE, "")
    metadata.location = fields.get(KEY_LOCATION, "")
    metadata.modules = parse_requires(fields.get(KEY_REQUIRES, ""))


def build_metadata_record(package_details: str) -> PackageMetadata:
    metadata = PackageMetadata()
    set_metadata_values(metadata, parse_metadata(package_details))
    return metadata
