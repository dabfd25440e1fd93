# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field, replace
from enum import Enum


class ContactType(Enum):
    PERSON = "Person"
    ORGANIZATION = "Organization"


class HashAlgorithm(Enum):
    SHA256 = "SHA256"


@dataclass
class SupplierContact:
    type: ContactType
    name: str
    email: str


@dataclass
class CheckSum:
    algorithm: HashAlgorithm
    value: str


@dataclass
class License:
    id: str
    name: str
    extracted_text: str
    comments: str


@dataclass
class Module:
    """SBOM facing representation of a resolved python package."""

    name: str
    version: str
    path: str = ""
    local_path: str = ""
    package_url: str = ""
    check_sum: CheckSum | None = None
    package_home_page: str = ""
    package_comment: str = ""
    supplier: SupplierContact | None = None
    license_declared: str = ""
    license_concluded: str = ""
    comments_license: str = ""
    copyright: str = ""
    other_license: list[License] = field(default_factory=list)
    root: bool = False
    modules: dict[str, "Module"] = field(default_factory=dict)

    def snapshot(self) -> "Module":
        """Return a detached copy of this module to embed in a dependency map.

        Every field is copied, nested values included, so later changes to
        this module (or to the copy) never leak to the other side. The copy
        starts with an empty dependency map of its own.
        """
        return replace(
            self,
            check_sum=replace(self.check_sum) if self.check_sum else None,
            supplier=replace(self.supplier) if self.supplier else None,
            other_license=[replace(lic) for lic in self.other_license],
            modules={},
        )
