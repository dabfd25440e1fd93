# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Metadata decoder fetches the pip metadata of many packages concurrently and
turns it into modules ready to be linked in a dependency graph."""

import logging
import re
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from pip_sbom.config import string_formatting_config
from pip_sbom.config.cli_configs import default_config
from pip_sbom.errors import LicenseReadError
from pip_sbom.license_reader.license_reader import (
    LicenseRecord,
    build_license_concluded,
    build_license_declared,
    non_spdx_license_ids,
    read_license_file,
    to_license_ref,
)
from pip_sbom.metadata_collector.checksum import get_package_checksum
from pip_sbom.metadata_collector.identifiers import apply_identifiers
from pip_sbom.metadata_collector.metadata import (
    Package,
    PackageMetadata,
    ResolutionState,
    unasserted_metadata,
)
from pip_sbom.metadata_collector.record_parser import build_metadata_record
from pip_sbom.module_graph.module import (
    CheckSum,
    ContactType,
    HashAlgorithm,
    License,
    Module,
    SupplierContact,
)

logger = logging.getLogger("pip_sbom")

GetPackageDetailsFunc = Callable[[str], str]
GetChecksumFunc = Callable[[str, str, str], CheckSum]
ReadLicenseFunc = Callable[[str], LicenseRecord]


def is_author_an_organization(author: str, author_email: str) -> bool:
    formatting = string_formatting_config.default_config
    tokens = [t for t in re.split(r"[\s,;()<>\"']+", author.lower()) if t]
    for token in tokens:
        if token in formatting.preset_company_suffixes:
            return True
        if token.rstrip(".") in formatting.preset_organization_keywords:
            return True

    local_part = author_email.lower().split("@", 1)[0].strip()
    return local_part in formatting.preset_role_email_prefixes


class MetadataDecoder:
    def __init__(
        self,
        get_package_details: GetPackageDetailsFunc,
        get_checksum: GetChecksumFunc | None = None,
        read_license: ReadLicenseFunc | None = None,
        max_workers: int | None = default_config.max_fetch_workers,
    ) -> None:
        self.get_package_details = get_package_details
        self.get_checksum = get_checksum or get_package_checksum
        self.read_license = read_license or read_license_file
        self.max_workers = max_workers

    def build_metadata(self, package_name: str) -> PackageMetadata:
        """Fetch, parse and derive the metadata of a single package.

        Any failure degrades only this package to a NOASSERTION record.
        """
        try:
            package_details = self.get_package_details(package_name)
        except Exception as e:
            logger.warning(
                "Unable to fetch metadata for %s, marking it as NOASSERTION: %s",
                package_name,
                e,
            )
            return unasserted_metadata(package_name, str(e))

        try:
            metadata = build_metadata_record(package_details)
            if not metadata.name:
                metadata.name = package_name
            apply_identifiers(metadata)
        except Exception as e:
            logger.warning(
                "Unable to parse metadata for %s, marking it as NOASSERTION: %s",
                package_name,
                e,
            )
            return unasserted_metadata(package_name, str(e))

        metadata.checksum = self._compute_checksum(metadata)
        metadata.state = ResolutionState.RESOLVED
        return metadata

    def _compute_checksum(self, metadata: PackageMetadata) -> CheckSum:
        try:
            return self.get_checksum(
                metadata.name, metadata.package_json_url, metadata.wheel_path
            )
        except Exception as e:
            logger.warning("Unable to compute checksum for %s: %s", metadata.name, e)
            return CheckSum(algorithm=HashAlgorithm.SHA256, value="")

    def get_metadata_list(
        self, packages: list[Package]
    ) -> tuple[dict[str, PackageMetadata], list[PackageMetadata]]:
        """Resolve the metadata of every package, one task per package.

        Returns a table keyed by lower cased package name and the list of
        records in the order of the packages. Nothing is returned before the
        slowest task finishes.
        """
        if not packages:
            return {}, []

        logger.debug("Fetching metadata for %d packages", len(packages))
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="pip-metadata"
        ) as executor:
            futures = [
                executor.submit(self.build_metadata, package.name)
                for package in packages
            ]
        # leaving the executor block waited for all the tasks of this batch
        metadata_list = [future.result() for future in futures]

        metadata_table: dict[str, PackageMetadata] = {}
        for package, metadata in zip(packages, metadata_list):
            metadata_table[package.name.lower()] = metadata
        return metadata_table, metadata_list

    def build_module(self, root: bool, metadata: PackageMetadata) -> Module:
        module = Module(
            name=metadata.name,
            version=metadata.version,
            path=metadata.project_url,
            local_path=metadata.local_path,
            package_url=metadata.package_url,
            check_sum=metadata.checksum,
            package_home_page=metadata.home_page,
            package_comment=metadata.description,
            root=root,
        )

        if metadata.author_email:
            contact_type = ContactType.PERSON
            if is_author_an_organization(metadata.author, metadata.author_email):
                contact_type = ContactType.ORGANIZATION
            module.supplier = SupplierContact(
                type=contact_type,
                name=metadata.author,
                email=metadata.author_email,
            )
        return module

    def build_module_license(self, dist_info_path: str, module: Module) -> None:
        try:
            license_record = self.read_license(dist_info_path)
        except LicenseReadError as e:
            logger.debug("No license information for %s: %s", module.name, e)
            return
        except Exception as e:
            logger.warning("Unable to read the license of %s: %s", module.name, e)
            return

        module.license_declared = build_license_declared(license_record.id)
        module.license_concluded = build_license_concluded(license_record.id)
        module.copyright = license_record.copyright
        module.comments_license = license_record.comments
        for license_id in non_spdx_license_ids(license_record.id):
            module.other_license.append(
                License(
                    id=to_license_ref(license_id),
                    name=license_id,
                    extracted_text=license_record.extracted_text,
                    comments=license_record.comments,
                )
            )

    def convert_metadata_to_modules(
        self, is_root: bool, packages: list[Package], modules: list[Module]
    ) -> dict[str, PackageMetadata]:
        """Append one module per package to modules, in package order.

        Returns the metadata table used to link the dependency graph.
        """
        metadata_table, metadata_list = self.get_metadata_list(packages)
        built = [
            (self.build_module(is_root, metadata), metadata)
            for metadata in metadata_list
        ]

        for module, metadata in built:
            if metadata.state is not ResolutionState.RESOLVED:
                continue
            self.build_module_license(metadata.dist_info_path, module)

        modules.extend(module for module, _ in built)
        unasserted = sum(
            1 for _, m in built if m.state is ResolutionState.UNASSERTED
        )
        logger.info(
            "Converted %d packages to modules (%d unasserted)", len(built), unasserted
        )
        return metadata_table
