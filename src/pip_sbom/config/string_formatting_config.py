# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class StringFormattingConfig:
    preset_company_suffixes: list[str]
    preset_organization_keywords: list[str]
    preset_role_email_prefixes: list[str]


default_config = StringFormattingConfig(
    preset_company_suffixes=[
        "inc",
        "inc.",
        "llc",
        "llc.",
        "ltd",
        "ltd.",
        "gmbh",
        "corp",
        "corp.",
        "corporation",
        "co.",
        "s.a.",
    ],
    preset_organization_keywords=[
        "authority",
        "community",
        "company",
        "contributors",
        "developers",
        "foundation",
        "group",
        "labs",
        "maintainers",
        "organization",
        "project",
        "team",
    ],
    preset_role_email_prefixes=[
        "admin",
        "contact",
        "dev",
        "hello",
        "info",
        "maintainers",
        "office",
        "opensource",
        "oss",
        "packaging",
        "security",
        "support",
        "team",
    ],
)
