# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

from pip_sbom.module_graph.module import Module
from pip_sbom.report_generator.writters.abstract_reporting_writter import (
    ReportingWritter,
)


def _enum_values(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: v.value if isinstance(v, Enum) else v for k, v in pairs}


class JSONReportingWritter(ReportingWritter):
    def write(self, modules: list[Module]) -> str:
        return json.dumps(
            [asdict(module, dict_factory=_enum_values) for module in modules],
            indent=2,
        )
