# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from pip_sbom.module_graph.module import Module
from pip_sbom.report_generator.writters.abstract_reporting_writter import (
    ReportingWritter,
)


class ReportGenerator:
    def __init__(self, reporting_writer: ReportingWritter):
        self.reporting_writer = reporting_writer

    def generate_report(self, modules: list[Module]) -> str:
        return self.reporting_writer.write(modules)
