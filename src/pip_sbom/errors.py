# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.


class PipSbomError(Exception):
    pass


class PipCommandError(PipSbomError):
    """Raised when a pip command exits with an error or times out."""


class LicenseReadError(PipSbomError):
    """Raised when no license information can be read from a dist-info directory."""


class RootModuleResolutionError(PipSbomError):
    pass


class EmptyModuleListError(PipSbomError):
    pass


class UnresolvedPackagesError(PipSbomError):
    """Raised when not a single installed package could be resolved."""
