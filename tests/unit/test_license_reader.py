# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from unittest.mock import call

import pytest
import pytest_mock

from pip_sbom.errors import LicenseReadError
from pip_sbom.license_reader.license_reader import (
    LicenseRecord,
    build_license_concluded,
    build_license_declared,
    cleanup_licenses,
    find_license_files,
    read_license_file,
    to_license_ref,
)

DIST_INFO = "/site/idna-3.6.dist-info"


def mock_dist_info(
    mocker: pytest_mock.MockFixture,
    files: list[str],
    licenses_dir_files: list[str] | None = None,
) -> None:
    directories = {DIST_INFO}
    if licenses_dir_files is not None:
        directories.add(f"{DIST_INFO}/licenses")

    def fake_list_dir(path: str) -> list[str]:
        if path == DIST_INFO:
            return files
        return licenses_dir_files or []

    mocker.patch(
        "pip_sbom.license_reader.license_reader.is_directory",
        side_effect=lambda path: path in directories,
    )
    mocker.patch(
        "pip_sbom.license_reader.license_reader.list_dir", side_effect=fake_list_dir
    )


def test_find_license_files_matches_known_names_case_insensitively(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["METADATA", "license.txt", "RECORD", "WHEEL", "NOTICE"])

    assert find_license_files(DIST_INFO) == [
        f"{DIST_INFO}/NOTICE",
        f"{DIST_INFO}/license.txt",
    ]


def test_find_license_files_includes_licenses_directory(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["METADATA", "licenses"], ["LICENSE.APACHE", "LICENSE.BSD"])

    assert find_license_files(DIST_INFO) == [
        f"{DIST_INFO}/licenses/LICENSE.APACHE",
        f"{DIST_INFO}/licenses/LICENSE.BSD",
    ]


def test_find_license_files_missing_dist_info_raises(
    mocker: pytest_mock.MockFixture,
) -> None:
    mocker.patch(
        "pip_sbom.license_reader.license_reader.is_directory", return_value=False
    )
    with pytest.raises(LicenseReadError):
        find_license_files(DIST_INFO)


def test_read_license_file_without_license_files_raises(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["METADATA", "RECORD"])
    with pytest.raises(LicenseReadError, match="No license file found"):
        read_license_file(DIST_INFO)


def test_read_license_file_detects_license_and_copyright(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["LICENSE.md", "METADATA"])
    scancode_api_mock = mocker.patch("scancode.api")
    scancode_api_mock.get_licenses.return_value = {
        "detected_license_expression_spdx": "BSD-3-Clause"
    }
    scancode_api_mock.get_copyrights.return_value = {
        "holders": [{"holder": "Kim Davies"}, {"holder": "Kim Davies"}],
        "authors": [],
        "copyrights": [],
    }
    mocker.patch(
        "pip_sbom.license_reader.license_reader.open_file",
        return_value="BSD 3-Clause License",
    )

    record = read_license_file(DIST_INFO)

    assert record == LicenseRecord(
        id="BSD-3-Clause",
        extracted_text="BSD 3-Clause License",
        comments=f"License detected by scancode in {DIST_INFO}/LICENSE.md",
        copyright="Kim Davies",
    )
    scancode_api_mock.get_licenses.assert_called_once_with(f"{DIST_INFO}/LICENSE.md")
    scancode_api_mock.get_copyrights.assert_called_once_with(
        f"{DIST_INFO}/LICENSE.md"
    )


def test_read_license_file_combines_several_files(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["LICENSE", "NOTICE"])
    scancode_api_mock = mocker.patch("scancode.api")
    scancode_api_mock.get_licenses.side_effect = [
        {"detected_license_expression_spdx": "Apache-2.0 AND MIT"},
        {"detected_license_expression_spdx": "Apache-2.0"},
    ]
    scancode_api_mock.get_copyrights.return_value = {"holders": []}
    mocker.patch(
        "pip_sbom.license_reader.license_reader.open_file", return_value="text"
    )

    record = read_license_file(DIST_INFO)

    assert record.id == "Apache-2.0 AND MIT"
    assert record.copyright == ""
    scancode_api_mock.get_licenses.assert_has_calls(
        [call(f"{DIST_INFO}/LICENSE"), call(f"{DIST_INFO}/NOTICE")]
    )


def test_read_license_file_nothing_detected_raises(
    mocker: pytest_mock.MockFixture,
) -> None:
    mock_dist_info(mocker, ["LICENSE"])
    scancode_api_mock = mocker.patch("scancode.api")
    scancode_api_mock.get_licenses.return_value = {
        "detected_license_expression_spdx": None
    }
    scancode_api_mock.get_copyrights.return_value = {"holders": []}

    with pytest.raises(LicenseReadError, match="No license detected"):
        read_license_file(DIST_INFO)


def test_cleanup_licenses_splits_and_removes_unknown_references() -> None:
    assert cleanup_licenses(
        [
            "MIT AND LicenseRef-scancode-unknown-license-reference",
            "MIT AND Apache-2.0",
            "LicenseRef-scancode-generic-cla",
        ]
    ) == ["MIT", "Apache-2.0"]


def test_to_license_ref_sanitizes_identifier() -> None:
    assert to_license_ref("Apache 2.0") == "LicenseRef-Apache-2.0"
    assert to_license_ref("LicenseRef-scancode-foo") == "LicenseRef-scancode-foo"


def test_build_license_declared_and_concluded_empty_is_noassertion() -> None:
    assert build_license_declared("") == "NOASSERTION"
    assert build_license_concluded("") == "NOASSERTION"


def test_build_license_declared_prefixes_unknown_licenses(
    mocker: pytest_mock.MockFixture,
) -> None:
    mocker.patch(
        "pip_sbom.license_reader.license_reader.license_spdx_exists",
        side_effect=lambda license_id: license_id == "MIT",
    )
    assert build_license_declared("MIT") == "MIT"
    assert build_license_declared("MIT AND Custom") == "MIT AND LicenseRef-Custom"
    assert build_license_concluded("MIT AND Custom") == "MIT AND Custom"
