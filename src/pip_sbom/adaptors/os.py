# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import subprocess


def list_dir(path: str) -> list[str]:
    return os.listdir(path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def run_command_with_output(
    command: list[str], cwd: str | None = None, timeout: int | None = None
) -> tuple[int, str]:
    # raises subprocess.TimeoutExpired when the command outlives the timeout
    result = subprocess.run(
        command, cwd=cwd, capture_output=True, text=True, timeout=timeout
    )
    return result.returncode, result.stdout


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        try:
            with open(file_path, "r", encoding="utf-16") as file:
                return file.read()
        except UnicodeDecodeError:
            with open(file_path, "r", encoding=None) as file:
                return file.read()


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)


def write_file(file_path: str, content: str) -> None:
    with open(file_path, "w", encoding="utf-8") as file:
        file.write(content)
