# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import subprocess
import tempfile
from typing import Callable, Iterator


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def walk_directory(
    path: str, onerror: Callable[[OSError], None] | None = None
) -> Iterator[tuple[str, list[str], list[str]]]:
    return os.walk(path, onerror=onerror)


def output_from_command(command: list[str]) -> str | None:
    """Run a command and return its stdout, or None when it fails."""
    try:
        completed = subprocess.run(
            command, capture_output=True, text=True, check=False
        )
    except OSError:
        return None
    if completed.returncode != 0:
        return None
    return completed.stdout


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


def write_file(file_path: str, content: str) -> None:
    # Write next to the target and rename so readers never see a partial file.
    directory = os.path.dirname(os.path.abspath(file_path))
    fd, temp_path = tempfile.mkstemp(dir=directory, prefix=".writeme-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as file:
            file.write(content)
        os.replace(temp_path, file_path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)


def absolute_path(path: str) -> str:
    return os.path.abspath(path)


def relative_path(path: str, start: str) -> str:
    return os.path.relpath(path, start)
