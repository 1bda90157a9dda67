# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

from writeme.adaptors.os import (
    absolute_path,
    is_directory,
    path_exists,
    path_join,
    walk_directory,
)

# Get application-specific logger
logger = logging.getLogger("writeme")


class ProjectScanner:
    """Lists the files of a project, skipping blacklisted directories."""

    def __init__(self, blacklisted_dirs: list[str], include_hidden: bool = False):
        self.blacklisted_dirs = set(blacklisted_dirs)
        self.include_hidden = include_hidden

    def _is_skipped(self, name: str) -> bool:
        return not self.include_hidden and name.startswith(".")

    def scan(self, root: str) -> list[str]:
        root = absolute_path(root)
        if not path_exists(root):
            raise FileNotFoundError(f"Project root {root} does not exist")
        if not is_directory(root):
            raise NotADirectoryError(f"Project root {root} is not a directory")

        def on_walk_error(error: OSError) -> None:
            # the root must be readable, deeper directories are skipped
            if error.filename == root:
                raise error
            logger.warning(f"Skipping unreadable directory {error.filename}: {error}")

        files = []
        for dirpath, dirnames, filenames in walk_directory(root, onerror=on_walk_error):
            # os.walk honours in-place edits of dirnames, which keeps the
            # traversal depth-first in sorted order.
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in self.blacklisted_dirs and not self._is_skipped(name)
            )
            for filename in sorted(filenames):
                if self._is_skipped(filename):
                    continue
                files.append(path_join(dirpath, filename))
        logger.debug(f"Scanned {len(files)} files under {root}")
        return files
