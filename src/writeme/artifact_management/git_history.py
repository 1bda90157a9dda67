# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
from typing import Iterator

from writeme.adaptors.os import output_from_command, path_exists, path_join

# Get application-specific logger
logger = logging.getLogger("writeme")


class GitHistoryReader:
    """Reads remotes and commit authors of a local git checkout.

    Only a checkout rooted at `repository_root` is read. A project nested in
    some other repository has no git data of its own.
    """

    def __init__(self, repository_root: str):
        self.repository_root = repository_root

    def is_repository_root(self) -> bool:
        # .git is a directory in a clone and a file in worktrees and submodules
        return path_exists(path_join(self.repository_root, ".git"))

    def get_remote_url(self, remote: str = "origin") -> str | None:
        if not self.is_repository_root():
            logger.debug(f"{self.repository_root} is not the root of a git checkout")
            return None
        output = output_from_command(
            [
                "git",
                "-C",
                self.repository_root,
                "config",
                "--get",
                f"remote.{remote}.url",
            ]
        )
        if output is None or not output.strip():
            logger.debug(f"No {remote} remote found in {self.repository_root}")
            return None
        return output.strip()

    def iter_commit_authors(self) -> Iterator[tuple[str, str]]:
        """Yield (name, email) of every commit reachable from HEAD."""
        if not self.is_repository_root():
            logger.debug(f"{self.repository_root} is not the root of a git checkout")
            return
        output = output_from_command(
            ["git", "-C", self.repository_root, "log", "--format=%an%x09%ae", "HEAD"]
        )
        if output is None:
            logger.debug(f"Could not read the history of {self.repository_root}")
            return
        for line in output.splitlines():
            if not line.strip():
                continue
            name, _, email = line.partition("\t")
            yield name.strip(), email.strip()
