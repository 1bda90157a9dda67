# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

from agithub.GitHub import GitHub

from writeme.metadata_collector.repository import Repository, RepositoryPlatform

# Get application-specific logger
logger = logging.getLogger("writeme")


class GitHubVisibilityChecker:
    def __init__(self, github_client: GitHub):
        self.client = github_client

    def is_public(self, repository: Repository) -> bool:
        """True only when the GitHub API confirms the repository is public."""
        if repository.platform != RepositoryPlatform.GITHUB or not repository.sign:
            return False
        owner, repo = repository.sign.split("/", 1)
        try:
            status, result = self.client.repos[owner][repo].get()
        except Exception as e:
            logger.warning(f"Could not check visibility of {repository.sign}: {e}")
            return False
        if status != 200 or not isinstance(result, dict):
            logger.info(
                f"Visibility of {repository.sign} not confirmed (status {status})"
            )
            return False
        return not result.get("private", True)
