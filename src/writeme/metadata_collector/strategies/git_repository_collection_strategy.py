# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
from collections import Counter

from writeme.adaptors.os import path_join
from writeme.artifact_management.git_history import GitHistoryReader
from writeme.metadata_collector.metadata import Contributor, ProjectMetadataRecord
from writeme.metadata_collector.repository import Repository, RepositoryPlatform
from writeme.metadata_collector.strategies.abstract_collection_strategy import (
    MetadataCollectionStrategy,
)

# Get application-specific logger
logger = logging.getLogger("writeme")


class GitRepositoryCollectionStrategy(MetadataCollectionStrategy):
    """Adds a record built from the git checkout at the project root."""

    def __init__(self, project_root: str, git_history_reader: GitHistoryReader):
        self.project_root = project_root
        self.git_history_reader = git_history_reader

    def augment_metadata(
        self, metadata: list[ProjectMetadataRecord]
    ) -> list[ProjectMetadataRecord]:
        record = ProjectMetadataRecord(source_path=path_join(self.project_root, ".git"))

        remote_url = self.git_history_reader.get_remote_url("origin")
        if remote_url:
            repository = Repository.parse(remote_url)
            record.repository = repository
            record.name = repository.name
        else:
            repository = None

        # GitHub renders its own contributors graph, the history walk is skipped.
        if repository is None or repository.platform != RepositoryPlatform.GITHUB:
            record.contributors = self.scan_contributors()

        if record.repository is None and record.contributors is None:
            logger.info(f"No git metadata found in {self.project_root}")
            return metadata
        return metadata + [record.trim()]

    def scan_contributors(self) -> list[Contributor] | None:
        """Contributors ordered by descending commit count.

        Ties keep the order in which authors first appear in the history.
        """
        commit_counts: Counter[tuple[str, str]] = Counter()
        for author in self.git_history_reader.iter_commit_authors():
            commit_counts[author] += 1
        if not commit_counts:
            return None

        # Counter keeps insertion order and sorted() is stable.
        ranked = sorted(commit_counts.items(), key=lambda item: -item[1])
        return [
            Contributor(name=name or None, email=email or None)
            for (name, email), _ in ranked
        ]
