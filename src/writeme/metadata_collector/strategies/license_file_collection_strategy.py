# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re

from writeme.adaptors.os import open_file, relative_path
from writeme.config.cli_configs import default_config
from writeme.metadata_collector.license import License, SupportedLicense
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.repository import Repository, RepositoryPlatform
from writeme.metadata_collector.strategies.abstract_collection_strategy import (
    MetadataCollectionStrategy,
)

# Get application-specific logger
logger = logging.getLogger("writeme")


class LicenseFileCollectionStrategy(MetadataCollectionStrategy):
    """Adds one record per license file whose text could be classified."""

    def __init__(
        self,
        file_paths: list[str],
        project_root: str,
        license_file_patterns: dict[str, tuple[re.Pattern[str], ...]] | None = None,
    ):
        self.file_paths = file_paths
        self.project_root = project_root
        if license_file_patterns is None:
            license_file_patterns = default_config.preset_license_file_patterns
        self.license_file_patterns = [
            pattern
            for patterns in license_file_patterns.values()
            for pattern in patterns
        ]

    def is_license_file(self, file_path: str) -> bool:
        return any(pattern.search(file_path) for pattern in self.license_file_patterns)

    def augment_metadata(
        self, metadata: list[ProjectMetadataRecord]
    ) -> list[ProjectMetadataRecord]:
        github_repository = self._find_github_repository(metadata)
        records = list(metadata)
        for file_path in self.file_paths:
            if not self.is_license_file(file_path):
                continue
            try:
                contents = open_file(file_path)
            except OSError as e:
                logger.warning(f"Could not read {file_path}: {e}")
                continue

            license = License.from_file(file_path, contents)
            if license.name == SupportedLicense.UNKNOWN:
                logger.info(f"License in {file_path} was not recognized")
                continue
            if github_repository is not None:
                license.url = self._blob_url(github_repository, file_path)
            records.append(
                ProjectMetadataRecord(source_path=file_path, license=license)
            )
        return records

    @staticmethod
    def _find_github_repository(
        metadata: list[ProjectMetadataRecord],
    ) -> Repository | None:
        for record in metadata:
            repository = record.repository
            if (
                repository is not None
                and repository.platform == RepositoryPlatform.GITHUB
            ):
                return repository
        return None

    def _blob_url(self, repository: Repository, file_path: str) -> str:
        location = relative_path(file_path, self.project_root).replace("\\", "/")
        return f"{repository.url}/blob/HEAD/{location}"
