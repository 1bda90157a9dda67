# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re

from writeme.adaptors.os import open_file
from writeme.config.cli_configs import default_config
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.parsers import (
    ManifestParseError,
    UnsupportedManifestError,
    get_parser,
)
from writeme.metadata_collector.strategies.abstract_collection_strategy import (
    MetadataCollectionStrategy,
)

# Get application-specific logger
logger = logging.getLogger("writeme")


class ManifestCollectionStrategy(MetadataCollectionStrategy):
    """Adds one record per readable package manifest found in the project."""

    def __init__(
        self,
        file_paths: list[str],
        manifest_patterns: dict[str, tuple[re.Pattern[str], ...]] | None = None,
    ):
        self.file_paths = file_paths
        if manifest_patterns is None:
            manifest_patterns = default_config.preset_manifest_patterns
        self.manifest_patterns = [
            pattern for patterns in manifest_patterns.values() for pattern in patterns
        ]

    def is_manifest(self, file_path: str) -> bool:
        return any(pattern.search(file_path) for pattern in self.manifest_patterns)

    def augment_metadata(
        self, metadata: list[ProjectMetadataRecord]
    ) -> list[ProjectMetadataRecord]:
        records = list(metadata)
        for file_path in self.file_paths:
            if not self.is_manifest(file_path):
                continue
            try:
                parser = get_parser(file_path)
                record = parser.convert(file_path, open_file(file_path))
            except (ManifestParseError, UnsupportedManifestError) as e:
                logger.warning(f"Skipping {file_path}: {e}")
                continue
            except OSError as e:
                logger.warning(f"Could not read {file_path}: {e}")
                continue
            logger.debug(f"Collected metadata from {file_path}")
            records.append(record.trim())
        return records
