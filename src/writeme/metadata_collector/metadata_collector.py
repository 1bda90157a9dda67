# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Metadata collector class uses passed strategies to collect the metadata
records of a project, one record per source."""

from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.strategies.abstract_collection_strategy import (
    MetadataCollectionStrategy,
)


class MetadataCollector:
    # constructor
    def __init__(self, strategies: list[MetadataCollectionStrategy]):
        self.strategies = strategies

    # method to collect metadata
    def collect_metadata(self) -> list[ProjectMetadataRecord]:
        # each strategy receives the records gathered so far and returns them
        # with its own records appended
        metadata: list[ProjectMetadataRecord] = []
        for strategy in self.strategies:
            metadata = strategy.augment_metadata(metadata)
        return metadata
