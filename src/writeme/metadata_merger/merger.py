# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Combines the records collected from every source into a single record.

Scalar fields with more than one distinct value are settled by the injected
conflict resolver. Collection fields are concatenated in record order and
deduplicated by identity key, keeping the first occurrence.
"""

import copy
import logging
from collections.abc import Callable, Hashable
from typing import Any

from writeme.config.cli_configs import default_config
from writeme.metadata_collector.license import License, SupportedLicense
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_merger.conflict_resolvers import Candidate, ConflictResolver

# Get application-specific logger
logger = logging.getLogger("writeme")

MERGED_SOURCE_PATH = "merged"

STRING_FIELDS = ("name", "description", "version")
COLLECTION_FIELDS: dict[str, Callable[[Any], Hashable | None]] = {
    "contributors": lambda contributor: contributor.identity(),
    "funding": lambda funding: funding.identity(),
    "dependencies": lambda dependency: dependency.name,
    "dev_dependencies": lambda dependency: dependency.name,
    "build_dependencies": lambda dependency: dependency.name,
    "keywords": lambda keyword: keyword,
}


class MetadataMerger:
    def __init__(
        self,
        resolver: ConflictResolver,
        license_offer_resolver: ConflictResolver | None = None,
    ):
        self.resolver = resolver
        # picks from every supported license when no source declared one
        self.license_offer_resolver = license_offer_resolver or resolver

    def merge(self, records: list[ProjectMetadataRecord]) -> ProjectMetadataRecord:
        merged = ProjectMetadataRecord(source_path=MERGED_SOURCE_PATH)
        if not records:
            return merged

        for field_name in STRING_FIELDS:
            candidates = self._string_candidates(records, field_name)
            setattr(merged, field_name, self._settle(field_name, candidates))

        merged.repository = self._settle(
            "repository", self._repository_candidates(records)
        )
        merged.license = self._merge_license(records)

        for field_name, identity in COLLECTION_FIELDS.items():
            setattr(
                merged,
                field_name,
                self._merge_collection(records, field_name, identity),
            )
        return merged

    def _settle(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        if not candidates:
            return None
        if len(candidates) == 1:
            return copy.deepcopy(candidates[0].value)
        choice = self.resolver.resolve(field_name, candidates)
        if choice is None:
            logger.info(f"No value selected for {field_name}")
            return None
        return copy.deepcopy(choice)

    @staticmethod
    def _string_candidates(
        records: list[ProjectMetadataRecord], field_name: str
    ) -> list[Candidate]:
        candidates: list[Candidate] = []
        seen: set[str] = set()
        for record in records:
            value = getattr(record, field_name)
            if not value or value in seen:
                continue
            seen.add(value)
            candidates.append(Candidate(value=value, source_path=record.source_path))
        return candidates

    @staticmethod
    def _repository_candidates(
        records: list[ProjectMetadataRecord],
    ) -> list[Candidate]:
        candidates: list[Candidate] = []
        seen: set[str] = set()
        for record in records:
            repository = record.repository
            if repository is None or not repository.url or repository.url in seen:
                continue
            seen.add(repository.url)
            candidates.append(
                Candidate(value=repository, source_path=record.source_path)
            )
        return candidates

    @staticmethod
    def _license_candidates(records: list[ProjectMetadataRecord]) -> list[Candidate]:
        candidates: dict[SupportedLicense, Candidate] = {}
        for record in records:
            license = record.license
            if license is None or license.name == SupportedLicense.UNKNOWN:
                continue
            known = candidates.get(license.name)
            if known is None:
                candidates[license.name] = Candidate(
                    value=license, source_path=record.source_path
                )
            elif known.value.path is None and license.path is not None:
                # Same license, but this one points at the file on disk.
                candidates[license.name] = Candidate(
                    value=license, source_path=record.source_path
                )
        return list(candidates.values())

    def _merge_license(self, records: list[ProjectMetadataRecord]) -> License:
        candidates = self._license_candidates(records)
        if candidates:
            license = self._settle("license", candidates)
            if license is not None:
                return license

        logger.info("No license detected, offering every supported license")
        choices = [
            Candidate(value=license_name, source_path=None)
            for license_name in SupportedLicense
            if license_name != SupportedLicense.UNKNOWN
        ]
        choice = self.license_offer_resolver.resolve("license", choices)
        if choice is None:
            choice = default_config.fallback_license
        if isinstance(choice, License):
            return copy.deepcopy(choice)
        return License(name=choice)

    @staticmethod
    def _merge_collection(
        records: list[ProjectMetadataRecord],
        field_name: str,
        identity: Callable[[Any], Hashable | None],
    ) -> list[Any] | None:
        merged: list[Any] = []
        seen: set[Hashable] = set()
        for record in records:
            for item in getattr(record, field_name) or []:
                key = identity(item)
                if key is None or key in seen:
                    continue
                seen.add(key)
                merged.append(copy.deepcopy(item))
        return merged if merged else None
