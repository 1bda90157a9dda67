# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod
from typing import Any

from writeme.metadata_collector.metadata import (
    Contributor,
    Dependency,
    Funding,
    ProjectMetadataRecord,
)


class ManifestParseError(ValueError):
    """The manifest contents could not be deserialized."""


class UnsupportedManifestError(ValueError):
    """No parser is registered for the manifest file name."""


class FundingNotSupportedError(ValueError):
    """The manifest format, or this entry, carries no usable funding information."""


def non_empty_string(value: Any) -> str | None:
    # Nulls, empty strings and non-string values are all treated as absent.
    if isinstance(value, str) and value.strip():
        return value
    return None


class ManifestParser(ABC):
    @abstractmethod
    def convert(self, file_path: str, file_contents: str) -> ProjectMetadataRecord:
        raise NotImplementedError

    @abstractmethod
    def parse_contributor(self, raw: Any) -> Contributor | None:
        raise NotImplementedError

    @abstractmethod
    def parse_dependency(self, key: str, raw: Any) -> Dependency:
        raise NotImplementedError

    @abstractmethod
    def parse_funding(self, raw: Any) -> Funding:
        raise NotImplementedError

    def parse_dependencies(self, table: Any) -> list[Dependency] | None:
        if not isinstance(table, dict):
            return None
        dependencies = [self.parse_dependency(key, raw) for key, raw in table.items()]
        return dependencies if dependencies else None

    def parse_contributors(self, entries: list[Any]) -> list[Contributor] | None:
        contributors = []
        for entry in entries:
            contributor = self.parse_contributor(entry)
            if contributor is not None:
                contributors.append(contributor)
        return contributors if contributors else None

    def parse_fundings(self, entries: list[Any]) -> list[Funding] | None:
        fundings = []
        for entry in entries:
            try:
                fundings.append(self.parse_funding(entry))
            except FundingNotSupportedError:
                continue
        return fundings if fundings else None

    @staticmethod
    def parse_keywords(raw: Any) -> list[str] | None:
        if not isinstance(raw, list):
            return None
        keywords = [keyword for keyword in raw if non_empty_string(keyword)]
        return keywords if keywords else None
