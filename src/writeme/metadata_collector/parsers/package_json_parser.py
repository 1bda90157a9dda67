# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
import logging
from typing import Any

from writeme.metadata_collector.license import License
from writeme.metadata_collector.metadata import (
    Contributor,
    Dependency,
    Funding,
    ProjectMetadataRecord,
    infer_funding_type,
)
from writeme.metadata_collector.parsers.abstract_manifest_parser import (
    FundingNotSupportedError,
    ManifestParseError,
    ManifestParser,
    non_empty_string,
)
from writeme.metadata_collector.repository import Repository
from writeme.utils.person_parsing import parse_person

# Get application-specific logger
logger = logging.getLogger("writeme")


class PackageJsonParser(ManifestParser):
    """Parser for npm package.json manifests."""

    def convert(self, file_path: str, file_contents: str) -> ProjectMetadataRecord:
        try:
            manifest = json.loads(file_contents)
        except json.JSONDecodeError as e:
            raise ManifestParseError(f"Invalid JSON in {file_path}: {e}") from e
        if not isinstance(manifest, dict):
            raise ManifestParseError(f"Expected a JSON object in {file_path}")

        people: list[Any] = []
        if manifest.get("author") is not None:
            people.append(manifest["author"])
        if isinstance(manifest.get("contributors"), list):
            people.extend(manifest["contributors"])

        funding = manifest.get("funding")
        if funding is not None and not isinstance(funding, list):
            funding = [funding]

        return ProjectMetadataRecord(
            source_path=file_path,
            name=non_empty_string(manifest.get("name")),
            description=non_empty_string(manifest.get("description")),
            version=non_empty_string(manifest.get("version")),
            license=self._parse_license(manifest),
            repository=self._parse_repository(manifest.get("repository")),
            contributors=self.parse_contributors(people),
            funding=self.parse_fundings(funding) if funding else None,
            dependencies=self.parse_dependencies(manifest.get("dependencies")),
            dev_dependencies=self.parse_dependencies(manifest.get("devDependencies")),
            keywords=self.parse_keywords(manifest.get("keywords")),
        )

    def parse_contributor(self, raw: Any) -> Contributor | None:
        if isinstance(raw, str):
            name, email, url = parse_person(raw)
        elif isinstance(raw, dict):
            name = non_empty_string(raw.get("name"))
            email = non_empty_string(raw.get("email"))
            url = non_empty_string(raw.get("url"))
        else:
            return None
        if not (name or email or url):
            return None
        return Contributor(name=name, email=email, url=url)

    def parse_dependency(self, key: str, raw: Any) -> Dependency:
        return Dependency(name=key, version=non_empty_string(raw))

    def parse_funding(self, raw: Any) -> Funding:
        if isinstance(raw, str):
            type_tag, url = None, non_empty_string(raw)
        elif isinstance(raw, dict):
            type_tag = non_empty_string(raw.get("type"))
            url = non_empty_string(raw.get("url"))
        else:
            raise FundingNotSupportedError(f"Unsupported funding entry: {raw!r}")

        f_type = infer_funding_type(type_tag, url)
        if f_type is None:
            logger.debug(f"Dropping funding entry with unknown platform: {raw!r}")
            raise FundingNotSupportedError(f"Unknown funding platform: {raw!r}")
        return Funding(f_type=f_type, url=url)

    @staticmethod
    def _parse_license(manifest: dict[str, Any]) -> License | None:
        raw = manifest.get("license")
        # Legacy manifests use {"type": ...} or a "licenses" array.
        if isinstance(raw, dict):
            raw = raw.get("type")
        if non_empty_string(raw) is None and isinstance(manifest.get("licenses"), list):
            for entry in manifest["licenses"]:
                candidate = entry.get("type") if isinstance(entry, dict) else entry
                if non_empty_string(candidate):
                    raw = candidate
                    break
        license_name = non_empty_string(raw)
        if license_name is None:
            return None
        return License.from_name(license_name)

    @staticmethod
    def _parse_repository(raw: Any) -> Repository | None:
        if isinstance(raw, dict):
            raw = raw.get("url")
        url = non_empty_string(raw)
        if url is None:
            return None
        return Repository.parse(url)
