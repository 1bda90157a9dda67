# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
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


class ComposerJsonParser(ManifestParser):
    """Parser for PHP composer.json manifests.

    Reference: https://getcomposer.org/doc/04-schema.md
    """

    def convert(self, file_path: str, file_contents: str) -> ProjectMetadataRecord:
        try:
            manifest = json.loads(file_contents)
        except json.JSONDecodeError as e:
            raise ManifestParseError(f"Invalid JSON in {file_path}: {e}") from e
        if not isinstance(manifest, dict):
            raise ManifestParseError(f"Expected a JSON object in {file_path}")

        authors = manifest.get("authors")
        funding = manifest.get("funding")

        return ProjectMetadataRecord(
            source_path=file_path,
            name=non_empty_string(manifest.get("name")),
            description=non_empty_string(manifest.get("description")),
            version=non_empty_string(manifest.get("version")),
            license=self._parse_license(manifest.get("license")),
            repository=self._parse_repository(manifest),
            contributors=(
                self.parse_contributors(authors) if isinstance(authors, list) else None
            ),
            funding=self.parse_fundings(funding) if isinstance(funding, list) else None,
            dependencies=self.parse_dependencies(manifest.get("require")),
            dev_dependencies=self.parse_dependencies(manifest.get("require-dev")),
            keywords=self.parse_keywords(manifest.get("keywords")),
        )

    def parse_contributor(self, raw: Any) -> Contributor | None:
        if not isinstance(raw, dict):
            return None
        contributor = Contributor(
            name=non_empty_string(raw.get("name")),
            email=non_empty_string(raw.get("email")),
            url=non_empty_string(raw.get("homepage")),
        )
        if not (contributor.name or contributor.email or contributor.url):
            return None
        return contributor

    def parse_dependency(self, key: str, raw: Any) -> Dependency:
        return Dependency(name=key, version=non_empty_string(raw))

    def parse_funding(self, raw: Any) -> Funding:
        if not isinstance(raw, dict):
            raise FundingNotSupportedError(f"Unsupported funding entry: {raw!r}")
        url = non_empty_string(raw.get("url"))
        f_type = infer_funding_type(non_empty_string(raw.get("type")), url)
        if f_type is None:
            raise FundingNotSupportedError(f"Unknown funding platform: {raw!r}")
        return Funding(f_type=f_type, url=url)

    @staticmethod
    def _parse_license(raw: Any) -> License | None:
        # composer accepts a single identifier or a list of alternatives.
        if isinstance(raw, list):
            raw = next((entry for entry in raw if non_empty_string(entry)), None)
        license_name = non_empty_string(raw)
        if license_name is None:
            return None
        return License.from_name(license_name)

    @staticmethod
    def _parse_repository(manifest: dict[str, Any]) -> Repository | None:
        support = manifest.get("support")
        url = None
        if isinstance(support, dict):
            url = non_empty_string(support.get("source"))
        if url is None:
            return None
        return Repository.parse(url)
