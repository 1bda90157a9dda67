# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import tomllib
from typing import Any

from writeme.metadata_collector.license import License
from writeme.metadata_collector.metadata import (
    Contributor,
    Dependency,
    Funding,
    ProjectMetadataRecord,
)
from writeme.metadata_collector.parsers.abstract_manifest_parser import (
    FundingNotSupportedError,
    ManifestParseError,
    ManifestParser,
    non_empty_string,
)
from writeme.metadata_collector.repository import Repository
from writeme.utils.person_parsing import parse_person


class CargoTomlParser(ManifestParser):
    """Parser for Rust Cargo.toml manifests.

    Values inherited from a workspace ({workspace = true}) are tables rather
    than strings and are left unset.
    """

    def convert(self, file_path: str, file_contents: str) -> ProjectMetadataRecord:
        try:
            manifest = tomllib.loads(file_contents)
        except tomllib.TOMLDecodeError as e:
            raise ManifestParseError(f"Invalid TOML in {file_path}: {e}") from e

        package = manifest.get("package")
        if not isinstance(package, dict):
            package = {}

        license_name = non_empty_string(package.get("license"))
        repository_url = non_empty_string(package.get("repository"))
        authors = package.get("authors")

        return ProjectMetadataRecord(
            source_path=file_path,
            name=non_empty_string(package.get("name")),
            description=non_empty_string(package.get("description")),
            version=non_empty_string(package.get("version")),
            license=License.from_name(license_name) if license_name else None,
            repository=Repository.parse(repository_url) if repository_url else None,
            contributors=(
                self.parse_contributors(authors) if isinstance(authors, list) else None
            ),
            dependencies=self.parse_dependencies(manifest.get("dependencies")),
            dev_dependencies=self.parse_dependencies(manifest.get("dev-dependencies")),
            build_dependencies=self.parse_dependencies(
                manifest.get("build-dependencies")
            ),
            keywords=self.parse_keywords(package.get("keywords")),
        )

    def parse_contributor(self, raw: Any) -> Contributor | None:
        if not isinstance(raw, str):
            return None
        name, email, url = parse_person(raw)
        if not (name or email or url):
            return None
        return Contributor(name=name, email=email, url=url)

    def parse_dependency(self, key: str, raw: Any) -> Dependency:
        # Either "1.0" or a table such as {version = "1.0", features = [...]};
        # path, git and workspace references carry no version.
        if isinstance(raw, dict):
            return Dependency(name=key, version=non_empty_string(raw.get("version")))
        return Dependency(name=key, version=non_empty_string(raw))

    def parse_funding(self, raw: Any) -> Funding:
        raise FundingNotSupportedError("Cargo.toml does not declare funding")
