# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import os

from writeme.metadata_collector.parsers.abstract_manifest_parser import (
    FundingNotSupportedError,
    ManifestParseError,
    ManifestParser,
    UnsupportedManifestError,
)
from writeme.metadata_collector.parsers.cargo_toml_parser import CargoTomlParser
from writeme.metadata_collector.parsers.composer_json_parser import (
    ComposerJsonParser,
)
from writeme.metadata_collector.parsers.package_json_parser import PackageJsonParser

PARSERS: dict[str, type[ManifestParser]] = {
    "package.json": PackageJsonParser,
    "composer.json": ComposerJsonParser,
    "Cargo.toml": CargoTomlParser,
}


def get_parser(file_path: str) -> ManifestParser:
    """Return the parser registered for the exact file name of file_path."""
    file_name = os.path.basename(file_path)
    parser_class = PARSERS.get(file_name)
    if parser_class is None:
        raise UnsupportedManifestError(f"No parser for {file_name}")
    return parser_class()


__all__ = [
    "CargoTomlParser",
    "ComposerJsonParser",
    "FundingNotSupportedError",
    "ManifestParseError",
    "ManifestParser",
    "PackageJsonParser",
    "UnsupportedManifestError",
    "get_parser",
]
