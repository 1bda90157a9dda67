# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import re
from dataclasses import dataclass

from writeme.metadata_collector.license import SupportedLicense


def path_pattern(file_name_regex: str) -> re.Pattern[str]:
    """Compile a file name regex anchored to the end of a path at a separator."""
    return re.compile(rf"(?:^|[/\\]){file_name_regex}$", re.IGNORECASE)


@dataclass(frozen=True)
class Config:
    # technology -> patterns of the manifests it is recognized by
    preset_manifest_patterns: dict[str, tuple[re.Pattern[str], ...]]
    # license family -> patterns of the files holding the license text
    preset_license_file_patterns: dict[str, tuple[re.Pattern[str], ...]]
    blacklisted_dirs: tuple[str, ...]
    fallback_license: SupportedLicense
    readme_file_name: str
    contributing_file_name: str
    license_file_name: str


default_config = Config(
    preset_manifest_patterns={
        "node": (path_pattern(r"package\.json"),),
        "php": (path_pattern(r"composer\.json"),),
        "rust": (path_pattern(r"Cargo\.toml"),),
    },
    preset_license_file_patterns={
        "license": (
            path_pattern(r"LICENSE(?:\.md|\.txt|\.rst)?"),
            path_pattern(r"LICENCE(?:\.md|\.txt)?"),  # common misspelling
            path_pattern(r"LICENSE-(?:MIT|APACHE)(?:\.md|\.txt)?"),
        ),
        "copying": (path_pattern(r"COPYING(?:\.md|\.txt)?"),),
        "unlicense": (path_pattern(r"UNLICENSE(?:\.md|\.txt)?"),),
    },
    blacklisted_dirs=(
        "node_modules",
        "vendor",
        "target",
        "dist",
        "build",
        "out",
        "coverage",
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".idea",
        ".vscode",
        ".cache",
    ),
    fallback_license=SupportedLicense.UNLICENSE,
    readme_file_name="README.md",
    contributing_file_name="CONTRIBUTING.md",
    license_file_name="LICENSE",
)
