# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import re
from dataclasses import dataclass
from urllib.parse import quote

from writeme.config.cli_configs import path_pattern

SHIELDS_BASE_URL = "https://img.shields.io/badge"


@dataclass(frozen=True)
class Shield:
    label: str
    color: str
    logo: str
    logo_color: str = "white"
    style: str = "for-the-badge"
    target: str | None = None

    @property
    def image_url(self) -> str:
        # shields.io escapes literal dashes by doubling them
        label = quote(self.label.replace("-", "--"))
        return (
            f"{SHIELDS_BASE_URL}/{label}-{self.color}"
            f"?style={self.style}&logo={self.logo}&logoColor={self.logo_color}"
        )

    def markdown(self) -> str:
        image = f"![{self.label}]({self.image_url})"
        if self.target:
            return f"[{image}]({self.target})"
        return image


@dataclass(frozen=True)
class Tech:
    config_files: tuple[re.Pattern[str], ...]
    dependency_names: tuple[str, ...]
    shield: Shield


TECHS: dict[str, Tech] = {
    "javascript": Tech(
        config_files=(path_pattern(r"package\.json"),),
        dependency_names=(),
        shield=Shield("JavaScript", "323330", "javascript", logo_color="F7DF1E"),
    ),
    "typescript": Tech(
        config_files=(path_pattern(r"tsconfig(?:\.[\w-]+)?\.json"),),
        dependency_names=("typescript",),
        shield=Shield("TypeScript", "007ACC", "typescript"),
    ),
    "php": Tech(
        config_files=(path_pattern(r"composer\.json"),),
        dependency_names=(),
        shield=Shield("PHP", "777BB4", "php"),
    ),
    "rust": Tech(
        config_files=(path_pattern(r"Cargo\.toml"),),
        dependency_names=(),
        shield=Shield("Rust", "000000", "rust"),
    ),
    "docker": Tech(
        config_files=(
            path_pattern(r"Dockerfile"),
            path_pattern(r"docker-compose\.ya?ml"),
        ),
        dependency_names=(),
        shield=Shield("Docker", "2CA5E0", "docker"),
    ),
    "react": Tech(
        config_files=(),
        dependency_names=("react",),
        shield=Shield("React", "20232A", "react", logo_color="61DAFB"),
    ),
    "vue": Tech(
        config_files=(path_pattern(r"vue\.config\.js"),),
        dependency_names=("vue",),
        shield=Shield("Vue.js", "35495E", "vuedotjs", logo_color="4FC08D"),
    ),
    "angular": Tech(
        config_files=(path_pattern(r"angular\.json"),),
        dependency_names=("@angular/core",),
        shield=Shield("Angular", "DD0031", "angular"),
    ),
    "nextjs": Tech(
        config_files=(path_pattern(r"next\.config\.[mc]?js"),),
        dependency_names=("next",),
        shield=Shield("Next.js", "000000", "nextdotjs"),
    ),
    "express": Tech(
        config_files=(),
        dependency_names=("express",),
        shield=Shield("Express.js", "404D59", "express"),
    ),
    "tailwind": Tech(
        config_files=(path_pattern(r"tailwind\.config\.[mc]?[jt]s"),),
        dependency_names=("tailwindcss",),
        shield=Shield("Tailwind CSS", "38B2AC", "tailwind-css"),
    ),
    "laravel": Tech(
        config_files=(path_pattern(r"artisan"),),
        dependency_names=("laravel/framework",),
        shield=Shield("Laravel", "FF2D20", "laravel"),
    ),
    "symfony": Tech(
        config_files=(path_pattern(r"symfony\.lock"),),
        dependency_names=("symfony/framework-bundle",),
        shield=Shield("Symfony", "000000", "symfony"),
    ),
    "tokio": Tech(
        config_files=(),
        dependency_names=("tokio",),
        shield=Shield("Tokio", "000000", "rust"),
    ),
    "github-actions": Tech(
        config_files=(path_pattern(r"\.github/workflows/[^/\\]+\.ya?ml"),),
        dependency_names=(),
        shield=Shield("GitHub Actions", "2088FF", "github-actions"),
    ),
}


def techs_from_paths(paths: list[str]) -> list[str]:
    """Names of the technologies whose config files appear among paths."""
    found = []
    for tech_name, tech in TECHS.items():
        if any(pattern.search(path) for pattern in tech.config_files for path in paths):
            found.append(tech_name)
    return found


def techs_from_dependencies(dependency_names: list[str]) -> list[str]:
    """Names of the technologies implied by the given dependency names."""
    declared = {name.lower() for name in dependency_names}
    return [
        tech_name
        for tech_name, tech in TECHS.items()
        if any(name in declared for name in tech.dependency_names)
    ]
