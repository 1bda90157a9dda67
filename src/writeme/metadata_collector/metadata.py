# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass, replace
from enum import Enum

from writeme.metadata_collector.license import License
from writeme.metadata_collector.repository import Repository


def trim(value: str) -> str:
    """Strip whitespace and surrounding quotes until nothing changes."""
    previous = None
    while previous != value:
        previous = value
        value = value.strip().strip("\"'")
    return value


def trim_optional(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = trim(value)
    return trimmed if trimmed else None


class FundingType(Enum):
    PAYPAL = "paypal"
    PATREON = "patreon"
    BITCOIN = "bitcoin"
    BUY_ME_A_COFFEE = "buymeacoffee"
    KO_FI = "kofi"
    GITHUB = "github"


# Keywords looked up in a funding entry's type tag and URL, in enum order.
FUNDING_KEYWORDS: dict[FundingType, tuple[str, ...]] = {
    FundingType.PAYPAL: ("paypal",),
    FundingType.PATREON: ("patreon",),
    FundingType.BITCOIN: ("bitcoin",),
    FundingType.BUY_ME_A_COFFEE: ("buymeacoffee",),
    FundingType.KO_FI: ("kofi", "ko-fi"),
    FundingType.GITHUB: ("github",),
}


def funding_type_from_tag(type_tag: str | None) -> FundingType | None:
    """Map an explicit type tag such as "github" or "Ko-Fi" to its platform."""
    if not type_tag:
        return None
    normalized = "".join(char for char in type_tag.strip().lower() if char not in "-_ ")
    for funding_type in FundingType:
        if funding_type.value == normalized:
            return funding_type
    return None


def infer_funding_type(
    type_tag: str | None, url: str | None = None
) -> FundingType | None:
    # An explicit platform tag wins over keywords found in the URL.
    tagged = funding_type_from_tag(type_tag)
    if tagged is not None:
        return tagged
    haystacks = [text.lower() for text in (type_tag, url) if text]
    for funding_type, keywords in FUNDING_KEYWORDS.items():
        for keyword in keywords:
            if any(keyword in haystack for haystack in haystacks):
                return funding_type
    return None


@dataclass
class Dependency:
    name: str
    version: str | None = None

    def trim(self) -> "Dependency | None":
        name = trim_optional(self.name)
        if name is None:
            return None
        return Dependency(name=name, version=trim_optional(self.version))


@dataclass
class Contributor:
    name: str | None = None
    email: str | None = None
    url: str | None = None

    def identity(self) -> tuple[str, str] | None:
        # Contributors are the same person when their emails match.
        if self.email:
            return ("email", self.email)
        if self.name:
            return ("name", self.name)
        return None

    def trim(self) -> "Contributor | None":
        contributor = Contributor(
            name=trim_optional(self.name),
            email=trim_optional(self.email),
            url=trim_optional(self.url),
        )
        if not (contributor.name or contributor.email or contributor.url):
            return None
        return contributor

    def __str__(self) -> str:
        if self.name and self.email:
            return f"{self.name} <{self.email}>"
        return self.name or self.email or self.url or ""


@dataclass
class Funding:
    f_type: FundingType
    url: str | None = None

    def identity(self) -> tuple[str, str]:
        if self.url:
            return ("url", self.url)
        return ("type", self.f_type.value)

    def trim(self) -> "Funding":
        return Funding(f_type=self.f_type, url=trim_optional(self.url))

    def __str__(self) -> str:
        return f"{self.f_type.value} {self.url or 'None'}"


# One instance per discovered source. Every field other than source_path is
# either absent or a value actually found in that source.
@dataclass
class ProjectMetadataRecord:
    """Project metadata extracted from a single source."""

    source_path: str  # file or directory the values were read from
    name: str | None = None
    description: str | None = None
    version: str | None = None
    license: License | None = None
    repository: Repository | None = None
    contributors: list[Contributor] | None = None  # discovery order
    funding: list[Funding] | None = None
    dependencies: list[Dependency] | None = None
    dev_dependencies: list[Dependency] | None = None
    build_dependencies: list[Dependency] | None = None
    keywords: list[str] | None = None

    def trim(self) -> "ProjectMetadataRecord":
        """Return a copy with every string stripped of quotes and whitespace."""
        repository = self.repository
        if repository is not None:
            url = trim_optional(repository.url)
            repository = replace(repository, url=url) if url else None

        return ProjectMetadataRecord(
            source_path=self.source_path,
            name=trim_optional(self.name),
            description=trim_optional(self.description),
            version=trim_optional(self.version),
            license=self.license,
            repository=repository,
            contributors=_trim_items(self.contributors),
            funding=_trim_items(self.funding),
            dependencies=_trim_items(self.dependencies),
            dev_dependencies=_trim_items(self.dev_dependencies),
            build_dependencies=_trim_items(self.build_dependencies),
            keywords=_trim_keywords(self.keywords),
        )


def _trim_items(items: list | None) -> list | None:
    if items is None:
        return None
    trimmed = [item.trim() for item in items]
    kept = [item for item in trimmed if item is not None]
    return kept if kept else None


def _trim_keywords(keywords: list[str] | None) -> list[str] | None:
    if keywords is None:
        return None
    trimmed = [trim(keyword) for keyword in keywords]
    kept = [keyword for keyword in trimmed if keyword]
    return kept if kept else None
