# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from jinja2 import Environment

from writeme.adaptors.os import relative_path
from writeme.config.techs_config import (
    TECHS,
    Shield,
    techs_from_dependencies,
    techs_from_paths,
)
from writeme.document_generator.writers.abstract_document_writer import (
    DocumentWriter,
    create_environment,
)
from writeme.metadata_collector.license import SupportedLicense
from writeme.metadata_collector.metadata import (
    Contributor,
    Funding,
    FundingType,
    ProjectMetadataRecord,
)
from writeme.metadata_collector.repository import RepositoryPlatform

DEFAULT_TITLE = "Project Name"
CONTRIB_ROCKS_URL = "https://contrib.rocks/image?repo={sign}"

FUNDING_SHIELDS: dict[FundingType, Shield] = {
    FundingType.PAYPAL: Shield("PayPal", "00457C", "paypal"),
    FundingType.PATREON: Shield("Patreon", "F96854", "patreon"),
    FundingType.BITCOIN: Shield("Bitcoin", "000000", "bitcoin", logo_color="F7931A"),
    FundingType.BUY_ME_A_COFFEE: Shield(
        "BuyMeACoffee", "FFDD00", "buymeacoffee", logo_color="black"
    ),
    FundingType.KO_FI: Shield("Ko-fi", "F16061", "ko-fi"),
    FundingType.GITHUB: Shield("GitHub Sponsors", "EA4AAA", "githubsponsors"),
}


def contributor_markdown(contributor: Contributor) -> str | None:
    if contributor.name and contributor.url:
        return f"[{contributor.name}]({contributor.url})"
    if contributor.name and contributor.email:
        return f"{contributor.name} <{contributor.email}>"
    return contributor.name or contributor.email or contributor.url


def funding_markdown(funding: Funding) -> str | None:
    if not funding.url:
        return None
    shield = FUNDING_SHIELDS[funding.f_type]
    return f"[![{shield.label}]({shield.image_url})]({funding.url})"


class ReadmeWriter(DocumentWriter):
    """Renders the README of a project from its merged metadata.

    file_paths are the scanned project files, used to detect technologies.
    public_github_repository switches the contributors section to the
    contrib.rocks widget, which only works for public GitHub repositories.
    """

    def __init__(
        self,
        project_root: str,
        file_paths: list[str] | None = None,
        public_github_repository: bool = False,
        environment: Environment | None = None,
    ):
        self.project_root = project_root
        self.file_paths = file_paths or []
        self.public_github_repository = public_github_repository
        self.environment = environment or create_environment()

    def write(self, metadata: ProjectMetadataRecord) -> str:
        template = self.environment.get_template("readme.md.j2")
        return template.render(
            title=metadata.name or DEFAULT_TITLE,
            description=metadata.description,
            version=metadata.version,
            shields=self._shields(metadata),
            license=self._license(metadata),
            repository_url=metadata.repository.url if metadata.repository else None,
            dependencies=metadata.dependencies or [],
            dev_dependencies=metadata.dev_dependencies or [],
            contributors_widget=self._contributors_widget(metadata),
            contributors=self._contributors(metadata),
            funding=self._funding(metadata),
            keywords=metadata.keywords or [],
        )

    def _shields(self, metadata: ProjectMetadataRecord) -> list[str]:
        dependency_names = [
            dependency.name
            for dependencies in (
                metadata.dependencies,
                metadata.dev_dependencies,
                metadata.build_dependencies,
            )
            for dependency in dependencies or []
        ]
        tech_names = techs_from_paths(self.file_paths)
        for tech_name in techs_from_dependencies(dependency_names):
            if tech_name not in tech_names:
                tech_names.append(tech_name)
        return [TECHS[tech_name].shield.markdown() for tech_name in tech_names]

    def _license(self, metadata: ProjectMetadataRecord) -> str | None:
        license = metadata.license
        if license is None or license.name == SupportedLicense.UNKNOWN:
            return None
        if license.url:
            return f"[{license.name}]({license.url})"
        if license.path:
            location = relative_path(license.path, self.project_root)
            location = location.replace("\\", "/")
            return f"[{license.name}]({location})"
        return str(license.name)

    def _contributors_widget(self, metadata: ProjectMetadataRecord) -> str | None:
        repository = metadata.repository
        if (
            not self.public_github_repository
            or repository is None
            or repository.platform != RepositoryPlatform.GITHUB
            or not repository.sign
        ):
            return None
        image = CONTRIB_ROCKS_URL.format(sign=repository.sign)
        return (
            f'<a href="{repository.url}/graphs/contributors">\n'
            f'  <img src="{image}" />\n'
            "</a>"
        )

    @staticmethod
    def _contributors(metadata: ProjectMetadataRecord) -> list[str]:
        entries = [contributor_markdown(c) for c in metadata.contributors or []]
        return [entry for entry in entries if entry]

    @staticmethod
    def _funding(metadata: ProjectMetadataRecord) -> list[str]:
        entries = [funding_markdown(f) for f in metadata.funding or []]
        return [entry for entry in entries if entry]
