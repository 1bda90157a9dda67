# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from jinja2 import Environment

from writeme.document_generator.writers.abstract_document_writer import (
    DocumentWriter,
    create_environment,
)
from writeme.document_generator.writers.readme_writer import DEFAULT_TITLE
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.repository import RepositoryPlatform


class ContributingWriter(DocumentWriter):
    def __init__(self, environment: Environment | None = None):
        self.environment = environment or create_environment()

    def write(self, metadata: ProjectMetadataRecord) -> str:
        repository = metadata.repository
        issues_url = None
        if repository is not None and repository.platform in (
            RepositoryPlatform.GITHUB,
            RepositoryPlatform.GITLAB,
        ):
            issues_url = f"{repository.url}/issues"

        template = self.environment.get_template("contributing.md.j2")
        return template.render(
            name=metadata.name or DEFAULT_TITLE,
            repository_url=repository.url if repository else None,
            issues_url=issues_url,
            license=str(metadata.license.name) if metadata.license else None,
        )
