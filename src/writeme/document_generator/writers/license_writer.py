# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from jinja2 import Environment

from writeme.adaptors.datetime import get_current_year
from writeme.document_generator.writers.abstract_document_writer import (
    DocumentWriter,
    create_environment,
)
from writeme.document_generator.writers.readme_writer import DEFAULT_TITLE
from writeme.metadata_collector.license import SupportedLicense
from writeme.metadata_collector.metadata import ProjectMetadataRecord

LICENSE_TEMPLATES: dict[SupportedLicense, str] = {
    SupportedLicense.MIT: "licenses/mit.txt.j2",
    SupportedLicense.ISC: "licenses/isc.txt.j2",
    SupportedLicense.ISC_LICENSE: "licenses/isc.txt.j2",
    SupportedLicense.UNLICENSE: "licenses/unlicense.txt.j2",
    SupportedLicense.THE_UNLICENSE: "licenses/unlicense.txt.j2",
}


def has_license_template(license_name: SupportedLicense) -> bool:
    return license_name in LICENSE_TEMPLATES


class LicenseWriter(DocumentWriter):
    """Renders the full text of the project license, when one is bundled."""

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or create_environment()

    def write(self, metadata: ProjectMetadataRecord) -> str:
        if metadata.license is None or not has_license_template(metadata.license.name):
            raise ValueError(f"No bundled license text for {metadata.license}")
        template = self.environment.get_template(
            LICENSE_TEMPLATES[metadata.license.name]
        )
        return template.render(
            year=get_current_year(), project_name=metadata.name or DEFAULT_TITLE
        )
