# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from writeme.document_generator.writers.abstract_document_writer import (
    DocumentWriter,
)
from writeme.document_generator.writers.contributing_writer import ContributingWriter
from writeme.document_generator.writers.license_writer import (
    LicenseWriter,
    has_license_template,
)
from writeme.document_generator.writers.readme_writer import ReadmeWriter

__all__ = [
    "ContributingWriter",
    "DocumentWriter",
    "LicenseWriter",
    "ReadmeWriter",
    "has_license_template",
]
