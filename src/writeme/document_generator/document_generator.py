# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from writeme.document_generator.writers.abstract_document_writer import (
    DocumentWriter,
)
from writeme.metadata_collector.metadata import ProjectMetadataRecord


class DocumentGenerator:
    def __init__(self, document_writer: DocumentWriter):
        self.document_writer = document_writer

    def generate_document(self, metadata: ProjectMetadataRecord) -> str:
        return self.document_writer.write(metadata)
