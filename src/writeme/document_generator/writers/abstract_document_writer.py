# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from writeme.metadata_collector.metadata import ProjectMetadataRecord

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    # Markdown output, nothing to escape. Undefined values render empty.
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class DocumentWriter(ABC):
    @abstractmethod
    def write(self, metadata: ProjectMetadataRecord) -> str:
        raise NotImplementedError
