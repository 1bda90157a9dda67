# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from writeme.document_generator.writers import ContributingWriter
from writeme.metadata_collector.license import License, SupportedLicense
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.repository import Repository, RepositoryPlatform


def test_contributing_guide_links_issue_tracker() -> None:
    metadata = ProjectMetadataRecord(
        source_path="merged",
        name="demo",
        license=License(name=SupportedLicense.APACHE_2_0),
        repository=Repository(
            url="https://gitlab.com/group/demo",
            name="demo",
            sign="group/demo",
            platform=RepositoryPlatform.GITLAB,
        ),
    )

    guide = ContributingWriter().write(metadata)

    assert guide.startswith("# Contributing to demo\n")
    assert "[issue tracker](https://gitlab.com/group/demo/issues)" in guide
    assert "Fork [the repository](https://gitlab.com/group/demo)" in guide
    assert "licensed under the Apache-2.0 license." in guide


def test_contributing_guide_without_repository_or_license() -> None:
    guide = ContributingWriter().write(ProjectMetadataRecord(source_path="merged"))

    assert guide.startswith("# Contributing to Project Name\n")
    assert "issue tracker" not in guide
    assert "1. Create a branch from the default branch." in guide
    assert "under the license of the project." in guide


def test_self_hosted_repository_has_no_issue_link() -> None:
    metadata = ProjectMetadataRecord(
        source_path="merged",
        name="demo",
        repository=Repository(
            url="https://git.example.com/team/demo",
            name="demo",
            sign="team/demo",
            platform=RepositoryPlatform.SELF_HOSTED,
        ),
    )

    guide = ContributingWriter().write(metadata)

    assert "/issues" not in guide
    assert "Fork [the repository](https://git.example.com/team/demo)" in guide
