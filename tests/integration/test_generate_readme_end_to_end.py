# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
from pathlib import Path

import pytest
import pytest_mock
from typer.testing import CliRunner

from writeme.artifact_management.git_history import GitHistoryReader
from writeme.artifact_management.project_scanner import ProjectScanner
from writeme.cli.main_cli import app
from writeme.config import default_config
from writeme.metadata_collector import MetadataCollector
from writeme.metadata_collector.license import License, SupportedLicense
from writeme.metadata_collector.strategies.git_repository_collection_strategy import (
    GitRepositoryCollectionStrategy,
)
from writeme.metadata_collector.strategies.license_file_collection_strategy import (
    LicenseFileCollectionStrategy,
)
from writeme.metadata_collector.strategies.manifest_collection_strategy import (
    ManifestCollectionStrategy,
)
from writeme.metadata_merger import ConflictResolver, MetadataMerger

MIT_LICENSE = """MIT License

Copyright (c) 2024 Demo Authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "demo",
                "version": "1.0.0",
                "license": "MIT",
                "author": "Ann <ann@example.com> (https://ann.dev)",
                "dependencies": {"express": "^4.18.0"},
                "devDependencies": {"jest": "^29.0.0"},
            }
        )
    )
    (tmp_path / "LICENSE").write_text(MIT_LICENSE)
    node_modules = tmp_path / "node_modules" / "express"
    node_modules.mkdir(parents=True)
    (node_modules / "package.json").write_text(
        json.dumps({"name": "express", "license": "MIT"})
    )
    return tmp_path


@pytest.fixture
def empty_git_history(mocker: pytest_mock.MockFixture) -> GitHistoryReader:
    reader_mock = mocker.Mock(spec_set=GitHistoryReader)
    reader_mock.get_remote_url.return_value = None
    reader_mock.iter_commit_authors.return_value = iter([])
    return reader_mock


def test_collect_and_merge_a_node_project(
    project: Path,
    empty_git_history: GitHistoryReader,
    mocker: pytest_mock.MockFixture,
) -> None:
    root = str(project)
    file_paths = ProjectScanner(list(default_config.blacklisted_dirs)).scan(root)
    records = MetadataCollector(
        [
            GitRepositoryCollectionStrategy(root, empty_git_history),
            ManifestCollectionStrategy(file_paths),
            LicenseFileCollectionStrategy(file_paths, root),
        ]
    ).collect_metadata()
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)

    merged = MetadataMerger(resolver_mock).merge(records)

    assert [record.source_path for record in records] == [
        str(project / "package.json"),
        str(project / "LICENSE"),
    ]
    resolver_mock.resolve.assert_not_called()
    assert merged.name == "demo"
    assert merged.version == "1.0.0"
    assert merged.license == License(
        name=SupportedLicense.MIT, path=str(project / "LICENSE")
    )
    assert merged.contributors is not None
    assert merged.contributors[0].email == "ann@example.com"
    assert merged.dependencies is not None
    assert [dependency.name for dependency in merged.dependencies] == ["express"]


def test_cli_writes_documents_for_a_node_project(
    project: Path,
    empty_git_history: GitHistoryReader,
    mocker: pytest_mock.MockFixture,
) -> None:
    mocker.patch(
        "writeme.cli.generate_readme_command.GitHistoryReader",
        return_value=empty_git_history,
    )

    result = CliRunner().invoke(
        app, ["generate-readme", str(project), "--non-interactive"], color=False
    )

    assert result.exit_code == 0
    assert "node_modules" not in result.stdout
    readme = (project / "README.md").read_text()
    assert readme.startswith("# demo\n")
    assert "![Express.js]" in readme
    assert "![JavaScript]" in readme
    assert "- `express` ^4.18.0" in readme
    assert "- `jest` ^29.0.0" in readme
    assert "Distributed under the [MIT](LICENSE) license." in readme
    assert "- [Ann](https://ann.dev)" in readme
    assert (project / "CONTRIBUTING.md").exists()
