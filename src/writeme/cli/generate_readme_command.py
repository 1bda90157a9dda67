# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Command for generating the README of a project

import logging
from typing import Annotated

import typer
from agithub.GitHub import GitHub

from writeme.adaptors.os import absolute_path, path_exists, path_join, write_file
from writeme.artifact_management.git_history import GitHistoryReader
from writeme.artifact_management.project_scanner import ProjectScanner
from writeme.artifact_management.repository_visibility import (
    GitHubVisibilityChecker,
)
from writeme.config.cli_configs import default_config
from writeme.document_generator.document_generator import DocumentGenerator
from writeme.document_generator.writers import (
    ContributingWriter,
    LicenseWriter,
    ReadmeWriter,
    has_license_template,
)
from writeme.metadata_collector import MetadataCollector
from writeme.metadata_collector.metadata import ProjectMetadataRecord
from writeme.metadata_collector.repository import RepositoryPlatform
from writeme.metadata_collector.strategies.git_repository_collection_strategy import (  # noqa: E501
    GitRepositoryCollectionStrategy,
)
from writeme.metadata_collector.strategies.license_file_collection_strategy import (  # noqa: E501
    LicenseFileCollectionStrategy,
)
from writeme.metadata_collector.strategies.manifest_collection_strategy import (  # noqa: E501
    ManifestCollectionStrategy,
)
from writeme.metadata_merger import (
    FirstCandidateResolver,
    InteractiveConflictResolver,
    MetadataMerger,
    PreferredValueResolver,
)
from writeme.utils.logging import parse_log_level, setup_logging

# Get application-specific logger
logger = logging.getLogger("writeme")


def log_level_callback(value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    return value


def build_merger(non_interactive: bool) -> MetadataMerger:
    if not non_interactive:
        return MetadataMerger(InteractiveConflictResolver())
    # Without a prompt a missing license falls back to the default one.
    return MetadataMerger(
        FirstCandidateResolver(),
        license_offer_resolver=PreferredValueResolver(
            {"license": str(default_config.fallback_license)}
        ),
    )


def is_public_github_repository(
    metadata: ProjectMetadataRecord, check_visibility: bool, github_token: str | None
) -> bool:
    repository = metadata.repository
    if repository is None or repository.platform != RepositoryPlatform.GITHUB:
        return False
    if not check_visibility:
        return True
    github_client = GitHub(token=github_token) if github_token else GitHub()
    return GitHubVisibilityChecker(github_client).is_public(repository)


def write_output(file_path: str, content: str, description: str) -> None:
    try:
        write_file(file_path, content)
    except OSError as e:
        typer.echo(f"Error writing {description} to {file_path}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✓ {description} written to {file_path}")


def generate_readme(
    project_path: Annotated[
        str,
        typer.Argument(help="Path to the root directory of the project to document."),
    ] = ".",
    output_file: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Path of the generated README. Default is README.md in the project.",
        ),
    ] = None,
    contributing: Annotated[
        bool,
        typer.Option(
            "--contributing/--no-contributing",
            help="Also generate a CONTRIBUTING.md file.",
        ),
    ] = True,
    contributing_output: Annotated[
        str | None,
        typer.Option(
            "--contributing-output",
            help=(
                "Path of the generated CONTRIBUTING file. "
                "Default is CONTRIBUTING.md in the project."
            ),
        ),
    ] = None,
    non_interactive: Annotated[
        bool,
        typer.Option(
            "--non-interactive",
            help=(
                "Never prompt. Conflicting values resolve to the first source "
                "found and a missing license resolves to the Unlicense."
            ),
        ),
    ] = False,
    create_license: Annotated[
        bool,
        typer.Option(
            "--create-license",
            help=(
                "Write a LICENSE file when the license was only declared in a "
                "manifest and its text is bundled (MIT, ISC, Unlicense)."
            ),
        ),
    ] = False,
    check_visibility: Annotated[
        bool,
        typer.Option(
            "--check-visibility/--no-check-visibility",
            help=(
                "Ask the GitHub API whether the repository is public before "
                "embedding the contributors widget."
            ),
        ),
    ] = True,
    github_token: Annotated[
        str | None,
        typer.Option(
            "--github-token",
            envvar="GITHUB_TOKEN",
            help="GitHub token used for the visibility check.",
        ),
    ] = None,
    exclude_dirs: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude-dir",
            help="Directory name to skip while scanning. Can be repeated.",
        ),
    ] = None,
    include_hidden: Annotated[
        bool,
        typer.Option(
            "--include-hidden",
            help="Also scan hidden files and directories.",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
            callback=log_level_callback,
        ),
    ] = "WARNING",
) -> None:
    """
    Generate a README (and CONTRIBUTING) file for a project.

    The project is scanned for package manifests, license files and git
    metadata. The values found are merged into one description of the project,
    asking which one to keep when sources disagree.
    """
    setup_logging(parse_log_level(log_level))

    project_root = absolute_path(project_path)
    scanner = ProjectScanner(
        list(default_config.blacklisted_dirs) + (exclude_dirs or []),
        include_hidden=include_hidden,
    )
    try:
        file_paths = scanner.scan(project_root)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error reading project {project_root}: {e}", err=True)
        raise typer.Exit(code=1)

    collector = MetadataCollector(
        [
            GitRepositoryCollectionStrategy(
                project_root, GitHistoryReader(project_root)
            ),
            ManifestCollectionStrategy(file_paths),
            LicenseFileCollectionStrategy(file_paths, project_root),
        ]
    )
    records = collector.collect_metadata()

    if records:
        typer.echo("Processed files:")
        for record in records:
            typer.echo(f"  - {record.source_path}")
    else:
        typer.echo("No project metadata found, using defaults.")

    merged = build_merger(non_interactive).merge(records)

    public_repository = is_public_github_repository(
        merged, check_visibility, github_token
    )
    readme_writer = ReadmeWriter(
        project_root,
        file_paths=file_paths,
        public_github_repository=public_repository,
    )
    readme = DocumentGenerator(readme_writer).generate_document(merged)
    readme_path = output_file or path_join(
        project_root, default_config.readme_file_name
    )
    write_output(readme_path, readme, "README")

    if contributing:
        contributing_text = DocumentGenerator(ContributingWriter()).generate_document(
            merged
        )
        contributing_path = contributing_output or path_join(
            project_root, default_config.contributing_file_name
        )
        write_output(contributing_path, contributing_text, "CONTRIBUTING")

    if create_license:
        license = merged.license
        license_path = path_join(project_root, default_config.license_file_name)
        if license is None:
            logger.info("No license selected, nothing to create")
        elif license.path is not None:
            logger.info(f"License file already present at {license.path}")
        elif not has_license_template(license.name):
            typer.echo(f"No bundled license text for {license.name}, skipping.")
        elif path_exists(license_path):
            typer.echo(f"{license_path} already exists, skipping.")
        else:
            license_text = DocumentGenerator(LicenseWriter()).generate_document(
                merged
            )
            write_output(license_path, license_text, "LICENSE")
