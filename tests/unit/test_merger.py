# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import pytest_mock

from writeme.metadata_collector.license import License, SupportedLicense
from writeme.metadata_collector.metadata import (
    Contributor,
    Dependency,
    Funding,
    FundingType,
    ProjectMetadataRecord,
)
from writeme.metadata_collector.repository import Repository
from writeme.metadata_merger import (
    Candidate,
    ConflictResolver,
    DecliningResolver,
    FirstCandidateResolver,
    MetadataMerger,
    PreferredValueResolver,
)


def test_merge_of_nothing_is_an_empty_record(mocker: pytest_mock.MockFixture) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)

    merged = MetadataMerger(resolver_mock).merge([])

    resolver_mock.resolve.assert_not_called()
    assert merged == ProjectMetadataRecord(source_path="merged")


def test_single_candidates_never_reach_the_resolver(
    mocker: pytest_mock.MockFixture,
) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    records = [
        ProjectMetadataRecord(
            source_path="/p/package.json",
            name="demo",
            version="1.0.0",
            license=License(name=SupportedLicense.MIT),
        ),
        ProjectMetadataRecord(
            source_path="/p/LICENSE",
            license=License(name=SupportedLicense.MIT, path="/p/LICENSE"),
        ),
        ProjectMetadataRecord(source_path="/p/Cargo.toml", name="demo"),
    ]

    merged = MetadataMerger(resolver_mock).merge(records)

    resolver_mock.resolve.assert_not_called()
    assert merged.source_path == "merged"
    assert merged.name == "demo"
    assert merged.version == "1.0.0"
    assert merged.description is None
    # the copy pointing at the license file is kept
    assert merged.license == License(name=SupportedLicense.MIT, path="/p/LICENSE")


def test_conflicting_strings_are_settled_by_resolver(
    mocker: pytest_mock.MockFixture,
) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    resolver_mock.resolve.return_value = "bar"
    records = [
        ProjectMetadataRecord(source_path="/p/package.json", name="foo"),
        ProjectMetadataRecord(source_path="/p/composer.json", name="bar"),
        ProjectMetadataRecord(source_path="/p/Cargo.toml", name="foo"),
        ProjectMetadataRecord(
            source_path="/p/LICENSE", license=License(name=SupportedLicense.MIT)
        ),
    ]

    merged = MetadataMerger(resolver_mock).merge(records)

    resolver_mock.resolve.assert_called_once_with(
        "name",
        [
            Candidate(value="foo", source_path="/p/package.json"),
            Candidate(value="bar", source_path="/p/composer.json"),
        ],
    )
    assert merged.name == "bar"


def test_first_candidate_resolver_keeps_first_value() -> None:
    records = [
        ProjectMetadataRecord(source_path="/a", name="foo", description="first"),
        ProjectMetadataRecord(source_path="/b", name="bar", description="second"),
    ]

    merged = MetadataMerger(FirstCandidateResolver()).merge(records)

    assert merged.name == "foo"
    assert merged.description == "first"


def test_declined_conflict_leaves_field_absent() -> None:
    records = [
        ProjectMetadataRecord(source_path="/a", version="1.0.0"),
        ProjectMetadataRecord(source_path="/b", version="2.0.0"),
    ]

    merged = MetadataMerger(DecliningResolver()).merge(records)

    assert merged.version is None


def test_missing_license_offers_every_supported_license(
    mocker: pytest_mock.MockFixture,
) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    resolver_mock.resolve.side_effect = PreferredValueResolver(
        {"license": "MIT"}
    ).resolve

    merged = MetadataMerger(resolver_mock).merge(
        [ProjectMetadataRecord(source_path="/p/package.json", name="demo")]
    )

    assert merged.license == License(name=SupportedLicense.MIT)
    resolver_mock.resolve.assert_called_once()
    field_name, offered = resolver_mock.resolve.call_args.args
    assert field_name == "license"
    offered_names = [candidate.value for candidate in offered]
    assert SupportedLicense.UNKNOWN not in offered_names
    assert len(offered_names) == len(SupportedLicense) - 1
    assert all(candidate.source_path is None for candidate in offered)


def test_license_conflict_is_settled_by_the_conflict_resolver(
    mocker: pytest_mock.MockFixture,
) -> None:
    offer_resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    records = [
        ProjectMetadataRecord(
            source_path="/p/package.json", license=License(name=SupportedLicense.MIT)
        ),
        ProjectMetadataRecord(
            source_path="/p/UNLICENSE",
            license=License(name=SupportedLicense.UNLICENSE, path="/p/UNLICENSE"),
        ),
    ]

    merged = MetadataMerger(
        FirstCandidateResolver(), license_offer_resolver=offer_resolver_mock
    ).merge(records)

    assert merged.license == License(name=SupportedLicense.MIT)
    offer_resolver_mock.resolve.assert_not_called()


def test_license_offer_goes_to_the_offer_resolver(
    mocker: pytest_mock.MockFixture,
) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    offer_resolver = PreferredValueResolver({"license": "Unlicense"})

    merged = MetadataMerger(
        resolver_mock, license_offer_resolver=offer_resolver
    ).merge([ProjectMetadataRecord(source_path="/p/package.json", name="demo")])

    assert merged.license == License(name=SupportedLicense.UNLICENSE)
    resolver_mock.resolve.assert_not_called()


def test_declined_license_falls_back_to_unlicense() -> None:
    records = [
        ProjectMetadataRecord(
            source_path="/p/package.json", license=License(name=SupportedLicense.MIT)
        ),
        ProjectMetadataRecord(
            source_path="/p/Cargo.toml",
            license=License(name=SupportedLicense.APACHE_2_0),
        ),
    ]

    merged = MetadataMerger(DecliningResolver()).merge(records)

    assert merged.license == License(name=SupportedLicense.UNLICENSE)


def test_unknown_license_is_not_a_candidate() -> None:
    records = [
        ProjectMetadataRecord(
            source_path="/p/LICENSE",
            license=License(name=SupportedLicense.UNKNOWN, path="/p/LICENSE"),
        ),
        ProjectMetadataRecord(
            source_path="/p/package.json", license=License(name=SupportedLicense.ISC)
        ),
    ]

    merged = MetadataMerger(DecliningResolver()).merge(records)

    assert merged.license == License(name=SupportedLicense.ISC)


def test_preferred_license_matches_by_name_regardless_of_path() -> None:
    records = [
        ProjectMetadataRecord(
            source_path="/p/package.json", license=License(name=SupportedLicense.MIT)
        ),
        ProjectMetadataRecord(
            source_path="/p/UNLICENSE",
            license=License(name=SupportedLicense.UNLICENSE, path="/p/UNLICENSE"),
        ),
    ]
    resolver = PreferredValueResolver(
        {"license": "unlicense"}, fallback=FirstCandidateResolver()
    )

    merged = MetadataMerger(resolver).merge(records)

    assert merged.license == License(
        name=SupportedLicense.UNLICENSE, path="/p/UNLICENSE"
    )


def test_collections_are_concatenated_and_deduplicated_first_wins() -> None:
    records = [
        ProjectMetadataRecord(
            source_path="/p/.git",
            contributors=[
                Contributor(name="Ann", email="ann@example.com"),
                Contributor(name="Bob"),
            ],
        ),
        ProjectMetadataRecord(
            source_path="/p/package.json",
            contributors=[
                Contributor(
                    name="Ann Smith", email="ann@example.com", url="https://ann.dev"
                ),
                Contributor(name="Bob", url="https://bob.dev"),
                Contributor(name="Cid"),
            ],
            dependencies=[Dependency("react", "^18.0.0"), Dependency("vue", "3")],
            keywords=["cli", "docs"],
            funding=[Funding(FundingType.GITHUB, "https://github.com/sponsors/ann")],
        ),
        ProjectMetadataRecord(
            source_path="/p/composer.json",
            dependencies=[Dependency("react", "^17.0.0"), Dependency("laravel")],
            keywords=["docs", "readme"],
            funding=[
                Funding(FundingType.GITHUB, "https://github.com/sponsors/ann"),
                Funding(FundingType.PATREON),
                Funding(FundingType.PATREON),
            ],
        ),
    ]

    merged = MetadataMerger(FirstCandidateResolver()).merge(records)

    assert merged.contributors == [
        Contributor(name="Ann", email="ann@example.com"),
        Contributor(name="Bob"),
        Contributor(name="Cid"),
    ]
    assert merged.dependencies == [
        Dependency("react", "^18.0.0"),
        Dependency("vue", "3"),
        Dependency("laravel"),
    ]
    assert merged.keywords == ["cli", "docs", "readme"]
    assert merged.funding == [
        Funding(FundingType.GITHUB, "https://github.com/sponsors/ann"),
        Funding(FundingType.PATREON),
    ]
    assert merged.dev_dependencies is None
    assert merged.build_dependencies is None


def test_merged_record_does_not_alias_inputs() -> None:
    repository = Repository.parse("https://github.com/owner/repo")
    contributor = Contributor(name="Ann", email="ann@example.com")
    record = ProjectMetadataRecord(
        source_path="/p/.git",
        repository=repository,
        contributors=[contributor],
        license=License(name=SupportedLicense.MIT, path="/p/LICENSE"),
    )

    merged = MetadataMerger(FirstCandidateResolver()).merge([record])

    assert merged.repository == repository
    assert merged.repository is not repository
    assert merged.contributors is not None
    assert merged.contributors[0] is not contributor
    assert merged.license is not record.license
    merged.contributors[0].name = "Changed"
    assert contributor.name == "Ann"


def test_repositories_are_compared_by_url(mocker: pytest_mock.MockFixture) -> None:
    resolver_mock = mocker.Mock(spec_set=ConflictResolver)
    records = [
        ProjectMetadataRecord(
            source_path="/p/.git",
            repository=Repository.parse("git@github.com:owner/repo.git"),
        ),
        ProjectMetadataRecord(
            source_path="/p/package.json",
            repository=Repository.parse("git+https://github.com/owner/repo.git"),
            license=License(name=SupportedLicense.MIT),
        ),
    ]

    merged = MetadataMerger(resolver_mock).merge(records)

    resolver_mock.resolve.assert_not_called()
    assert merged.repository is not None
    assert merged.repository.url == "https://github.com/owner/repo"
