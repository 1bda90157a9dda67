# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json

import pytest

from writeme.metadata_collector.license import SupportedLicense
from writeme.metadata_collector.metadata import (
    Contributor,
    Dependency,
    Funding,
    FundingType,
)
from writeme.metadata_collector.parsers import (
    FundingNotSupportedError,
    ManifestParseError,
    PackageJsonParser,
)
from writeme.metadata_collector.repository import RepositoryPlatform


def test_package_json_full_manifest() -> None:
    manifest = {
        "name": "demo",
        "description": "A demo package",
        "version": "1.0.0",
        "license": "MIT",
        "author": "Jane Doe <jane@example.com> (https://jane.dev)",
        "contributors": [
            {"name": "John", "email": "john@example.com", "url": "https://john.dev"},
            "Ann <ann@example.com>",
        ],
        "repository": {"type": "git", "url": "git+https://github.com/demo/demo.git"},
        "dependencies": {"left-pad": "^1.3.0", "local": ""},
        "devDependencies": {"jest": "^29.0.0"},
        "funding": [
            "https://github.com/sponsors/jane",
            {"type": "patreon", "url": "https://patreon.com/jane"},
        ],
        "keywords": ["demo", "", "cli"],
    }

    record = PackageJsonParser().convert("/p/package.json", json.dumps(manifest))

    assert record.source_path == "/p/package.json"
    assert record.name == "demo"
    assert record.description == "A demo package"
    assert record.version == "1.0.0"
    assert record.license is not None
    assert record.license.name == SupportedLicense.MIT
    assert record.license.path is None
    assert record.repository is not None
    assert record.repository.platform == RepositoryPlatform.GITHUB
    assert record.repository.url == "https://github.com/demo/demo"
    assert record.contributors == [
        Contributor(name="Jane Doe", email="jane@example.com", url="https://jane.dev"),
        Contributor(name="John", email="john@example.com", url="https://john.dev"),
        Contributor(name="Ann", email="ann@example.com", url=None),
    ]
    assert record.dependencies == [
        Dependency(name="left-pad", version="^1.3.0"),
        Dependency(name="local", version=None),
    ]
    assert record.dev_dependencies == [Dependency(name="jest", version="^29.0.0")]
    assert record.build_dependencies is None
    assert record.funding == [
        Funding(f_type=FundingType.GITHUB, url="https://github.com/sponsors/jane"),
        Funding(f_type=FundingType.PATREON, url="https://patreon.com/jane"),
    ]
    assert record.keywords == ["demo", "cli"]


def test_package_json_missing_fields_are_absent() -> None:
    record = PackageJsonParser().convert("/p/package.json", '{"name": ""}')
    assert record.name is None
    assert record.version is None
    assert record.license is None
    assert record.repository is None
    assert record.contributors is None
    assert record.dependencies is None
    assert record.funding is None
    assert record.keywords is None


def test_package_json_null_values_are_absent() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json", '{"name": null, "description": null, "license": null}'
    )
    assert record.name is None
    assert record.description is None
    assert record.license is None


def test_package_json_legacy_license_object() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json", '{"license": {"type": "ISC", "url": "https://x"}}'
    )
    assert record.license is not None
    assert record.license.name == SupportedLicense.ISC


def test_package_json_legacy_licenses_array() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json", '{"licenses": [{"type": "Apache-2.0"}, {"type": "MIT"}]}'
    )
    assert record.license is not None
    assert record.license.name == SupportedLicense.APACHE_2_0


def test_package_json_repository_string() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json", '{"repository": "https://gitlab.com/group/demo"}'
    )
    assert record.repository is not None
    assert record.repository.platform == RepositoryPlatform.GITLAB


def test_package_json_single_funding_string() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json", '{"funding": "https://ko-fi.com/jane"}'
    )
    assert record.funding == [
        Funding(f_type=FundingType.KO_FI, url="https://ko-fi.com/jane")
    ]


def test_package_json_unknown_funding_entries_are_dropped() -> None:
    record = PackageJsonParser().convert(
        "/p/package.json",
        '{"funding": ['
        '{"type": "opencollective", "url": "https://opencollective.com/x"},'
        ' "https://paypal.me/jane"]}',
    )
    assert record.funding == [
        Funding(f_type=FundingType.PAYPAL, url="https://paypal.me/jane")
    ]


def test_package_json_parse_funding_rejects_unknown_platform() -> None:
    with pytest.raises(FundingNotSupportedError):
        PackageJsonParser().parse_funding({"type": "custom", "url": "https://x.io"})
    with pytest.raises(FundingNotSupportedError):
        PackageJsonParser().parse_funding(42)


def test_package_json_malformed_raises_parse_error() -> None:
    with pytest.raises(ManifestParseError):
        PackageJsonParser().convert("/p/package.json", '{"name": ')


def test_package_json_non_object_raises_parse_error() -> None:
    with pytest.raises(ManifestParseError):
        PackageJsonParser().convert("/p/package.json", "[1, 2]")


def test_package_json_parse_contributor_shapes() -> None:
    parser = PackageJsonParser()
    assert parser.parse_contributor("Jane") == Contributor(name="Jane")
    assert parser.parse_contributor({"email": "a@b.c"}) == Contributor(email="a@b.c")
    assert parser.parse_contributor({}) is None
    assert parser.parse_contributor(None) is None
