# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
#
# This product includes software developed at Datadog
# (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import pytest

from writeme.utils.person_parsing import parse_person


@pytest.mark.parametrize(
    "person,expected",
    [
        (
            "Jane Doe <jane@example.com> (https://jane.dev)",
            ("Jane Doe", "jane@example.com", "https://jane.dev"),
        ),
        ("Jane Doe <jane@example.com>", ("Jane Doe", "jane@example.com", None)),
        ("Jane Doe (https://jane.dev)", ("Jane Doe", None, "https://jane.dev")),
        ("Jane Doe", ("Jane Doe", None, None)),
        ("<jane@example.com>", (None, "jane@example.com", None)),
        ("Jane <>", ("Jane", None, None)),
        ("", (None, None, None)),
        (
            "Jane <jane@example.com> trailing",
            ("Jane <jane@example.com> trailing", None, None),
        ),
    ],
)
def test_parse_person(
    person: str, expected: tuple[str | None, str | None, str | None]
) -> None:
    assert parse_person(person) == expected
