# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
#
# This product includes software developed at Datadog
# (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import re

# "Name <email> (url)" with every part optional, as used by npm and cargo.
PERSON_PATTERN = re.compile(
    r"^\s*(?P<name>[^<(]*?)\s*(?:<(?P<email>[^>]*)>)?\s*(?:\((?P<url>[^)]*)\))?\s*$"
)


def parse_person(person: str) -> tuple[str | None, str | None, str | None]:
    """
    Split a person string into its name, email and url parts.

    Parts that are missing or empty come back as None. A string that does not
    follow the expected layout is kept whole as the name.
    """
    match = PERSON_PATTERN.match(person)
    if match is None:
        stripped = person.strip()
        return (stripped or None, None, None)

    name = (match.group("name") or "").strip()
    email = (match.group("email") or "").strip()
    url = (match.group("url") or "").strip()
    return (name or None, email or None, url or None)
