# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""License classification over free-text license names and license file contents.

Every SupportedLicense variant owns a list of aliases. All aliases are compiled
once into a single case-insensitive pattern that only matches whole tokens.
When several aliases match, the longest one wins, and among aliases of the
same length the variant declared first in SupportedLicense wins.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

# Get application-specific logger
logger = logging.getLogger("writeme")


class SupportedLicense(Enum):
    UNKNOWN = "Unknown"
    APACHE_2_0 = "Apache-2.0"
    MIT = "MIT"
    GPL_3_0 = "GNU General Public License v3.0"
    BSD_2_CLAUSE = "BSD 2-Clause"
    BSD_3_CLAUSE = "BSD 3-Clause"
    LGPL_3_0 = "GNU Lesser General Public License v3.0"
    MPL_2_0 = "Mozilla Public License 2.0"
    AGPL_3_0 = "GNU Affero General Public License v3.0"
    GPL_2_0 = "GNU General Public License v2.0"
    EPL_2_0 = "Eclipse Public License 2.0"
    UNLICENSE = "Unlicense"
    CC0_1_0 = "Creative Commons Zero v1.0 Universal"
    GPL_2_0_OR_LATER = "GNU General Public License v2.0 or later"
    AGPL_1_0 = "GNU Affero General Public License v1.0"
    LGPL_2_1 = "GNU Lesser General Public License v2.1"
    LGPL_2_0_OR_LATER = "GNU Lesser General Public License v2.0 or later"
    ISC = "ISC"
    MS_PL = "Microsoft Public License"
    MS_RL = "Microsoft Reciprocal License"
    AGPL_3_0_OR_LATER = "GNU Affero General Public License v3.0 or later"
    EUPL_1_1 = "European Union Public License 1.1"
    WTFPL = "Do What The Fuck You Want To Public License"
    ZLIB = "Zlib License"
    AGPL_2_0_OR_LATER_WITH_AUTOCONF_EXCEPTION = (
        "GNU Affero General Public License v2.0 or later with Autoconf exception"
    )
    THE_UNLICENSE = "The Unlicense"
    LGPL_2_1_OR_LATER = "GNU Lesser General Public License v2.1 or later"
    LGPL_2_0 = "GNU Lesser General Public License v2.0"
    BSL_1_0 = "Boost Software License 1.0"
    GPL_3_0_ONLY = "GNU General Public License v3.0 only"
    LGPL_3_0_ONLY = "GNU Lesser General Public License v3.0 only"
    BSD_3_CLAUSE_CLEAR = "BSD 3-Clause Clear"
    BSD_4_CLAUSE = "BSD 4-Clause"
    GPL_3_0_OR_LATER_WITH_AUTOCONF_EXCEPTION = (
        "GNU General Public License v3.0 or later with Autoconf exception"
    )
    EUPL_1_2 = "European Union Public License 1.2"
    BSD_3_CLAUSE_ORIGINAL = "BSD 3-Clause Original"
    OFL_1_1 = "SIL Open Font License 1.1"
    GPL_1_0 = "GNU General Public License v1.0"
    POSTGRESQL = "PostgreSQL License"
    ARTISTIC_2_0 = "Artistic License 2.0"
    ISC_LICENSE = "ISC License"
    BSD_2_CLAUSE_FREEBSD = "BSD 2-Clause FreeBSD"
    BSD_3_CLAUSE_NEW = "BSD 3-Clause New"
    BSD_3_CLAUSE_MULTI_USE = "BSD 3-Clause Multi-Use"
    APACHE_2_0_WITH_GCC_EXCEPTION = "Apache License 2.0 with GCC Exception"
    GPL_1_0_OR_LATER = "GNU General Public License v1.0 or later"
    BSD_3_CLAUSE_LBNL = "BSD 3-Clause LBNL"
    BSD_3_CLAUSE_CLEAR_NEW = "BSD 3-Clause Clear New"
    BSD_3_CLAUSE_NO_NUCLEAR = "BSD 3-Clause No Nuclear License"
    BSD_3_CLAUSE_OPENSSL = "BSD 3-Clause OpenSSL"
    BSD_3_CLAUSE_ATTRIBUTION = "BSD 3-Clause Attribution"
    BSD_4_CLAUSE_UC = "BSD 4-Clause UC"
    GPL_2_0_OR_LATER_WITH_BISON_EXCEPTION = (
        "GNU General Public License v2.0 or later with Bison exception"
    )
    LGPL_2_1_OR_LATER_WITH_GCC_EXCEPTION = (
        "GNU Lesser General Public License v2.1 or later with GCC exception"
    )
    ZLIB_ONLY = "Zlib License Only"
    BSD_3_CLAUSE_LIMITED = "BSD 3-Clause Limited"
    BSD_3_CLAUSE_RUBY = "BSD 3-Clause Ruby"
    BSD_3_CLAUSE_UIUC = "BSD 3-Clause University of Illinois"
    LGPL_2_1_OR_LATER_WITH_CLASSPATH_EXCEPTION = (
        "GNU Lesser General Public License v2.1 or later with Classpath exception"
    )
    BSD_3_CLAUSE_UC_BERKELEY = "BSD 3-Clause U.C. Berkeley"
    MS_PL_2_0 = "Microsoft Public License 2.0"
    APACHE_1_1 = "Apache License 1.1"
    BSD_3_CLAUSE_REVISED = "BSD 3-Clause Revised"
    GPL_2_0_WITH_AUTOCONF_EXCEPTION = (
        "GNU General Public License v2.0 with Autoconf exception"
    )
    APACHE_2_0_WITH_LLVM_EXCEPTION = "Apache License 2.0 with LLVM Exception"
    BLUEOAK_1_0_0 = "BlueOak Model License 1.0.0"
    CC0_1_0_UNIVERSAL = "CC0 1.0 Universal"
    CC_BY_SA_4_0 = "Creative Commons Attribution Share Alike 4.0 International"

    def __str__(self) -> str:
        return self.value


# Aliases matched in addition to each variant's display name. UNKNOWN has none
# so it can never be the result of a match.
LICENSE_ALIASES: dict[SupportedLicense, tuple[str, ...]] = {
    SupportedLicense.UNKNOWN: (),
    SupportedLicense.APACHE_2_0: (
        "apache2",
        "apache-2",
        "apache2.0",
        "apache 2.0",
        "apache license 2.0",
        "apache license version 2.0",
        "apache license, version 2.0",
    ),
    SupportedLicense.MIT: ("mit license",),
    SupportedLicense.GPL_3_0: (
        "gplv3",
        "gpl-3.0",
        "gpl-3",
        "gplv3.0",
        "gpl-3.0-or-later",
        "gnu general public license version 3",
    ),
    SupportedLicense.BSD_2_CLAUSE: (
        "bsd2",
        "bsd-2.0",
        "bsd-2",
        "bsd2.0",
        "bsd-2-clause",
    ),
    SupportedLicense.BSD_3_CLAUSE: (
        "bsd3",
        "bsd-3.0",
        "bsd-3",
        "bsd3.0",
        "bsd-3-clause",
    ),
    SupportedLicense.LGPL_3_0: (
        "lgplv3",
        "lgpl-3.0",
        "lgpl-3",
        "lgplv3.0",
        "lgpl-3.0-or-later",
        "gnu lesser general public license version 3",
    ),
    SupportedLicense.MPL_2_0: (
        "mplv2",
        "mpl-2.0",
        "mpl-2",
        "mplv2.0",
        "mozilla public license version 2.0",
    ),
    SupportedLicense.AGPL_3_0: (
        "agplv3",
        "agpl-3.0",
        "agpl-3",
        "agplv3.0",
        "agpl-3.0-only",
        "gnu affero general public license version 3",
    ),
    SupportedLicense.GPL_2_0: (
        "gplv2",
        "gpl-2.0",
        "gpl-2",
        "gplv2.0",
        "gpl-2.0-only",
        "gnu general public license version 2",
    ),
    SupportedLicense.EPL_2_0: ("eplv2", "epl-2.0", "epl-2", "eplv2.0"),
    SupportedLicense.UNLICENSE: ("unlicense",),
    SupportedLicense.CC0_1_0: ("cc0",),
    SupportedLicense.GPL_2_0_OR_LATER: (
        "gplv2+",
        "gpl-2.0+",
        "gpl-2+",
        "gplv2.0+",
        "gpl-2.0-or-later",
    ),
    SupportedLicense.AGPL_1_0: ("agplv1", "agpl-1.0", "agplv1.0"),
    SupportedLicense.LGPL_2_1: (
        "lgplv2.1",
        "lgpl-2.1",
        "lgpl-2.1-only",
        "gnu lesser general public license version 2.1",
    ),
    SupportedLicense.LGPL_2_0_OR_LATER: (
        "lgplv2+",
        "lgpl-2.0+",
        "lgpl-2+",
        "lgplv2.0+",
        "lgpl-2.0-or-later",
    ),
    SupportedLicense.ISC: ("isc",),
    SupportedLicense.MS_PL: ("mspl", "ms-pl"),
    SupportedLicense.MS_RL: ("msrl", "ms-rl"),
    SupportedLicense.AGPL_3_0_OR_LATER: (
        "agplv3+",
        "agpl-3.0+",
        "agpl-3+",
        "agplv3.0+",
        "agpl-3.0-or-later",
    ),
    SupportedLicense.EUPL_1_1: ("euplv1.1", "eupl-1.1"),
    SupportedLicense.WTFPL: ("wtfpl",),
    SupportedLicense.ZLIB: ("zlib",),
    SupportedLicense.AGPL_2_0_OR_LATER_WITH_AUTOCONF_EXCEPTION: (),
    SupportedLicense.THE_UNLICENSE: (),
    SupportedLicense.LGPL_2_1_OR_LATER: ("lgplv2.1+", "lgpl-2.1+", "lgpl-2.1-or-later"),
    SupportedLicense.LGPL_2_0: (
        "lgplv2",
        "lgplv2.0",
        "lgpl-2.0",
        "lgpl-2",
        "lgpl-2.0-only",
    ),
    SupportedLicense.BSL_1_0: ("bsl", "bsl-1.0", "boost"),
    SupportedLicense.GPL_3_0_ONLY: (
        "gplv3only",
        "gpl-3.0-only",
        "gpl-3-only",
        "gplv3.0-only",
    ),
    SupportedLicense.LGPL_3_0_ONLY: (
        "lgplv3only",
        "lgpl-3.0-only",
        "lgpl-3-only",
        "lgplv3.0-only",
    ),
    SupportedLicense.BSD_3_CLAUSE_CLEAR: (
        "bsd3clear",
        "bsd-3-clear",
        "bsd3-clear",
        "bsd-3-clause-clear",
    ),
    SupportedLicense.BSD_4_CLAUSE: (
        "bsd4",
        "bsd-4.0",
        "bsd-4",
        "bsd4.0",
        "bsd-4-clause",
    ),
    SupportedLicense.GPL_3_0_OR_LATER_WITH_AUTOCONF_EXCEPTION: (
        "gplv3+autoconf",
        "gpl-3.0+autoconf",
        "gpl-3+autoconf",
        "gplv3.0+autoconf",
    ),
    SupportedLicense.EUPL_1_2: ("euplv1.2", "eupl-1.2"),
    SupportedLicense.BSD_3_CLAUSE_ORIGINAL: (
        "bsd3original",
        "bsd-3-original",
        "bsd3-original",
    ),
    SupportedLicense.OFL_1_1: ("silofl", "ofl", "ofl-1.1", "sil-open-font-license"),
    SupportedLicense.GPL_1_0: ("gplv1", "gpl-1.0", "gpl-1", "gplv1.0"),
    SupportedLicense.POSTGRESQL: ("postgresql", "postgresql-license"),
    SupportedLicense.ARTISTIC_2_0: (
        "artisticv2",
        "artistic-2.0",
        "artistic-2",
        "artisticv2.0",
    ),
    SupportedLicense.ISC_LICENSE: (),
    SupportedLicense.BSD_2_CLAUSE_FREEBSD: (
        "bsd2freebsd",
        "bsd-2-freebsd",
        "bsd2-freebsd",
    ),
    SupportedLicense.BSD_3_CLAUSE_NEW: ("bsd3new", "bsd-3-new", "bsd3-new"),
    SupportedLicense.BSD_3_CLAUSE_MULTI_USE: (
        "bsd3multiuse",
        "bsd-3-multi-use",
        "bsd3-multi-use",
    ),
    SupportedLicense.APACHE_2_0_WITH_GCC_EXCEPTION: (
        "apache2+gcc",
        "apache-2.0+gcc",
        "apache-2+gcc",
        "apache2.0+gcc",
    ),
    SupportedLicense.GPL_1_0_OR_LATER: ("gplv1+", "gpl-1.0+", "gpl-1+", "gplv1.0+"),
    SupportedLicense.BSD_3_CLAUSE_LBNL: ("bsd3lbnl", "bsd-3-lbnl", "bsd3-lbnl"),
    SupportedLicense.BSD_3_CLAUSE_CLEAR_NEW: (
        "bsd3clearnew",
        "bsd-3-clear-new",
        "bsd3-clear-new",
    ),
    SupportedLicense.BSD_3_CLAUSE_NO_NUCLEAR: (
        "bsd3nonuclear",
        "bsd-3-no-nuclear",
        "bsd3-no-nuclear",
    ),
    SupportedLicense.BSD_3_CLAUSE_OPENSSL: (
        "bsd3openssl",
        "bsd-3-openssl",
        "bsd3-openssl",
    ),
    SupportedLicense.BSD_3_CLAUSE_ATTRIBUTION: (
        "bsd3attribution",
        "bsd-3-attribution",
        "bsd3-attribution",
    ),
    SupportedLicense.BSD_4_CLAUSE_UC: ("bsd4uc", "bsd-4-uc", "bsd4-uc"),
    SupportedLicense.GPL_2_0_OR_LATER_WITH_BISON_EXCEPTION: (
        "gplv2+bison",
        "gpl-2.0+bison",
        "gpl-2+bison",
        "gplv2.0+bison",
    ),
    SupportedLicense.LGPL_2_1_OR_LATER_WITH_GCC_EXCEPTION: (
        "lgplv2.1+gcc",
        "lgpl-2.1+gcc",
    ),
    SupportedLicense.ZLIB_ONLY: ("zlibonly", "zlib-only"),
    SupportedLicense.BSD_3_CLAUSE_LIMITED: (
        "bsd3limited",
        "bsd-3-limited",
        "bsd3-limited",
    ),
    SupportedLicense.BSD_3_CLAUSE_RUBY: ("bsd3ruby", "bsd-3-ruby", "bsd3-ruby"),
    SupportedLicense.BSD_3_CLAUSE_UIUC: ("bsd3uiuc", "bsd-3-uiuc", "bsd3-uiuc"),
    SupportedLicense.LGPL_2_1_OR_LATER_WITH_CLASSPATH_EXCEPTION: (
        "lgplv2.1+classpath",
        "lgpl-2.1+classpath",
    ),
    SupportedLicense.BSD_3_CLAUSE_UC_BERKELEY: ("bsd3ucb", "bsd-3-ucb", "bsd3-ucb"),
    SupportedLicense.MS_PL_2_0: ("msplv2", "ms-pl-2.0", "ms-pl-2", "msplv2.0"),
    SupportedLicense.APACHE_1_1: ("apache1", "apache-1.0", "apache1.0", "apache-1.1"),
    SupportedLicense.BSD_3_CLAUSE_REVISED: (
        "bsd3revised",
        "bsd-3-revised",
        "bsd3-revised",
    ),
    SupportedLicense.GPL_2_0_WITH_AUTOCONF_EXCEPTION: (
        "gplv2+autoconf",
        "gpl-2.0+autoconf",
        "gpl-2+autoconf",
        "gplv2.0+autoconf",
    ),
    SupportedLicense.APACHE_2_0_WITH_LLVM_EXCEPTION: (
        "apache2+llvm",
        "apache-2.0+llvm",
        "apache-2+llvm",
        "apache2.0+llvm",
        "apache-2.0 with llvm-exception",
    ),
    SupportedLicense.BLUEOAK_1_0_0: ("blueoak", "blueoak-1.0.0"),
    SupportedLicense.CC0_1_0_UNIVERSAL: ("cc0-1.0", "cc0v1.0", "cc0v1"),
    SupportedLicense.CC_BY_SA_4_0: (
        "cc-by-sa-4.0",
        "cc-by-sa",
        "attribution-sharealike 4.0",
        "attribution sharealike 4.0",
        "sharealike 4.0",
    ),
}

# Lines inspected before falling back to the whole license file.
LICENSE_TITLE_LINES = 5

_WHITESPACE = re.compile(r"\s+")
_SPDX_IDENTIFIER = re.compile(
    r"SPDX-License-Identifier:\s*(?P<expression>[^\n\r*]+)", re.IGNORECASE
)


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip().lower()


def _build_keyword_table() -> dict[str, SupportedLicense]:
    # Declaration order decides between variants sharing an alias.
    table: dict[str, SupportedLicense] = {}
    for variant in SupportedLicense:
        if variant is SupportedLicense.UNKNOWN:
            continue
        for keyword in (variant.value, *LICENSE_ALIASES.get(variant, ())):
            table.setdefault(_normalize(keyword), variant)
    return table


_KEYWORDS = _build_keyword_table()
_KEYWORD_ORDER = {variant: index for index, variant in enumerate(SupportedLicense)}
# Zero-width lookahead so overlapping aliases are all reported, longest first
# at every position.
_KEYWORD_PATTERN = re.compile(
    r"(?<!\w)(?=("
    + "|".join(
        re.escape(keyword) for keyword in sorted(_KEYWORDS, key=len, reverse=True)
    )
    + r")(?!\w))",
    re.IGNORECASE,
)


def _best_match(text: str) -> SupportedLicense:
    best: tuple[int, int] | None = None
    found = SupportedLicense.UNKNOWN
    for match in _KEYWORD_PATTERN.finditer(text):
        keyword = match.group(1)
        variant = _KEYWORDS[keyword.lower()]
        rank = (-len(keyword), _KEYWORD_ORDER[variant])
        if best is None or rank < best:
            best = rank
            found = variant
    return found


def classify_by_name(text: str) -> SupportedLicense:
    """Return the license a free-text identifier refers to, or UNKNOWN."""
    if not text:
        return SupportedLicense.UNKNOWN
    return _best_match(_normalize(text))


def classify_by_content(file_contents: str) -> SupportedLicense:
    """Return the license a license file contains, or UNKNOWN.

    An SPDX identifier line takes precedence, then the title lines of the
    file, then the whole text.
    """
    if not file_contents:
        return SupportedLicense.UNKNOWN

    spdx = _SPDX_IDENTIFIER.search(file_contents)
    if spdx:
        license_name = classify_by_name(spdx.group("expression"))
        if license_name is not SupportedLicense.UNKNOWN:
            return license_name

    title_lines = [line for line in file_contents.splitlines() if line.strip()]
    title = _normalize(" ".join(title_lines[:LICENSE_TITLE_LINES]))
    license_name = _best_match(title)
    if license_name is not SupportedLicense.UNKNOWN:
        return license_name
    return _best_match(_normalize(file_contents))


@dataclass
class License:
    """A detected project license."""

    name: SupportedLicense
    path: str | None = None  # location of the license file on disk
    url: str | None = None  # deep link on the repository platform

    @classmethod
    def from_name(cls, name: str) -> "License":
        return cls(name=classify_by_name(name))

    @classmethod
    def from_file(cls, path: str, file_contents: str) -> "License":
        license_name = classify_by_content(file_contents)
        if license_name is SupportedLicense.UNKNOWN:
            logger.debug(f"Could not classify license file {path}")
        return cls(name=license_name, path=path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.name} ({self.path})"
        return str(self.name)
