# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re
from dataclasses import dataclass
from enum import Enum

from giturlparse import parse as parse_git_url

# Get application-specific logger
logger = logging.getLogger("writeme")

HTTPS_URL = re.compile(
    r"^https?://(?P<host>[^/@\s]+)/(?P<sign>[^/\s]+/[^/\s]+?)(?:\.git)?/?$"
)
SSH_URL = re.compile(r"^git@(?P<host>[^:/\s]+):(?P<sign>[^/\s]+(?:/[^/\s]+)+?)\.git$")

PLATFORM_HOST_KEYWORDS = {
    "github": "GitHub",
    "gitlab": "GitLab",
    "bitbucket": "Bitbucket",
}


class RepositoryPlatform(Enum):
    GITHUB = "GitHub"
    GITLAB = "GitLab"
    BITBUCKET = "Bitbucket"
    SELF_HOSTED = "SelfHosted"
    UNKNOWN = "Unknown"


def platform_from_host(host: str) -> RepositoryPlatform:
    lowered = host.lower()
    for keyword, platform in PLATFORM_HOST_KEYWORDS.items():
        if keyword in lowered:
            return RepositoryPlatform(platform)
    return RepositoryPlatform.SELF_HOSTED


@dataclass
class Repository:
    url: str  # canonical https form without the trailing .git
    name: str | None = None
    sign: str | None = None  # owner/name, with any subgroups in between
    platform: RepositoryPlatform = RepositoryPlatform.UNKNOWN

    @classmethod
    def parse(cls, raw_url: str) -> "Repository":
        """Build a repository out of an https or ssh remote URL.

        URLs that are not recognized keep their trimmed text and end up with
        an unknown platform.
        """
        url = raw_url.strip()
        candidate = url.removeprefix("git+")

        match = HTTPS_URL.match(candidate) or SSH_URL.match(candidate)
        if match is None:
            logger.debug(f"Repository URL {url} has an unsupported shape")
            return cls(url=url)

        parsed_url = parse_git_url(candidate)
        if not parsed_url.valid:
            logger.debug(f"Repository URL {url} was rejected by the URL parser")
            return cls(url=url)

        host = match.group("host")
        sign = match.group("sign")
        return cls(
            url=f"https://{host}/{sign}",
            name=sign.split("/")[-1],
            sign=sign,
            platform=platform_from_host(host),
        )

    def __str__(self) -> str:
        return self.url
