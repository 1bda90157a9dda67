# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from writeme.metadata_merger.conflict_resolvers import (
    Candidate,
    ConflictResolver,
    DecliningResolver,
    FirstCandidateResolver,
    InteractiveConflictResolver,
    PreferredValueResolver,
)
from writeme.metadata_merger.merger import MetadataMerger

__all__ = [
    "Candidate",
    "ConflictResolver",
    "DecliningResolver",
    "FirstCandidateResolver",
    "InteractiveConflictResolver",
    "MetadataMerger",
    "PreferredValueResolver",
]
