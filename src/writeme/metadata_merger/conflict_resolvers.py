# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import click
import typer

from writeme.metadata_collector.license import License


@dataclass
class Candidate:
    value: Any
    source_path: str | None  # None for values offered without a source

    def __str__(self) -> str:
        return str(self.value)


class ConflictResolver(ABC):
    @abstractmethod
    def resolve(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        """Pick one of the candidate values for field_name, or None to decline."""
        raise NotImplementedError


class FirstCandidateResolver(ConflictResolver):
    def resolve(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        if not candidates:
            return None
        return candidates[0].value


class DecliningResolver(ConflictResolver):
    def resolve(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        return None


class PreferredValueResolver(ConflictResolver):
    """Picks the candidate whose text matches the preference for the field.

    Fields without a preference, or whose preference is not among the
    candidates, are handed to the fallback resolver.
    """

    def __init__(
        self,
        preferences: dict[str, str],
        fallback: ConflictResolver | None = None,
    ):
        self.preferences = preferences
        self.fallback = fallback if fallback is not None else DecliningResolver()

    def resolve(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        preferred = self.preferences.get(field_name)
        if preferred is not None:
            for candidate in candidates:
                if _preference_key(candidate.value) == preferred.casefold():
                    return candidate.value
        return self.fallback.resolve(field_name, candidates)


def _preference_key(value: Any) -> str:
    # License candidates are matched by name, whatever file they came from.
    if isinstance(value, License):
        return str(value.name).casefold()
    return str(value).casefold()


class InteractiveConflictResolver(ConflictResolver):
    """Asks the user on the terminal which candidate to keep."""

    def resolve(self, field_name: str, candidates: list[Candidate]) -> Any | None:
        if not candidates:
            return None
        typer.echo(f"\nMultiple values found for {field_name}:")
        for index, candidate in enumerate(candidates, start=1):
            source = f" (from {candidate.source_path})" if candidate.source_path else ""
            typer.echo(f"  {index}. {candidate}{source}")
        choice = typer.prompt(
            f"Which {field_name} should be used?",
            default=1,
            type=click.IntRange(1, len(candidates)),
        )
        return candidates[choice - 1].value
