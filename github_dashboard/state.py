"""Dashboard state record and the transitions between load phases."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Sequence

from .aggregator import summarize, top_languages as rank_languages
from .models import Event, LanguageShare, RepoContribution, Repository, SummaryStats


class LoadStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class DashboardState:
    """Everything the renderer needs; updated only through the functions below.

    A fresh state is loading with every aggregate empty. ``languages`` holds
    (language, bytes) pairs in first-seen order.
    """

    status: LoadStatus = LoadStatus.LOADING
    dark_mode: bool = False
    repositories: tuple[Repository, ...] = ()
    events: tuple[Event, ...] = ()
    languages: tuple[tuple[str, int], ...] = ()
    contributions: tuple[RepoContribution, ...] = ()
    error: str | None = None

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def language_totals(self) -> dict[str, int]:
        return dict(self.languages)

    @property
    def summary(self) -> SummaryStats:
        return summarize(self.repositories)

    def top_languages(self, limit: int) -> list[LanguageShare]:
        return rank_languages(self.language_totals, limit)


def start_loading(state: DashboardState) -> DashboardState:
    """Enter the loading phase with every aggregate reset to empty."""

    return replace(
        state,
        status=LoadStatus.LOADING,
        repositories=(),
        events=(),
        languages=(),
        contributions=(),
        error=None,
    )


def finish_loading(
    state: DashboardState,
    repositories: Sequence[Repository],
    events: Sequence[Event],
    languages: Mapping[str, int],
    contributions: Sequence[RepoContribution],
) -> DashboardState:
    return replace(
        state,
        status=LoadStatus.LOADED,
        repositories=tuple(repositories),
        events=tuple(events),
        languages=tuple(languages.items()),
        contributions=tuple(contributions),
        error=None,
    )


def fail_loading(state: DashboardState, error: str) -> DashboardState:
    """Mark the load as failed; aggregates stay at their empty defaults."""

    return replace(
        state,
        status=LoadStatus.FAILED,
        repositories=(),
        events=(),
        languages=(),
        contributions=(),
        error=error,
    )


def toggle_theme(state: DashboardState) -> DashboardState:
    return replace(state, dark_mode=not state.dark_mode)


__all__ = [
    "DashboardState",
    "LoadStatus",
    "fail_loading",
    "finish_loading",
    "start_loading",
    "toggle_theme",
]
