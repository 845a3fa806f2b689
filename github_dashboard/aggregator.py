"""Reducers that turn per-repository fetch results into dashboard aggregates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence, Union

from .models import ContributorRecord, LanguageShare, RepoContribution, Repository, SummaryStats

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FetchOk:
    repository: Repository
    data: Any


@dataclass(slots=True, frozen=True)
class FetchFailed:
    """A per-repository call that raised; ``cause`` keeps the original exception."""

    repository: Repository
    cause: BaseException


FetchResult = Union[FetchOk, FetchFailed]


def aggregate_languages(results: Iterable[FetchResult]) -> dict[str, int]:
    """Sum language byte counts across repositories in input order.

    Failed fetches contribute nothing, and neither does a map holding a
    negative or non-integer count; the pass continues with the next
    repository.
    """

    combined: dict[str, int] = {}
    for result in results:
        if isinstance(result, FetchFailed):
            LOGGER.debug("No language data for %s: %s", result.repository.name, result.cause)
            continue
        invalid = [
            language
            for language, size in result.data.items()
            if not isinstance(size, int) or isinstance(size, bool) or size < 0
        ]
        if invalid:
            LOGGER.warning(
                "Skipping languages for %s: invalid byte counts for %s",
                result.repository.name,
                ", ".join(invalid),
            )
            continue
        for language, size in result.data.items():
            combined[language] = combined.get(language, 0) + size
    return combined


def top_languages(languages: Mapping[str, int], limit: int) -> list[LanguageShare]:
    """Return the ``limit`` largest languages, biggest first."""

    shares = [LanguageShare(name=name, value=value) for name, value in languages.items()]
    shares.sort(key=lambda share: share.value, reverse=True)
    return shares[:limit]


def total_contributions(records: Iterable[ContributorRecord]) -> int:
    return sum(record.contributions for record in records)


def rank_contributions(results: Sequence[FetchResult], limit: int) -> list[RepoContribution]:
    """Rank repositories by the sum of their contributors' counts.

    A failed fetch ranks with zero contributions instead of being dropped.
    Equal totals keep their input order, and truncation happens after sorting.
    """

    ranked: list[RepoContribution] = []
    for result in results:
        if isinstance(result, FetchFailed):
            total = 0
        else:
            total = total_contributions(result.data)
        ranked.append(
            RepoContribution(
                name=result.repository.name,
                full_name=result.repository.full_name,
                contributions=total,
            )
        )
    ranked.sort(key=lambda entry: entry.contributions, reverse=True)
    return ranked[:limit]


def summarize(repositories: Sequence[Repository]) -> SummaryStats:
    return SummaryStats(
        total_stars=sum(repo.stargazers_count for repo in repositories),
        total_forks=sum(repo.forks_count for repo in repositories),
        total_watchers=sum(repo.watchers_count for repo in repositories),
        repository_count=len(repositories),
    )


__all__ = [
    "FetchFailed",
    "FetchOk",
    "FetchResult",
    "aggregate_languages",
    "rank_contributions",
    "summarize",
    "top_languages",
    "total_contributions",
]
