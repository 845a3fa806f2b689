"""Domain models used by the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


UTC = timezone.utc


@dataclass(slots=True, frozen=True)
class Repository:
    """Normalized representation of a GitHub repository."""

    id: int
    name: str
    full_name: str
    owner_login: str
    description: str | None
    language: str | None
    stargazers_count: int
    forks_count: int
    watchers_count: int
    html_url: str

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Repository":
        """Convert a REST repository object into a :class:`Repository`."""

        owner = payload.get("owner") or {}
        name = payload.get("name", "")
        owner_login = owner.get("login", "")
        full_name = payload.get("full_name") or (f"{owner_login}/{name}" if owner_login else name)

        return cls(
            id=int(payload.get("id", 0)),
            name=name,
            full_name=full_name,
            owner_login=owner_login,
            description=payload.get("description") or None,
            language=payload.get("language") or None,
            stargazers_count=payload.get("stargazers_count", 0) or 0,
            forks_count=payload.get("forks_count", 0) or 0,
            watchers_count=payload.get("watchers_count", 0) or 0,
            html_url=payload.get("html_url") or f"https://github.com/{full_name}",
        )


@dataclass(slots=True, frozen=True)
class Event:
    """A public activity record for a user."""

    id: str
    type: str
    repo_name: str
    created_at: datetime

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Event":
        repo = payload.get("repo") or {}
        return cls(
            id=str(payload.get("id", "")),
            type=payload.get("type", ""),
            repo_name=repo.get("name", ""),
            created_at=_parse_datetime(payload.get("created_at")),
        )


@dataclass(slots=True, frozen=True)
class ContributorRecord:
    """Contribution count attributed to a single identity on a repository."""

    identity: str
    contributions: int

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "ContributorRecord":
        # Anonymous contributors carry an email and name instead of a login.
        identity = payload.get("login") or payload.get("email") or payload.get("name") or ""
        return cls(identity=identity, contributions=int(payload.get("contributions", 0) or 0))


@dataclass(slots=True, frozen=True)
class RepoContribution:
    name: str
    full_name: str
    contributions: int


@dataclass(slots=True, frozen=True)
class LanguageShare:
    """A language and its combined byte count, as plotted in the breakdown chart."""

    name: str
    value: int

    def percent_of(self, total: int) -> float:
        if total <= 0:
            return 0.0
        return self.value * 100.0 / total


@dataclass(slots=True, frozen=True)
class SummaryStats:
    total_stars: int
    total_forks: int
    total_watchers: int
    repository_count: int


def _parse_datetime(value: str | None) -> datetime:
    if not value:
        raise ValueError("Event payload missing created_at timestamp")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).astimezone(UTC)


__all__ = [
    "ContributorRecord",
    "Event",
    "LanguageShare",
    "RepoContribution",
    "Repository",
    "SummaryStats",
    "UTC",
]
