"""High level orchestration for loading the dashboard."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence

from .aggregator import FetchFailed, FetchOk, FetchResult, aggregate_languages, rank_contributions
from .config import AppConfig
from .github_client import GitHubRestClient
from .models import Repository
from .state import DashboardState, fail_loading, finish_loading, start_loading

LOGGER = logging.getLogger(__name__)


class DashboardLoader:
    """Fetches one user's repositories and activity and folds them into a :class:`DashboardState`."""

    def __init__(self, config: AppConfig, client: GitHubRestClient) -> None:
        self._config = config
        self._client = client

    async def load(self, state: DashboardState | None = None) -> DashboardState:
        settings = self._config.dashboard
        username = settings.username
        state = start_loading(state or DashboardState())

        LOGGER.info("Loading dashboard for %s", username)
        # Both calls run to completion before either failure is reported.
        outcomes = await asyncio.gather(
            self._client.get_user_repos(username),
            self._client.get_user_events(username),
            return_exceptions=True,
        )
        errors = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        if errors:
            for error in errors:
                LOGGER.error("Error fetching data for %s: %s", username, error)
            return fail_loading(state, str(errors[0]))
        repositories, events = outcomes

        events = events[: settings.recent_event_count]
        LOGGER.info("Fetched %s repositories and %s events", len(repositories), len(events))

        language_results = await self._fetch_each(
            repositories[: settings.language_repo_limit],
            self._client.get_repo_languages,
            "languages",
        )
        languages = aggregate_languages(language_results)

        contributor_results = await self._fetch_each(
            repositories[: settings.contribution_repo_limit],
            self._client.get_repo_contributors,
            "contributors",
        )
        contributions = rank_contributions(contributor_results, settings.top_contribution_count)
        LOGGER.debug("Top repositories by contributions: %s", contributions)

        return finish_loading(state, repositories, events, languages, contributions)

    async def _fetch_each(
        self,
        repositories: Sequence[Repository],
        fetch: Callable[[str, str], Awaitable[object]],
        label: str,
    ) -> list[FetchResult]:
        """Call ``fetch`` for each repository in order, awaiting one call before issuing the next."""

        results: list[FetchResult] = []
        for repository in repositories:
            owner = repository.owner_login or self._config.dashboard.username
            try:
                data = await fetch(owner, repository.name)
            except Exception as exc:
                LOGGER.warning("Error fetching %s for %s: %s", label, repository.name, exc)
                results.append(FetchFailed(repository=repository, cause=exc))
                continue
            results.append(FetchOk(repository=repository, data=data))
        return results


__all__ = ["DashboardLoader"]
