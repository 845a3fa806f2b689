"""Application configuration helpers."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, PositiveInt


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USERNAME = "josephpipitone"


class GitHubSettings(BaseModel):
    """Configuration options for the GitHub REST API."""

    token: str | None = Field(default=None, description="Personal access token or GitHub Actions token.")
    api_url: str = Field(default=DEFAULT_API_URL)
    request_timeout: float = Field(default=30.0, ge=1.0, description="Timeout for a single HTTP request in seconds.")
    repos_per_page: PositiveInt = Field(default=100, le=100, description="Repositories requested for the user listing.")
    events_per_page: PositiveInt = Field(default=30, le=100, description="Events requested for the activity feed.")
    contributors_per_page: PositiveInt = Field(default=100, le=100, description="Contributors requested per repository.")
    search_per_page: PositiveInt = Field(default=10, le=100, description="Results requested for repository search.")


class DashboardSettings(BaseModel):
    """Bounds applied while aggregating the dashboard."""

    username: str = Field(default=DEFAULT_USERNAME, min_length=1)
    language_repo_limit: PositiveInt = Field(
        default=5, description="Repositories whose languages are fetched and combined."
    )
    contribution_repo_limit: PositiveInt = Field(
        default=10, description="Repositories whose contributors are fetched and ranked."
    )
    top_language_count: PositiveInt = Field(default=5, description="Languages shown in the breakdown chart.")
    top_contribution_count: PositiveInt = Field(default=5, description="Repositories shown in the contribution chart.")
    recent_event_count: PositiveInt = Field(default=10, description="Events kept for the activity feed.")


class AppConfig(BaseModel):
    """Root configuration container."""

    github: GitHubSettings = Field(default_factory=GitHubSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None, overrides: dict[str, Any] | None = None) -> "AppConfig":
        """Construct a configuration object from environment variables."""

        env = os.environ if env is None else env
        overrides = overrides or {}

        github = GitHubSettings(
            token=overrides.get("github_token") or env.get("GITHUB_TOKEN") or env.get("GH_TOKEN"),
            api_url=overrides.get("github_api_url") or env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            request_timeout=float(overrides.get("github_request_timeout") or env.get("GITHUB_REQUEST_TIMEOUT", 30.0)),
            repos_per_page=int(overrides.get("repos_per_page") or env.get("REPOS_PER_PAGE", 100)),
            events_per_page=int(overrides.get("events_per_page") or env.get("EVENTS_PER_PAGE", 30)),
            contributors_per_page=int(overrides.get("contributors_per_page") or env.get("CONTRIBUTORS_PER_PAGE", 100)),
            search_per_page=int(overrides.get("search_per_page") or env.get("SEARCH_PER_PAGE", 10)),
        )

        dashboard = DashboardSettings(
            username=overrides.get("username") or env.get("DASHBOARD_USERNAME") or DEFAULT_USERNAME,
            language_repo_limit=int(overrides.get("language_repo_limit") or env.get("LANGUAGE_REPO_LIMIT", 5)),
            contribution_repo_limit=int(
                overrides.get("contribution_repo_limit") or env.get("CONTRIBUTION_REPO_LIMIT", 10)
            ),
            top_language_count=int(overrides.get("top_language_count") or env.get("TOP_LANGUAGE_COUNT", 5)),
            top_contribution_count=int(
                overrides.get("top_contribution_count") or env.get("TOP_CONTRIBUTION_COUNT", 5)
            ),
            recent_event_count=int(overrides.get("recent_event_count") or env.get("RECENT_EVENT_COUNT", 10)),
        )

        return cls(github=github, dashboard=dashboard)


__all__ = [
    "AppConfig",
    "DashboardSettings",
    "GitHubSettings",
    "DEFAULT_API_URL",
    "DEFAULT_USERNAME",
]
