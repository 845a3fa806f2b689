from __future__ import annotations

import pytest
from pydantic import ValidationError

from github_dashboard.config import DEFAULT_USERNAME, AppConfig, DashboardSettings


def test_from_env_uses_defaults():
    config = AppConfig.from_env(env={})

    assert config.github.token is None
    assert config.github.api_url == "https://api.github.com"
    assert config.dashboard.username == DEFAULT_USERNAME
    assert config.dashboard.language_repo_limit == 5
    assert config.dashboard.contribution_repo_limit == 10
    assert config.dashboard.top_language_count == 5
    assert config.dashboard.top_contribution_count == 5
    assert config.dashboard.recent_event_count == 10


def test_from_env_reads_environment_and_overrides():
    env = {
        "GH_TOKEN": "env-token",
        "DASHBOARD_USERNAME": "octocat",
        "LANGUAGE_REPO_LIMIT": "3",
        "CONTRIBUTION_REPO_LIMIT": "7",
    }

    config = AppConfig.from_env(env=env, overrides={"username": "hubot", "top_contribution_count": 2})

    assert config.github.token == "env-token"
    assert config.dashboard.username == "hubot"
    assert config.dashboard.language_repo_limit == 3
    assert config.dashboard.contribution_repo_limit == 7
    assert config.dashboard.top_contribution_count == 2


def test_bounds_must_be_positive():
    with pytest.raises(ValidationError):
        DashboardSettings(language_repo_limit=0)
