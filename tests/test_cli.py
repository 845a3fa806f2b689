from __future__ import annotations

import json

from typer.testing import CliRunner

from github_dashboard import cli
from github_dashboard.models import RepoContribution, Repository
from github_dashboard.state import DashboardState, fail_loading, finish_loading, start_loading

runner = CliRunner()


def _repo(name: str) -> Repository:
    return Repository(
        id=1,
        name=name,
        full_name=f"octocat/{name}",
        owner_login="octocat",
        description="demo",
        language="Go",
        stargazers_count=5,
        forks_count=1,
        watchers_count=5,
        html_url=f"https://github.com/octocat/{name}",
    )


def _loaded(initial: DashboardState) -> DashboardState:
    return finish_loading(
        start_loading(initial),
        [_repo("demo")],
        [],
        {"Go": 10},
        [RepoContribution(name="demo", full_name="octocat/demo", contributions=3)],
    )


def test_show_prints_dashboard(monkeypatch):
    seen = {}

    def fake_load_state(config, initial):
        seen["username"] = config.dashboard.username
        seen["dark_mode"] = initial.dark_mode
        return _loaded(initial)

    monkeypatch.setattr(cli, "_load_state", fake_load_state)

    result = runner.invoke(cli.app, ["show", "--username", "octocat", "--dark"])

    assert result.exit_code == 0
    assert "GitHub Visualizer - octocat" in result.output
    assert "Total Stars" in result.output
    assert "Language Breakdown" in result.output
    assert seen == {"username": "octocat", "dark_mode": True}


def test_show_exits_non_zero_when_load_fails(monkeypatch):
    monkeypatch.setattr(cli, "_load_state", lambda config, initial: fail_loading(start_loading(initial), "boom"))

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 1
    assert "No data available." in result.output


def test_export_writes_json(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "_load_state", lambda config, initial: _loaded(initial))
    output = tmp_path / "dashboard.json"

    result = runner.invoke(cli.app, ["export", str(output), "--username", "octocat"])

    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["username"] == "octocat"
    assert payload["summary"]["total_stars"] == 5
    assert payload["languages"] == {"Go": 10}
    assert payload["top_contributions"] == [{"name": "demo", "full_name": "octocat/demo", "contributions": 3}]


def test_search_prints_results(monkeypatch):
    class FakeClient:
        def __init__(self, settings) -> None:
            self.settings = settings

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb) -> None:
            return None

        async def search_repos(self, query: str, per_page: int | None = None):
            assert query == "language:go"
            assert per_page == 3
            return [_repo("demo")]

    monkeypatch.setattr(cli, "GitHubRestClient", FakeClient)

    result = runner.invoke(cli.app, ["search", "language:go", "--limit", "3"])

    assert result.exit_code == 0
    assert "octocat/demo\t5\tGo" in result.output
