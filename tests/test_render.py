from __future__ import annotations

from datetime import datetime, timezone

from rich.bar import Bar
from rich.table import Table
from rich.text import Text

from github_dashboard.models import Event, LanguageShare, RepoContribution, Repository
from github_dashboard.render import (
    DARK,
    contributions_chart,
    languages_chart,
    render_dashboard,
)
from github_dashboard.state import DashboardState, fail_loading, finish_loading, start_loading, toggle_theme


def _loaded_state(languages: dict[str, int] | None = None) -> DashboardState:
    repo = Repository(
        id=1,
        name="demo",
        full_name="octocat/demo",
        owner_login="octocat",
        description=None,
        language=None,
        stargazers_count=1200,
        forks_count=4,
        watchers_count=1200,
        html_url="https://github.com/octocat/demo",
    )
    event = Event(
        id="1",
        type="PushEvent",
        repo_name="octocat/demo",
        created_at=datetime(2024, 2, 3, 9, 0, tzinfo=timezone.utc),
    )
    return finish_loading(
        DashboardState(),
        [repo],
        [event],
        {"Python": 75, "Shell": 25} if languages is None else languages,
        [RepoContribution(name="demo", full_name="octocat/demo", contributions=12)],
    )


def _bars(table: Table) -> list[Bar]:
    return [cell for cell in table.columns[1].cells if isinstance(cell, Bar)]


def test_render_dashboard_includes_every_section():
    text = render_dashboard(_loaded_state(), "octocat")

    assert "GitHub Visualizer - octocat" in text
    for title in (
        "Overview Stats",
        "Your Repositories (1)",
        "Language Breakdown",
        "Top Repositories by Contributions",
        "Recent Activity",
    ):
        assert title in text
    assert "1,200" in text
    assert "No description" in text
    assert "Unknown" in text
    assert "75%" in text
    assert "PushEvent" in text
    assert "2024-02-03" in text


def test_render_dashboard_is_plain_text():
    text = render_dashboard(toggle_theme(_loaded_state()), "octocat")

    assert "\x1b[" not in text


def test_render_dashboard_loading_and_failed():
    assert render_dashboard(DashboardState(), "octocat").strip() == "Loading..."
    failed = fail_loading(start_loading(DashboardState()), "boom")
    assert "No data available." in render_dashboard(failed, "octocat")


def test_render_dashboard_without_language_data():
    text = render_dashboard(_loaded_state(languages={}), "octocat")

    assert "No language data" in text
    assert "Language Breakdown" not in text


def test_empty_charts_render_placeholders():
    assert isinstance(languages_chart([]), Text)
    assert languages_chart([]).plain == "No language data"
    assert contributions_chart([]).plain == "No contributor data"


def test_languages_chart_scales_bars_to_percentages():
    chart = languages_chart([LanguageShare("Go", 75), LanguageShare("C", 25)], DARK)

    bars = _bars(chart)
    assert [(bar.begin, bar.end, bar.size) for bar in bars] == [(0, 75.0, 100), (0, 25.0, 100)]
    assert bars[0].style.color.name == "magenta"


def test_contributions_chart_scales_to_highest_and_handles_zero():
    chart = contributions_chart(
        [
            RepoContribution(name="a", full_name="octocat/a", contributions=8),
            RepoContribution(name="b", full_name="octocat/b", contributions=2),
        ]
    )
    zero_chart = contributions_chart([RepoContribution(name="x", full_name="octocat/x", contributions=0)])

    assert [(bar.end, bar.size) for bar in _bars(chart)] == [(8, 8), (2, 8)]
    assert [(bar.end, bar.size) for bar in _bars(zero_chart)] == [(0, 1)]
