"""Terminal rendering of a loaded dashboard."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Sequence

from rich.bar import Bar
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from .models import Event, LanguageShare, RepoContribution, Repository, SummaryStats
from .state import DashboardState, LoadStatus

BAR_WIDTH = 30


@dataclass(slots=True, frozen=True)
class Palette:
    title: str
    accent: str
    bar: str
    muted: str


LIGHT = Palette(title="bold blue", accent="blue", bar="blue", muted="grey50")
DARK = Palette(title="bold bright_cyan", accent="bright_cyan", bar="magenta", muted="grey70")


def build_dashboard(
    state: DashboardState,
    username: str,
    *,
    top_language_count: int = 5,
) -> RenderableType:
    """Build the renderable for the whole dashboard.

    The sections mirror the web layout: overview stats, repository list,
    language breakdown, top repositories by contributions and recent
    activity.
    """

    if state.loading:
        return Text("Loading...")

    palette = DARK if state.dark_mode else LIGHT
    title = Text(f"GitHub Visualizer - {username}", style=palette.title)
    if state.status is LoadStatus.FAILED:
        return Group(title, Text("No data available.", style=palette.muted))

    return Group(
        title,
        overview_table(state.summary, palette),
        repositories_table(state.repositories, palette),
        languages_chart(state.top_languages(top_language_count), palette),
        contributions_chart(state.contributions, palette),
        activity_table(state.events, palette),
    )


def render_dashboard(
    state: DashboardState,
    username: str,
    *,
    top_language_count: int = 5,
    width: int = 120,
) -> str:
    """Render the dashboard to plain text, without terminal styling."""

    console = Console(file=io.StringIO(), width=width, color_system=None)
    with console.capture() as capture:
        console.print(build_dashboard(state, username, top_language_count=top_language_count))
    return capture.get()


def overview_table(summary: SummaryStats, palette: Palette = LIGHT) -> Table:
    table = Table(title="Overview Stats", header_style=palette.accent)
    table.add_column("Total Stars", justify="right")
    table.add_column("Total Forks", justify="right")
    table.add_column("Total Watchers", justify="right")
    table.add_row(
        f"{summary.total_stars:,}",
        f"{summary.total_forks:,}",
        f"{summary.total_watchers:,}",
    )
    return table


def repositories_table(repositories: Sequence[Repository], palette: Palette = LIGHT) -> Table:
    table = Table(title=f"Your Repositories ({len(repositories)})", header_style=palette.accent)
    table.add_column("Repository", no_wrap=True)
    table.add_column("Stars", justify="right")
    table.add_column("Forks", justify="right")
    table.add_column("Language")
    table.add_column("Description", style=palette.muted)
    for repo in repositories:
        table.add_row(
            repo.name,
            str(repo.stargazers_count),
            str(repo.forks_count),
            repo.language or "Unknown",
            repo.description or "No description",
        )
    return table


def languages_chart(shares: Sequence[LanguageShare], palette: Palette = LIGHT) -> RenderableType:
    if not shares:
        return Text("No language data", style=palette.muted)
    total = sum(share.value for share in shares)
    table = Table(title="Language Breakdown", header_style=palette.accent)
    table.add_column("Language", no_wrap=True)
    table.add_column("Share", width=BAR_WIDTH)
    table.add_column("%", justify="right")
    for share in shares:
        percent = share.percent_of(total)
        table.add_row(
            share.name,
            Bar(size=100, begin=0, end=percent, width=BAR_WIDTH, color=palette.bar),
            f"{percent:.0f}%",
        )
    return table


def contributions_chart(entries: Sequence[RepoContribution], palette: Palette = LIGHT) -> RenderableType:
    if not entries:
        return Text("No contributor data", style=palette.muted)
    # All-zero totals still draw empty bars.
    highest = max(entry.contributions for entry in entries) or 1
    table = Table(title="Top Repositories by Contributions", header_style=palette.accent)
    table.add_column("Repository", no_wrap=True)
    table.add_column("Contributions", width=BAR_WIDTH)
    table.add_column("Total", justify="right")
    for entry in entries:
        table.add_row(
            entry.name,
            Bar(size=highest, begin=0, end=entry.contributions, width=BAR_WIDTH, color=palette.bar),
            str(entry.contributions),
        )
    return table


def activity_table(events: Sequence[Event], palette: Palette = LIGHT) -> Table:
    table = Table(title="Recent Activity", header_style=palette.accent)
    table.add_column("Type")
    table.add_column("Repository")
    table.add_column("Date")
    for event in events:
        table.add_row(event.type, event.repo_name, event.created_at.date().isoformat())
    return table


__all__ = [
    "activity_table",
    "build_dashboard",
    "contributions_chart",
    "languages_chart",
    "overview_table",
    "render_dashboard",
    "repositories_table",
]
