"""Command line interface for the GitHub dashboard."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from .config import AppConfig
from .dashboard import DashboardLoader
from .github_client import GitHubRestClient
from .render import build_dashboard
from .state import DashboardState, LoadStatus, toggle_theme

app = typer.Typer(add_completion=False)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_config(username: Optional[str], github_token: Optional[str]) -> AppConfig:
    overrides = {}
    if username:
        overrides["username"] = username
    if github_token:
        overrides["github_token"] = github_token
    return AppConfig.from_env(overrides=overrides)


def _load_state(config: AppConfig, initial: DashboardState) -> DashboardState:
    async def runner() -> DashboardState:
        async with GitHubRestClient(config.github) as client:
            return await DashboardLoader(config, client).load(initial)

    return asyncio.run(runner())


@app.command("show")
def show(
    username: Optional[str] = typer.Option(None, help="GitHub user to display"),
    github_token: Optional[str] = typer.Option(None, envvar="GITHUB_TOKEN", help="GitHub token"),
    dark: bool = typer.Option(False, "--dark", help="Use the dark theme"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Load the dashboard and print it."""

    configure_logging(log_level)
    config = _load_config(username, github_token)
    initial = toggle_theme(DashboardState()) if dark else DashboardState()
    state = _load_state(config, initial)

    Console().print(
        build_dashboard(
            state,
            config.dashboard.username,
            top_language_count=config.dashboard.top_language_count,
        )
    )
    if state.status is LoadStatus.FAILED:
        raise typer.Exit(code=1)


@app.command("search")
def search(
    query: str = typer.Argument(..., help="GitHub search query"),
    limit: Optional[int] = typer.Option(None, min=1, max=100, help="Number of results"),
    github_token: Optional[str] = typer.Option(None, envvar="GITHUB_TOKEN", help="GitHub token"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Search repositories, most starred first."""

    configure_logging(log_level)
    if not query.strip():
        raise typer.BadParameter("Search query must not be empty")
    config = _load_config(None, github_token)

    async def runner():
        async with GitHubRestClient(config.github) as client:
            return await client.search_repos(query, per_page=limit)

    for repo in asyncio.run(runner()):
        typer.echo(f"{repo.full_name}\t{repo.stargazers_count}\t{repo.language or 'Unknown'}")


@app.command("export")
def export(
    output: Path = typer.Argument(..., dir_okay=False, help="Destination JSON file"),
    username: Optional[str] = typer.Option(None, help="GitHub user to export"),
    github_token: Optional[str] = typer.Option(None, envvar="GITHUB_TOKEN", help="GitHub token"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Write the aggregated dashboard data to a JSON file."""

    configure_logging(log_level)
    config = _load_config(username, github_token)
    state = _load_state(config, DashboardState())
    if state.status is LoadStatus.FAILED:
        typer.echo(f"Dashboard load failed: {state.error}", err=True)
        raise typer.Exit(code=1)

    payload = _export_payload(state, config)
    with output.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    typer.echo(f"Wrote dashboard for {config.dashboard.username} to {output}")


def _export_payload(state: DashboardState, config: AppConfig) -> dict[str, Any]:
    return {
        "username": config.dashboard.username,
        "summary": asdict(state.summary),
        "repositories": [asdict(repo) for repo in state.repositories],
        "languages": state.language_totals,
        "top_languages": [asdict(share) for share in state.top_languages(config.dashboard.top_language_count)],
        "top_contributions": [asdict(entry) for entry in state.contributions],
        "events": [
            {
                "id": event.id,
                "type": event.type,
                "repo_name": event.repo_name,
                "created_at": event.created_at.isoformat(),
            }
            for event in state.events
        ],
    }


__all__ = ["app"]
