"""HTTP client for interacting with GitHub's REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import GitHubSettings
from .models import ContributorRecord, Event, Repository

LOGGER = logging.getLogger(__name__)


class GitHubClientError(RuntimeError):
    """Raised when a REST request fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubRestClient:
    """Light-weight client for the handful of REST endpoints the dashboard reads."""

    def __init__(self, settings: GitHubSettings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._base_url = settings.api_url.rstrip("/")
        self._headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "github-dashboard",
        }
        if settings.token:
            self._headers["Authorization"] = f"token {settings.token}"
        self._client = client or httpx.AsyncClient(timeout=settings.request_timeout)
        self._owns_client = client is None

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_user_repos(self, username: str, per_page: int | None = None) -> list[Repository]:
        params = {
            "per_page": per_page or self._settings.repos_per_page,
            "sort": "updated",
            "direction": "desc",
        }
        payload = await self._get_list(f"/users/{username}/repos", params)
        return [Repository.from_api(item) for item in payload]

    async def get_repo(self, owner: str, repo: str) -> Repository:
        payload = await self._get(f"/repos/{owner}/{repo}")
        if not isinstance(payload, dict):
            raise GitHubClientError(f"Unexpected payload for repository {owner}/{repo}")
        return Repository.from_api(payload)

    async def get_repo_contributors(
        self, owner: str, repo: str, per_page: int | None = None
    ) -> list[ContributorRecord]:
        """Return contributors including anonymous ones; empty repositories yield an empty list."""

        params = {"per_page": per_page or self._settings.contributors_per_page, "anon": "true"}
        payload = await self._get_list(f"/repos/{owner}/{repo}/contributors", params)
        return [ContributorRecord.from_api(item) for item in payload]

    async def get_repo_languages(self, owner: str, repo: str) -> dict[str, int]:
        payload = await self._get(f"/repos/{owner}/{repo}/languages")
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise GitHubClientError(f"Unexpected languages payload for {owner}/{repo}")
        for language, size in payload.items():
            if not isinstance(size, int) or isinstance(size, bool) or size < 0:
                raise GitHubClientError(f"Invalid byte count {size!r} for {language} in {owner}/{repo}")
        return {str(language): size for language, size in payload.items()}

    async def search_repos(self, query: str, per_page: int | None = None) -> list[Repository]:
        params = {
            "q": query,
            "per_page": per_page or self._settings.search_per_page,
            "sort": "stars",
            "order": "desc",
        }
        LOGGER.debug("Searching repositories with query %r", query)
        payload = await self._get("/search/repositories", params)
        if not isinstance(payload, dict):
            raise GitHubClientError("Search response missing 'items'")
        items = payload.get("items") or []
        return [Repository.from_api(item) for item in items]

    async def get_user_events(self, username: str, per_page: int | None = None) -> list[Event]:
        params = {"per_page": per_page or self._settings.events_per_page}
        payload = await self._get_list(f"/users/{username}/events", params)
        return [Event.from_api(item) for item in payload]

    async def _get_list(self, path: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        payload = await self._get(path, params)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise GitHubClientError(f"Expected a list from {path}")
        return payload

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.get(url, params=params, headers=self._headers)
        except httpx.RequestError as exc:
            LOGGER.warning("GitHub request error for %s: %s", path, exc)
            raise GitHubClientError(f"Request to {path} failed: {exc}") from exc

        if response.status_code == 204:
            return None

        if response.status_code >= 400:
            raise GitHubClientError(
                f"GitHub returned HTTP {response.status_code} for {path}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise GitHubClientError(f"Invalid JSON returned for {path}") from exc


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase


__all__ = ["GitHubRestClient", "GitHubClientError"]
