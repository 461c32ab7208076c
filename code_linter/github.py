"""GitHub REST client for pull-request file listings."""

from __future__ import annotations

import logging
from typing import Any

import requests

from code_linter import __version__
from code_linter.diff_adapter import PullRequestFile

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
PER_PAGE = 100


class RemoteError(RuntimeError):
    """Raised when the hosting provider cannot supply pull-request data."""


class GitHubClient:
    """Minimal client for the pull-request files endpoint."""

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"code-linter/{__version__}",
            }
        )

    def list_pull_request_files(self, owner: str, repo: str, number: int) -> list[PullRequestFile]:
        """Return the changed files of a pull request.

        Only the first page (up to 100 files) is fetched. Any failure raises
        ``RemoteError`` so callers never lint a partial listing.
        """
        url = f"{self.api_url}/repos/{owner}/{repo}/pulls/{number}/files"
        logger.info("Fetching files for %s/%s#%d", owner, repo, number)
        try:
            response = self._session.get(url, params={"per_page": PER_PAGE}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RemoteError(f"Failed request to {url}: {exc}") from exc

        if not response.ok:
            detail = (response.text or "").strip()
            raise RemoteError(f"HTTP {response.status_code} for {url}: {detail[:400]}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteError(f"GitHub API returned invalid JSON for {url}") from exc

        files = _parse_files(payload)
        logger.debug("Received %d files for %s/%s#%d", len(files), owner, repo, number)
        return files


def _parse_files(payload: Any) -> list[PullRequestFile]:
    if not isinstance(payload, list):
        raise RemoteError("GitHub API returned invalid pull-request files payload")

    files: list[PullRequestFile] = []
    for item in payload:
        if not isinstance(item, dict):
            raise RemoteError("GitHub API returned invalid pull-request files payload")
        filename = item.get("filename")
        if not isinstance(filename, str) or not filename:
            raise RemoteError("GitHub API returned a file entry without a filename")
        patch = item.get("patch")
        files.append(
            PullRequestFile(filename=filename, patch=patch if isinstance(patch, str) else None)
        )
    return files
