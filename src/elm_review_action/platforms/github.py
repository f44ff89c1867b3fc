from typing import Any
import httpx
from .base import CheckPlatform


class GitHubChecksClient(CheckPlatform):
    def __init__(self, token: str, owner: str, repo: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def _check_runs_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/check-runs"

    async def create_check(
        self,
        name: str,
        head_sha: str,
        conclusion: str,
        output: dict[str, Any],
    ) -> int:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self._check_runs_url(),
                headers=self._headers(),
                json={
                    "name": name,
                    "head_sha": head_sha,
                    "status": "completed",
                    "conclusion": conclusion,
                    "output": output,
                },
                timeout=30.0,
            )
            response.raise_for_status()
            return response.json()["id"]

    async def update_check(
        self,
        check_run_id: int,
        conclusion: str,
        output: dict[str, Any],
    ) -> None:
        async with httpx.AsyncClient() as client:
            response = await client.patch(
                f"{self._check_runs_url()}/{check_run_id}",
                headers=self._headers(),
                json={
                    "status": "completed",
                    "conclusion": conclusion,
                    "output": output,
                },
                timeout=30.0,
            )
            response.raise_for_status()
