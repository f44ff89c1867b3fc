from pydantic import BaseModel, ConfigDict


class GitHubRepository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str | None = None


class GitHubRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sha: str | None = None
    repo: GitHubRepository | None = None


class GitHubPullRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int | None = None
    head: GitHubRef | None = None
    base: GitHubRef | None = None


class EventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pull_request: GitHubPullRequest | None = None
    repository: GitHubRepository | None = None

    def head_sha(self, default: str) -> str:
        """Head commit of the pull request, or the triggering commit."""
        if self.pull_request and self.pull_request.head and self.pull_request.head.sha:
            return self.pull_request.head.sha
        return default

    def is_fork(self) -> bool:
        """True for pull requests opened from another repository."""
        if self.pull_request is None:
            return False

        head = self.pull_request.head
        head_name = head.repo.full_name if head and head.repo else None

        base = self.pull_request.base
        base_name = base.repo.full_name if base and base.repo else None
        if base_name is None and self.repository is not None:
            base_name = self.repository.full_name

        return head_name != base_name
