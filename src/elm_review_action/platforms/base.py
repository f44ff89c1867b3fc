from abc import ABC, abstractmethod
from typing import Any


class CheckPlatform(ABC):
    @abstractmethod
    async def create_check(
        self,
        name: str,
        head_sha: str,
        conclusion: str,
        output: dict[str, Any],
    ) -> int:
        """Create a completed check run and return its id."""
        pass

    @abstractmethod
    async def update_check(
        self,
        check_run_id: int,
        conclusion: str,
        output: dict[str, Any],
    ) -> None:
        pass
