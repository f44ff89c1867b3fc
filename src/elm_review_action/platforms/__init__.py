from .base import CheckPlatform
from .github import GitHubChecksClient

__all__ = ["CheckPlatform", "GitHubChecksClient"]
