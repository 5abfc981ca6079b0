"""Version string reported by the CLI and at startup."""

from typing import Optional

from quotaday_api import __version__

from .config import settings


def version_string(version: Optional[str] = None, git_commit: Optional[str] = None) -> str:
    """Return ``v<version>+<short commit>``.

    The commit is shortened to its first seven characters.  An unknown
    commit yields a trailing ``+``, e.g. ``v0.1.0+``.
    """
    version = version or __version__
    commit = settings.git_commit if git_commit is None else git_commit
    return f"v{version}+{commit[:7]}"
