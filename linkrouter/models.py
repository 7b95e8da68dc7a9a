"""Data models for linkrouter."""

from typing import Optional

from pydantic import BaseModel


class FirefoxInfo(BaseModel):
    """A running Firefox instance."""

    path: str  # Executable, argv[0] of the process
    profile_name: Optional[str] = None

    def sort_key(self) -> tuple:
        """Instances with a profile come first, ordered by profile, then path."""
        return (self.profile_name is None, self.profile_name or "", self.path)
