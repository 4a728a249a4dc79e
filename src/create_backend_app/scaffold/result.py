"""ScaffoldResult: outcome of a single scaffold run."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ScaffoldResult:
    """Success carries the target and what was copied; failure carries the reason."""
    target: str
    copied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    gitignore_restored: bool = False
    error: Optional[str] = None
    failed_path: Optional[str] = None

    @property
    def succeeded(self):
        return self.error is None

    @classmethod
    def failure(cls, target, error, failed_path=None):
        return cls(target=target, error=error, failed_path=failed_path)
