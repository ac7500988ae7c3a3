"""Utility modules for shared functionality."""

from .constants import (
    CHANGELOG_FALLBACK,
    DEFAULT_ARTIFACTS_DIR,
    EMPTY_TREE_SHA,
    ROLLBACK_ISSUE_LABELS,
)
from .retry import retry_on_rate_limit

__all__ = [
    "EMPTY_TREE_SHA",
    "CHANGELOG_FALLBACK",
    "DEFAULT_ARTIFACTS_DIR",
    "ROLLBACK_ISSUE_LABELS",
    "retry_on_rate_limit",
]
