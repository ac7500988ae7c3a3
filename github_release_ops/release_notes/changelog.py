"""Classify conventional commits and render the changelog."""

import re
from typing import Iterable

from .models import ClassifiedCommit, CommitCategory, CommitInfo

FEATURE_PREFIX = re.compile(r"^feat(?:\(.*?\))?:\s*")
FIX_PREFIX = re.compile(r"^fix(?:\(.*?\))?:\s*")
IGNORED_PREFIX = "Merge"

CHANGELOG_GROUPS = (
    (CommitCategory.FEATURE, "Features"),
    (CommitCategory.FIX, "Bug Fixes"),
    (CommitCategory.OTHER, "Other"),
)


def classify_commit(commit: CommitInfo) -> ClassifiedCommit:
    """Classify a commit by the conventional commit prefix of its subject line."""
    subject = commit.subject
    for category, prefix in ((CommitCategory.FEATURE, FEATURE_PREFIX), (CommitCategory.FIX, FIX_PREFIX)):
        match = prefix.match(subject)
        if match:
            return ClassifiedCommit(category=category, text=subject[match.end() :], attribution=commit.attribution)
    if subject.startswith(IGNORED_PREFIX):
        return ClassifiedCommit(category=CommitCategory.IGNORED, text=subject, attribution=commit.attribution)
    return ClassifiedCommit(category=CommitCategory.OTHER, text=subject, attribution=commit.attribution)


def render_changelog(commits: Iterable[CommitInfo], compare_url: str) -> str:
    """Render the grouped changelog followed by the full changelog link.

    Commits keep their original order within each group. Merge commits are
    left out entirely.
    """
    classified = [classify_commit(commit) for commit in commits]
    changelog = ""
    for category, label in CHANGELOG_GROUPS:
        items = [commit.as_list_item() for commit in classified if commit.category == category]
        if items:
            changelog += f"**{label}:**\n" + "\n".join(items) + "\n\n"
    changelog += f"**Full Changelog:** {compare_url}"
    return changelog
