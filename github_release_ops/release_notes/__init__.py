"""Release notes composition."""

from .changelog import classify_commit, render_changelog
from .composer import ReleaseNotesComposer, join_release_notes
from .description import build_release_description
from .extractor import extract_section
from .models import ClassifiedCommit, CommitCategory, CommitInfo, PullRequestInfo

__all__ = [
    "CommitCategory",
    "PullRequestInfo",
    "CommitInfo",
    "ClassifiedCommit",
    "extract_section",
    "build_release_description",
    "classify_commit",
    "render_changelog",
    "join_release_notes",
    "ReleaseNotesComposer",
]
