"""Shared constants used across the application."""

# This file is intended to hold shared constants.

# Release Notes Constants
# -----------------------

EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"
"""SHA of git's empty tree, used as the comparison baseline when no tag exists yet."""

CHANGELOG_FALLBACK = "**Full Changelog**: see commit history for details."
"""Changelog text used when the commit comparison cannot be retrieved."""

RELEASE_NOTES_SECTIONS = ("Breaking Changes", "Bug Fixes", "Features")
"""Optional pull request body sections copied into the release notes, in output order."""

DEFAULT_PULL_REQUEST_PAGE_SIZE = 10
"""Number of recently updated closed pull requests searched for the merged one."""

# Release Constants
# -----------------

DEFAULT_ARTIFACTS_DIR = "release-artifacts"
"""Directory whose files are uploaded as release assets."""

GHCR_HOST = "ghcr.io"
DOCR_HOST = "registry.digitalocean.com"

GITHUB_OIDC_ISSUER = "https://token.actions.githubusercontent.com"
"""OIDC issuer that signs cosign certificates for GitHub Actions workflows."""

# Rollback Issue Constants
# ------------------------

ROLLBACK_ISSUE_LABELS = ["release-failure", "needs-investigation"]
"""Labels applied to the issue tracking a failed release."""

# Step Output Names
# -----------------

OUTPUT_RELEASE_NOTES = "RELEASE_NOTES"
OUTPUT_RELEASE_SUCCESS = "RELEASE_SUCCESS"
OUTPUT_RELEASE_ID = "RELEASE_ID"
