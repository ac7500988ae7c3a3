"""Contains utility functions for GitHub interactions."""


def split_repository(repo: str | None) -> tuple[str, str]:
    """Splits an 'owner/repo' slug into owner and repository."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def build_compare_url(server_url: str, repo: str, base: str, head: str) -> str:
    """Build the web URL comparing two commit references of a repository."""
    owner, repository = split_repository(repo)
    return f"{server_url.rstrip('/')}/{owner}/{repository}/compare/{base}...{head}"


def build_actions_url(server_url: str, repo: str) -> str:
    """Build the web URL of a repository's Actions tab."""
    owner, repository = split_repository(repo)
    return f"{server_url.rstrip('/')}/{owner}/{repository}/actions"


def expand_upload_url(upload_url: str) -> str:
    """Drop the URI template suffix (such as '{?name,label}') from a release's upload_url."""
    return upload_url.split("{", 1)[0]
