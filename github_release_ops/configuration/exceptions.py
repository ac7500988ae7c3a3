"""Exceptions raised while reading the release workflow configuration."""


class GitHubAuthenticationConfigurationUndefinedError(Exception):
    """Raised when the workflow provides no usable GitHub credentials, or conflicting ones."""

    pass


class RequiredConfigurationElementError(Exception):
    """Raised when an environment variable a workflow step depends on is unset or blank."""

    def __init__(self, name: str, env_name: str) -> None:
        """Record which setting is missing and the environment variable that provides it."""
        super().__init__(f"Missing required configuration element: {name} (environment variable {env_name})")
        self.name = name
        self.env_name = env_name
