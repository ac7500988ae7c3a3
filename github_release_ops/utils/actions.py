"""Helpers for publishing GitHub Actions step outputs."""

import uuid
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


def format_output_value(value: object) -> str:
    """Render a step output value the way actions/github-script does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def make_delimiter(value: str) -> str:
    """Return a heredoc delimiter that does not occur in the value."""
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return delimiter


def set_output(name: str, value: object, output_path: Path | str | None) -> None:
    """Append a named output to the GITHUB_OUTPUT file of the current step.

    Multi-line values are written in the heredoc form. When no output file is
    configured (for example when running locally) the output is only logged.
    """
    text = format_output_value(value)
    if not output_path:
        logger.info("No step output file configured, skipping output", name=name)
        return

    with Path(output_path).open("a", encoding="utf-8") as out:
        if "\n" in text:
            delimiter = make_delimiter(text)
            out.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
        else:
            out.write(f"{name}={text}\n")
    logger.debug("Set step output", name=name)
