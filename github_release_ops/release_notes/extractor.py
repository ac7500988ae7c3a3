"""Extract named sections from free-text pull request bodies."""

import re


def section_pattern(section_name: str) -> re.Pattern[str]:
    """Compile the pattern matching a heading and the text below it.

    A heading is a line starting with one or more '#', optional spaces and the
    section name. The section runs up to the next line starting with '#' or
    the end of the text.
    """
    return re.compile(
        rf"^#+[ \t]*{re.escape(section_name)}\s*(.*?)(?=^#|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )


def extract_section(text: str | None, section_name: str) -> str:
    """Return the stripped text of the first section with the given heading, or ''."""
    if not text:
        return ""
    match = section_pattern(section_name).search(text)
    return match.group(1).strip() if match else ""
