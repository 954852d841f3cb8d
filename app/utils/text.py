"""Text helpers shared by API routes."""

import re

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def slugify(text: str) -> str:
    """Turn text into a URL-friendly slug.

        Examples:

        slugify("  Hello, World!  ")
        Output: "hello-world"

        slugify("___multi   spaces---dash")
        Output: "multi-spaces-dash"

    Args:
        text (str): The text to convert.

    Returns:
        str: Lowercase word characters joined by single hyphens.
    """
    slug = _NON_SLUG_CHARS.sub("", text.lower().strip())
    slug = _SEPARATOR_RUNS.sub("-", slug)
    return _EDGE_HYPHENS.sub("", slug)
