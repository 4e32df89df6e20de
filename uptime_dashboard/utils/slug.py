"""
Slug generation utilities.
"""

import re


def generate_slug(text: str) -> str:
    """
    Build the immutable check name from its title.

    Characters outside ``[a-z0-9]``, whitespace and ``-`` are dropped, runs of
    whitespace become a single hyphen, repeated hyphens collapse and leading or
    trailing hyphens are removed.
    """
    text = text.lower()
    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def slugify_name(name: str) -> str:
    """Resource slug: every run of non-alphanumerics becomes one hyphen."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower())
