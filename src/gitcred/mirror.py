"""Derive mirror repository names and URLs from source repository URLs."""

from __future__ import annotations

import re

# A leading "user@" or "https://" prefix, or any run of characters that are
# not safe in a path segment / remote name.
_UNSAFE = re.compile(r"^[^@]+@|^https://|[^\w\-.]+", re.ASCII)

MIRROR_PREFIX = "mirror"
MIRROR_NAMESPACE = "syncuser"


def mirror_name(url: str) -> str:
    """Return a filesystem-safe mirror identifier for *url*.

    >>> mirror_name("https://github.com/org/repo.git")
    'mirror__github.com__org__repo.git'
    >>> mirror_name("git@github.com:org/repo.git")
    'mirror__github.com__org__repo.git'
    """
    return MIRROR_PREFIX + _UNSAFE.sub("__", url)


def mirror_url(base_url: str, url: str) -> str:
    """Return ``<base_url>/syncuser/<mirror name>``; *base_url* is not validated."""
    return f"{base_url}/{MIRROR_NAMESPACE}/{mirror_name(url)}"
