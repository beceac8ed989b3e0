"""Faces file name templating."""

from __future__ import annotations

import re
from typing import Sequence

from facefile.errors import InvalidTemplate

THEME_SEPARATOR = "-"

_TOKEN_RE = re.compile(r"%s|%\{(?:window-system|theme|-theme|theme-)\}")


def resolve(template: str, display_kind: str, themes: Sequence[str]) -> str:
    """Substitute display and theme placeholders in ``template``.

    ``%s`` and ``%{window-system}`` become ``display_kind``. ``%{theme}``
    becomes the enabled themes joined with ``-``; ``%{-theme}`` and
    ``%{theme-}`` add a leading or trailing ``-`` to that, and all three
    collapse to the empty string when no theme is enabled.

    Tokens are replaced in a single pass, so text coming from a replacement
    is never itself treated as a token.
    """
    joined = THEME_SEPARATOR.join(themes)
    values = {
        "%s": display_kind,
        "%{window-system}": display_kind,
        "%{theme}": joined,
        "%{-theme}": THEME_SEPARATOR + joined if joined else "",
        "%{theme-}": joined + THEME_SEPARATOR if joined else "",
    }
    return _TOKEN_RE.sub(lambda match: values[match.group(0)], template)


def has_placeholders(template: str) -> bool:
    return _TOKEN_RE.search(template) is not None


def validate_resolved_path(path: str) -> str:
    """Return ``path`` unchanged, or raise InvalidTemplate if it cannot name a file."""
    if not path.strip():
        raise InvalidTemplate(message="Faces file template resolved to an empty path.")
    if "\x00" in path:
        raise InvalidTemplate(
            message="Faces file template resolved to a path containing a NUL byte.",
            details={"resolved": path.replace("\x00", "\\0")},
        )
    return path
