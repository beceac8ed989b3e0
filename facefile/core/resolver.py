"""Strategies the host save routine calls to find the faces file."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, Sequence

from facefile.core.templating import resolve, validate_resolved_path
from facefile.errors import InvalidTemplate

DisplayQuery = Callable[[], str]
ThemeQuery = Callable[[], Sequence[str]]


class PathResolver(Protocol):
    """Maps the main settings path to the path faces should be written to."""

    def resolve_path(self, default_path: Path) -> Path:
        ...


class DefaultPathResolver:
    """Keeps faces in the main settings file."""

    def resolve_path(self, default_path: Path) -> Path:
        return default_path


class TemplatePathResolver:
    """Resolves the faces file from a template and live display/theme state."""

    def __init__(
        self,
        template: str,
        display_query: DisplayQuery,
        theme_query: ThemeQuery,
    ) -> None:
        self._template = (template or "").strip()
        self._display_query = display_query
        self._theme_query = theme_query

    @property
    def template(self) -> str:
        return self._template

    @property
    def active(self) -> bool:
        return bool(self._template)

    def resolve_path(self, default_path: Path) -> Path:
        if not self._template:
            return default_path
        display_kind = self._display_query() or "tty"
        themes = list(self._theme_query())
        resolved = validate_resolved_path(resolve(self._template, display_kind, themes))
        try:
            path = Path(resolved).expanduser()
        except RuntimeError as exc:
            # "~name" with no such user
            raise InvalidTemplate(
                message=f"Cannot expand the home directory in {resolved!r}.",
                details={"resolved": resolved},
            ) from exc
        if not path.is_absolute():
            # relative templates live beside the main settings file
            path = default_path.parent / path
        return path
