"""Split save: variables to the settings file, faces to the resolved faces file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from facefile.core.resolver import PathResolver
from facefile.errors import ErrorCode, classify_exception

logger = logging.getLogger("facefile.save")


class SaveMode(Enum):
    """Which customization categories a single save call writes."""

    ALL = "all"
    VARIABLES = "variables"
    FACES = "faces"


@dataclass(frozen=True, slots=True)
class SaveTarget:
    """One call into the host save routine."""

    path: Path
    mode: SaveMode


SaveRoutine = Callable[[Path, SaveMode], None]
LoadRoutine = Callable[[Path], None]


class FaceFileSaver:
    """Drives the host save routine with explicit per-file save modes."""

    def __init__(
        self,
        settings_path: str | Path,
        resolver: PathResolver,
        save_routine: SaveRoutine,
        load_routine: LoadRoutine | None = None,
    ) -> None:
        self._settings_path = Path(settings_path)
        self._resolver = resolver
        self._save_routine = save_routine
        self._load_routine = load_routine

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    def faces_path(self) -> Path:
        return self._resolver.resolve_path(self._settings_path)

    def is_split(self) -> bool:
        return not _same_file(self.faces_path(), self._settings_path)

    def plan(self) -> list[SaveTarget]:
        faces_path = self.faces_path()
        if _same_file(faces_path, self._settings_path):
            return [SaveTarget(self._settings_path, SaveMode.ALL)]
        return [
            SaveTarget(self._settings_path, SaveMode.VARIABLES),
            SaveTarget(faces_path, SaveMode.FACES),
        ]

    def target_for(self, mode: SaveMode) -> Path:
        if mode is SaveMode.FACES:
            return self.faces_path()
        return self._settings_path

    def save_all(self) -> list[SaveTarget]:
        """Write every category, splitting faces out when a template is active."""
        targets = self.plan()
        logger.info("saving customizations: %s",
                    ", ".join(f"{t.mode.value}->{t.path}" for t in targets))
        for target in targets:
            self._run_save(target)
        return targets

    def save_variables(self) -> SaveTarget:
        """Write variables to the settings file.

        The faces template is still resolved to decide between a split and a
        combined save, so an unusable template raises InvalidTemplate here too.
        """
        mode = SaveMode.VARIABLES if self.is_split() else SaveMode.ALL
        target = SaveTarget(self._settings_path, mode)
        self._run_save(target)
        return target

    def save_faces(self) -> SaveTarget:
        faces_path = self.faces_path()
        if _same_file(faces_path, self._settings_path):
            target = SaveTarget(self._settings_path, SaveMode.ALL)
        else:
            target = SaveTarget(faces_path, SaveMode.FACES)
        self._run_save(target)
        return target

    def load_faces(self) -> bool:
        """Load a separate faces file through the host, if one exists."""
        if self._load_routine is None:
            return False
        faces_path = self.faces_path()
        if _same_file(faces_path, self._settings_path) or not faces_path.is_file():
            logger.debug("no separate faces file to load at %s", faces_path)
            return False
        try:
            self._load_routine(faces_path)
        except OSError as exc:
            raise classify_exception(exc, faces_path, default=ErrorCode.LOAD_FAILED) from exc
        logger.info("loaded faces from %s", faces_path)
        return True

    def _run_save(self, target: SaveTarget) -> None:
        try:
            if target.mode is SaveMode.FACES:
                target.path.parent.mkdir(parents=True, exist_ok=True)
            self._save_routine(target.path, target.mode)
        except OSError as exc:
            logger.warning("save of %s to %s failed: %s", target.mode.value, target.path, exc)
            raise classify_exception(exc, target.path) from exc
        logger.debug("saved %s to %s", target.mode.value, target.path)


def _same_file(left: Path, right: Path) -> bool:
    return _expand(left).resolve() == _expand(right).resolve()


def _expand(path: Path) -> Path:
    try:
        return path.expanduser()
    except RuntimeError:
        return path
