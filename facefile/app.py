"""Bootstrap: logging, settings wiring and the command line entry."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Sequence

from facefile.config.settings import AppSettings
from facefile.core.resolver import TemplatePathResolver
from facefile.core.saver import FaceFileSaver, LoadRoutine, SaveRoutine
from facefile.errors import FaceFileError, format_error_for_user
from facefile.host import EnabledThemes, current_display_kind


def configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("facefile")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "facefile.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_saver(
    settings: AppSettings,
    save_routine: SaveRoutine,
    load_routine: LoadRoutine | None = None,
    themes: EnabledThemes | None = None,
) -> FaceFileSaver:
    """Wire a saver to the configured template and live display/theme state."""
    if themes is None:
        themes = EnabledThemes(settings)
    resolver = TemplatePathResolver(
        settings.faces_file_template,
        display_query=current_display_kind,
        theme_query=themes,
    )
    return FaceFileSaver(settings.settings_file, resolver, save_routine, load_routine)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="facefile",
        description="Print the file face customizations are saved to.",
    )
    parser.add_argument("--template", help="faces file template (default: configured template)")
    parser.add_argument("--display", help="display kind (default: detected, 'tty' without a GUI)")
    parser.add_argument(
        "--theme",
        action="append",
        dest="themes",
        metavar="NAME",
        help="enabled theme, in activation order; repeat for several",
    )
    parser.add_argument("--settings-file", help="main settings file (default: configured file)")
    return parser.parse_args(argv)


def run(argv: Sequence[str] | None = None, settings: AppSettings | None = None) -> int:
    args = _parse_args(argv)
    if settings is None:
        settings = AppSettings()
    logger = configure_logger(settings)

    template = settings.faces_file_template if args.template is None else args.template
    display = args.display
    theme_list = args.themes if args.themes is not None else settings.enabled_themes
    resolver = TemplatePathResolver(
        template,
        display_query=(lambda: display) if display is not None else current_display_kind,
        theme_query=lambda: theme_list,
    )
    settings_file = Path(args.settings_file or settings.settings_file)
    try:
        path = resolver.resolve_path(settings_file)
    except FaceFileError as exc:
        logger.warning("faces path resolution failed: %s", exc.to_dict())
        print(format_error_for_user(exc), file=sys.stderr)
        return 2
    logger.info("faces path for template %r: %s", template, path)
    print(path)
    return 0
