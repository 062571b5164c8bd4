"""Console logging for applications that use textutil.

textutil only emits DEBUG records on loggers under the ``textutil``
namespace, and the package installs a `NullHandler`, so nothing reaches the
console unless the host application asks for it. `enable_console_logging`
is that switch: it puts a Rich console handler on the root logger and
opens up the ``textutil`` loggers to the requested level.

Records from other libraries share the console, so they are tagged with
the top-level name of the logger that emitted them (``[urllib3] ...``);
textutil's own records are left untagged.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "textutil"

PLAIN_FORMAT = "%(origin)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def is_project_logger(name: str, project: str = PROJECT_PREFIX) -> bool:
    """Return True if ``name`` is ``project`` or one of its child loggers.

    ``"textutil.strings"`` belongs to ``"textutil"``; ``"textutilities"``
    does not.
    """
    return name == project or name.startswith(f"{project}.")


class OriginFilter(logging.Filter):
    """Set ``record.origin`` to a ``[package]`` tag for foreign records.

    Project records get an empty origin. Never drops a record.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        if is_project_logger(record.name, self.project):
            record.origin = ""
        else:
            record.origin = f"[{record.name.partition('.')[0]}]"
        return True


def console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a Rich handler that writes to stderr.

    Args:
        level: Minimum level to print; debug mode forces DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of origin tags.
        color: Disable to print without ANSI colors.

    Returns:
        The configured handler, not yet attached anywhere.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
        rich_tracebacks=True,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def enable_console_logging(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Print textutil and other log records on the console.

    The handler is attached to the root logger so records from every
    library reach it; the ``textutil`` logger is lowered to the handler's
    level so its DEBUG records are not dropped before they propagate.

    Args:
        level: Minimum level to print.
        debug_mode: Forwarded to `console_handler`.
        color: Forwarded to `console_handler`.

    Returns:
        The attached handler, so the caller can remove it again.
    """
    handler = console_handler(level=level, debug_mode=debug_mode, color=color)
    logging.getLogger().addHandler(handler)
    logging.getLogger(PROJECT_PREFIX).setLevel(handler.level)
    return handler
