"""Directory pass: route each file of a support packet to the right obfuscator.

    *config*.json  → structured obfuscation (field-name rules)
    *.log, *.txt   → text pipeline
    anything else  → left untouched

Files are rewritten in place, one at a time.  A file that fails is logged
and recorded in the report; the pass carries on with the next one.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from .errors import DirectoryError, ObfuscationError
from .types import DirectoryReport, FileResult

if TYPE_CHECKING:
    from .redactor import Obfuscator

logger = logging.getLogger(__name__)


def select_handler(
    filename: str, obfuscator: Obfuscator,
) -> Callable[[Path], FileResult] | None:
    """Pick the obfuscation routine for *filename*, or None to skip it."""
    if filename.endswith(".json") and "config" in filename:
        return obfuscator.obfuscate_config_file
    if filename.endswith(".log") or filename.endswith(".txt"):
        return obfuscator.obfuscate_log_file
    return None


def obfuscate_directory(
    directory: str | Path,
    obfuscator: Obfuscator,
    pattern: str = "*",
) -> DirectoryReport:
    """Obfuscate every recognised regular file directly inside *directory*.

    *pattern* is accepted for callers that pass a glob, but every file is
    considered regardless of its value.  Raises DirectoryError only when the
    directory itself cannot be listed.
    """
    directory = Path(directory)
    logger.debug("Obfuscating files in directory: %s (pattern %r)", directory, pattern)

    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise DirectoryError(directory, f"failed to read directory: {exc}") from exc

    report = DirectoryReport(directory=str(directory))
    for entry in entries:
        if entry.is_dir():
            continue

        handler = select_handler(entry.name, obfuscator)
        if handler is None:
            report.skipped.append(entry.name)
            continue

        try:
            report.obfuscated.append(handler(entry))
        except ObfuscationError as exc:
            logger.warning("Failed to obfuscate file %s: %s", entry.name, exc.reason)
            report.failed[entry.name] = exc.reason

    logger.info(
        "Obfuscated %d file(s) in %s, skipped %d, failed %d (%d distinct values masked)",
        len(report.obfuscated), directory, len(report.skipped), len(report.failed),
        obfuscator.cache.size,
    )
    return report
