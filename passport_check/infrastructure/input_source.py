"""Input Source — resolves the text blob a batch run validates.

Invariants:
    - Without an override the packaged data file is used (fixed at build time)
    - Any read failure surfaces as InputSourceError, never a bare OSError
    - The whole blob is resident in memory before parsing starts
"""

import logging
from importlib import resources
from pathlib import Path

from passport_check.core.errors import InputSourceError

logger = logging.getLogger(__name__)

PACKAGE_DATA = "passports.txt"


def read_packaged_input(name: str = PACKAGE_DATA) -> str:
    source = f"package:passport_check/data/{name}"
    try:
        text = resources.files("passport_check.data").joinpath(name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError(source, str(exc)) from exc
    logger.debug("Loaded packaged input", extra={"source": source})
    return text


def read_input_file(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError(str(path), str(exc)) from exc
    logger.debug("Loaded input file", extra={"source": str(path)})
    return text


def load_input(path: Path | None = None) -> str:
    """Read the override file if given, else the packaged blob."""
    if path is not None:
        return read_input_file(path)
    return read_packaged_input()
