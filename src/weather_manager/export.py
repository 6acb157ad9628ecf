"""CSV and JSON export of name -> value records.

Both writers truncate any existing file and write rows sorted by name so the
output is deterministic. Writes are not atomic: a crash mid-write can leave a
partial file behind.
"""

from __future__ import annotations

import csv
import json
import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING

from weather_manager.errors import ExportError
from weather_manager.variables import format_value

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CSV_HEADER = ("Variable", "Value")
JSON_INDENT = 4


def export_csv(path: str | Path, data: Mapping[str, float]) -> Path:
    """
    Write ``data`` as ``Variable,Value`` rows.

    Values use their shortest general form (``75.0`` -> ``75``). Names that
    contain commas or quotes are quoted.

    Args:
        path: Destination file; overwritten if it exists.
        data: Variable name -> value.

    Returns:
        The written path.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    out = Path(path)
    try:
        with out.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for name, value in sorted(data.items()):
                writer.writerow((name, format_value(value)))
    except OSError as exc:
        msg = f"Unable to open {out} for writing: {exc.strerror or exc}"
        raise ExportError(msg, path=str(out)) from exc

    logger.info("Exported %d variable(s) to %s", len(data), out)
    return out


def export_json(path: str | Path, data: Mapping[str, float]) -> Path:
    """
    Write ``data`` as a flat JSON object with 4-space indentation.

    Args:
        path: Destination file; overwritten if it exists.
        data: Variable name -> value.

    Returns:
        The written path.

    Raises:
        ExportError: If a value is NaN or infinite (nothing is written), or the
            file cannot be opened or written.
    """
    out = Path(path)
    payload = {name: float(value) for name, value in data.items()}
    bad = sorted(name for name, value in payload.items() if not math.isfinite(value))
    if bad:
        msg = f"Cannot export non-finite values to JSON: {', '.join(bad)}"
        raise ExportError(msg, path=str(out))

    try:
        with out.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=JSON_INDENT, sort_keys=True, allow_nan=False)
    except OSError as exc:
        msg = f"Unable to open {out} for writing: {exc.strerror or exc}"
        raise ExportError(msg, path=str(out)) from exc

    logger.info("Exported %d variable(s) to %s", len(data), out)
    return out
