"""Structural diff between two values, rendered from their dumps."""

from __future__ import annotations

import difflib
import logging
from typing import Any

from assertkit.config import DiffFormat, Settings, get_settings
from assertkit.dump import dump

logger = logging.getLogger(__name__)

NO_DIFFERENCE_HEADER = "// Not equal but no difference detected:"


def diff(
    value1: Any,
    value2: Any,
    *,
    format: DiffFormat | None = None,
    settings: Settings | None = None,
) -> str | None:
    """Return a line diff of the dumps of ``value1`` and ``value2``.

    Returns None when both values dump to the same text, i.e. when there is
    no visible difference to show.
    """
    settings = settings or get_settings()
    removed, added, unchanged = (format or settings.diff_format).markers

    lines1 = dump(value1, settings).splitlines()
    lines2 = dump(value2, settings).splitlines()
    if lines1 == lines2:
        return None

    out: list[str] = []
    matcher = difflib.SequenceMatcher(a=lines1, b=lines2, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            out.extend(f"{unchanged} {line}" for line in lines1[i1:i2])
            continue
        out.extend(f"{removed} {line}" for line in lines1[i1:i2])
        out.extend(f"{added} {line}" for line in lines2[j1:j2])
    return "\n".join(out)


def render_no_difference(
    value1: Any,
    value2: Any,
    *,
    format: DiffFormat | None = None,
    settings: Settings | None = None,
) -> str:
    """Render both values in full for unequal values whose dumps match."""
    settings = settings or get_settings()
    removed, added, unchanged = (format or settings.diff_format).markers
    logger.debug(f"No structural difference between unequal {type(value1).__qualname__} values")

    out = [f"{unchanged} {NO_DIFFERENCE_HEADER}"]
    out.extend(f"{removed} {line}" for line in dump(value1, settings).splitlines())
    out.extend(f"{added} {line}" for line in dump(value2, settings).splitlines())
    return "\n".join(out)
