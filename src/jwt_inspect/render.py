"""Colorized, annotated printing of a decoded JSON object."""

from __future__ import annotations
import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, TextIO

from loguru import logger

from jwt_inspect.config import ANSI, Palette
from jwt_inspect.exceptions import NotAnObject
from jwt_inspect.timefmt import (
    epoch_to_instant,
    format_iso,
    humanize_delta,
    in_timestamp_window,
)


def format_number(value: float) -> str:
    """
    Shortest round-trip decimal without an exponent or trailing zeros:
    1516239022.0 -> "1516239022", 1e21 -> "1000000000000000000000"
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _write_annotation(writer: TextIO, value: float, now: datetime, palette: Palette) -> None:
    instant = epoch_to_instant(value)
    writer.write(" ")
    writer.write(palette.annotation)
    writer.write("# ")
    writer.write(format_iso(instant))
    writer.write(palette.delta)
    writer.write(" [")
    writer.write(humanize_delta(instant, now))
    writer.write("]")
    writer.write(palette.reset)


def _write_value(
    writer: TextIO, value: Any, separator: str, now: datetime, palette: Palette
) -> None:
    # bool is checked before numbers since it is an int subclass
    if isinstance(value, bool):
        writer.write(f"{palette.boolean}{'true' if value else 'false'}{palette.reset}")
        writer.write(separator)
    elif isinstance(value, (int, float)):
        writer.write(f"{palette.number}{format_number(value)}{palette.reset}")
        writer.write(separator)
        if in_timestamp_window(value):
            _write_annotation(writer, value, now, palette)
    elif isinstance(value, str):
        writer.write(f'{palette.string}"{value}"{palette.reset}')
        writer.write(separator)
    elif value is None or isinstance(value, (dict, list)):
        # nested structures are flattened to their compact JSON text
        writer.write(f'{palette.string}"{json.dumps(value, ensure_ascii=False)}"{palette.reset}')
        writer.write(separator)
    else:
        raise TypeError(f"Unsupported value type: {type(value).__name__}")


def render_object(
    writer: TextIO, value: Any, now: datetime, palette: Palette = ANSI
) -> None:
    """Print `value`, which must be a JSON object, with keys in sorted order.

    Numbers that look like epoch seconds get a trailing comment with their
    ISO-8601 form and how long ago (or ahead of `now`) they are.

    Raises:
        NotAnObject: `value` is not a dict.
    """
    if not isinstance(value, dict):
        raise NotAnObject(f"payload must be an object, got {json.dumps(value, default=str)}")

    obj: Dict[str, Any] = value
    keys = sorted(obj)
    logger.debug(f"Rendering object with {len(keys)} key(s)")

    writer.write("{\n")
    last = len(keys) - 1
    for index, key in enumerate(keys):
        writer.write("  ")
        writer.write(f'{palette.key}"{key}"{palette.reset}')
        writer.write(": ")
        _write_value(writer, obj[key], "," if index != last else "", now, palette)
        writer.write("\n")
    writer.write("}\n")
