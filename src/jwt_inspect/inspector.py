from __future__ import annotations
import io
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from loguru import logger

from jwt_inspect.config import InspectorConfig
from jwt_inspect.decoder import (
    DynamicValue,
    decode_segment,
    parse_value,
    split_token,
)
from jwt_inspect.exceptions import DecodeError, NotAnObject, ParseError
from jwt_inspect.render import render_object
from jwt_inspect.utils import Clock, system_clock


@dataclass
class DecodedToken:
    header: DynamicValue
    payload: DynamicValue
    signature: str


def _load_segment(segment: str, label: str, config: InspectorConfig) -> DynamicValue:
    try:
        raw = decode_segment(segment, config.alphabet)
    except DecodeError as e:
        logger.debug(f"Failed to decode {label}: {e}")
        raise DecodeError(f"error decoding {label}: {e}") from e
    try:
        return parse_value(raw)
    except ParseError as e:
        logger.debug(f"Failed to parse {label}: {e}")
        raise ParseError(f"error unmarshaling {label}: {e}") from e


def _render_segment(
    writer: TextIO, value: DynamicValue, label: str, now: datetime, config: InspectorConfig
) -> None:
    try:
        render_object(writer, value, now, config.palette)
    except NotAnObject as e:
        raise NotAnObject(f"failed to print {label} = {e}") from e


def decode_token(token: str, config: Optional[InspectorConfig] = None) -> DecodedToken:
    """Decode header and payload without rendering; the signature is returned untouched."""
    config = config or InspectorConfig()
    parts = split_token(token)
    header = _load_segment(parts.header, "header", config)
    payload = _load_segment(parts.payload, "payload", config)
    return DecodedToken(header=header, payload=payload, signature=parts.signature)


def write_claims(
    writer: TextIO,
    token: str,
    clock: Clock = system_clock,
    config: Optional[InspectorConfig] = None,
) -> None:
    """
    Write the labelled header and payload blocks of `token` to `writer`.

    The clock is read once, before anything is rendered. The first failure
    stops the run: the header is fully printed before the payload is decoded,
    so a bad payload leaves the header block on `writer`.

    Raises:
        InvalidFormat, DecodeError, ParseError, NotAnObject
    """
    config = config or InspectorConfig()
    now = clock()
    parts = split_token(token)

    header = _load_segment(parts.header, "header", config)
    writer.write("Header:\n")
    _render_segment(writer, header, "header", now, config)

    payload = _load_segment(parts.payload, "payload", config)
    writer.write("\n")
    writer.write("Payload:\n")
    _render_segment(writer, payload, "payload", now, config)
    writer.write("\n")


class TokenInspector:
    """
    High-level helper bundling a config and a clock.

    Usage:
        inspector = TokenInspector({"alphabet": "urlsafe"})
        inspector.inspect(token, sys.stdout)
        text = inspector.inspect_to_string(token)
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        clock: Clock = system_clock,
    ):
        self.config = InspectorConfig.from_dict(config)
        self.clock = clock

    def inspect(self, token: str, writer: TextIO) -> None:
        write_claims(writer, token, clock=self.clock, config=self.config)

    def inspect_to_string(self, token: str) -> str:
        buffer = io.StringIO()
        self.inspect(token, buffer)
        return buffer.getvalue()

    def decode(self, token: str) -> DecodedToken:
        return decode_token(token, self.config)
