"""Decode compact tokens and print their header and payload as annotated JSON."""

from loguru import logger

from jwt_inspect.config import ANSI, PLAIN, Alphabet, InspectorConfig, Palette
from jwt_inspect.decoder import decode_segment, parse_value, split_token
from jwt_inspect.exceptions import (
    DecodeError,
    InvalidFormat,
    NotAnObject,
    ParseError,
    TokenInspectError,
)
from jwt_inspect.inspector import DecodedToken, TokenInspector, decode_token, write_claims
from jwt_inspect.render import render_object
from jwt_inspect.utils import fixed_clock, system_clock

# Setup Loguru for library use
logger.disable("jwt_inspect")

__all__ = [
    "ANSI",
    "PLAIN",
    "Alphabet",
    "DecodeError",
    "DecodedToken",
    "InspectorConfig",
    "InvalidFormat",
    "NotAnObject",
    "Palette",
    "ParseError",
    "TokenInspectError",
    "TokenInspector",
    "decode_segment",
    "decode_token",
    "fixed_clock",
    "parse_value",
    "render_object",
    "split_token",
    "system_clock",
    "write_claims",
]
