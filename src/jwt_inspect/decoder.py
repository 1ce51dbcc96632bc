from __future__ import annotations
import base64
import binascii
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from loguru import logger

from jwt_inspect.config import Alphabet
from jwt_inspect.exceptions import DecodeError, InvalidFormat, ParseError
from jwt_inspect.utils import pad_base64

DynamicValue = Union[None, bool, float, str, Dict[str, Any], List[Any]]

TOKEN_PARTS_COUNT = 3

_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


@dataclass
class SplitToken:
    header: str
    payload: str
    signature: str


def split_token(token: str) -> SplitToken:
    """
    Split a token on "." into header, payload and signature.
    Empty segments are accepted here; they fail later when decoded or parsed.
    """
    parts = token.split(".")
    if len(parts) != TOKEN_PARTS_COUNT:
        logger.debug(f"Token has {len(parts)} segments, expected {TOKEN_PARTS_COUNT}")
        raise InvalidFormat(
            f"invalid JWT format, expected {TOKEN_PARTS_COUNT} parts"
        )
    return SplitToken(header=parts[0], payload=parts[1], signature=parts[2])


def decode_segment(segment: str, alphabet: Alphabet = Alphabet.STANDARD) -> bytes:
    """
    Decode one base64 segment, repairing missing padding first.
    Characters outside the chosen alphabet are rejected rather than skipped.
    """
    padded = pad_base64(segment)
    if len(padded) != len(segment):
        logger.debug(f"Added {len(padded) - len(segment)} padding character(s)")
    try:
        return base64.b64decode(padded, altchars=alphabet.altchars, validate=True)
    except binascii.Error as e:
        raise DecodeError(str(e)) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _parse_number(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        raise ValueError(f"number {text} out of range")
    return number


def _replace_surrogates(value: Any) -> Any:
    # json.loads keeps unpaired \ud800-style escapes, which cannot be encoded as UTF-8
    if isinstance(value, str):
        return _LONE_SURROGATE_RE.sub("\ufffd", value)
    if isinstance(value, list):
        return [_replace_surrogates(item) for item in value]
    if isinstance(value, dict):
        return {_replace_surrogates(k): _replace_surrogates(v) for k, v in value.items()}
    return value


def parse_value(raw: bytes) -> DynamicValue:
    """
    Parse JSON bytes. Every number, integer literals included, becomes a float;
    numbers outside double range are rejected. Unpaired surrogate escapes are
    replaced with U+FFFD.
    """
    try:
        text = raw.decode("utf-8")
        value = json.loads(
            text,
            parse_int=_parse_number,
            parse_float=_parse_number,
            parse_constant=_reject_constant,
        )
    except (UnicodeDecodeError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        raise ParseError(str(e)) from e
    return _replace_surrogates(value)
