import base64
import json
import re
from collections.abc import Generator
from datetime import datetime
from typing import Any

import pytest
from loguru import logger

from jwt_inspect.utils import fixed_clock

JWT_IO_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiYWRtaW4iOnRydWUsImlhdCI6MTUxNjIzOTAyMn0"
    ".KMUFsIDTnFmyG3nMiGM6H9FNFUROf3wh7SmqJp-QV30"
)

JWT_IO_EXPECTED = """Header:
{
  "alg": "HS256",
  "typ": "JWT"
}

Payload:
{
  "admin": true,
  "iat": 1516239022, # 2018-01-18T01:30:22Z [2648 day(s) ago]
  "name": "John Doe",
  "sub": "1234567890"
}

"""

_COLOR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_colors(s: str) -> str:
    return _COLOR_RE.sub("", s)


def encode_segment(value: Any) -> str:
    """Standard base64 of the JSON text, with padding stripped like real tokens."""
    raw = json.dumps(value).encode("utf-8")
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def make_token(header: Any, payload: Any, signature: str = "sig") -> str:
    return f"{encode_segment(header)}.{encode_segment(payload)}.{signature}"


@pytest.fixture
def reference_now() -> datetime:
    return datetime.fromisoformat("2025-04-19T18:25:00+02:00")


@pytest.fixture
def clock(reference_now):
    return fixed_clock(reference_now)


@pytest.fixture
def enabled_log() -> Generator[list, Any, Any]:
    """Enable loguru logging for jwt_inspect and collect the messages."""
    messages: list = []
    logger.enable("jwt_inspect")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("jwt_inspect")
