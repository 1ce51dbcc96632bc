from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional


class Alphabet(str, Enum):
    """Base64 alphabet used to decode segments."""

    STANDARD = "standard"
    URLSAFE = "urlsafe"

    @property
    def altchars(self) -> bytes:
        return b"+/" if self is Alphabet.STANDARD else b"-_"


@dataclass(frozen=True)
class Palette:
    reset: str = "\033[0m"
    key: str = "\033[34m"  # blue
    string: str = "\033[32m"  # green
    number: str = "\033[33m"  # yellow
    boolean: str = "\033[36m"  # cyan
    delta: str = "\033[31m"  # red
    annotation: str = "\033[90m"  # dark gray


ANSI = Palette()
PLAIN = Palette(
    reset="", key="", string="", number="", boolean="", delta="", annotation=""
)

_PALETTES = {"ansi": ANSI, "plain": PLAIN}


@dataclass
class InspectorConfig:
    alphabet: Alphabet = Alphabet.STANDARD
    palette: Palette = field(default=ANSI)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> "InspectorConfig":
        """
        Build a config from a plain mapping, e.g.
            {"alphabet": "urlsafe", "palette": "plain"}
        Enum members and Palette instances are accepted as well as their names.
        """
        if not d:
            return InspectorConfig()
        known = {f.name for f in fields(InspectorConfig)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Unknown inspector config keys: {', '.join(sorted(unknown))}")

        processed: Dict[str, Any] = {}
        if "alphabet" in d:
            processed["alphabet"] = Alphabet(d["alphabet"])
        if "palette" in d:
            palette = d["palette"]
            if isinstance(palette, str):
                if palette not in _PALETTES:
                    raise ValueError(f"Unknown palette: {palette}")
                palette = _PALETTES[palette]
            processed["palette"] = palette
        return InspectorConfig(**processed)
