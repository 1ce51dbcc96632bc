"""Errors raised while inspecting a token."""


class TokenInspectError(Exception):
    """Base class for every failure reported to the user."""


class InvalidFormat(TokenInspectError):
    """The token does not consist of exactly three dot-separated segments."""


class DecodeError(TokenInspectError):
    """A segment is not valid base64. The original error is the __cause__."""


class ParseError(TokenInspectError):
    """Decoded bytes are not valid JSON. The original error is the __cause__."""


class NotAnObject(TokenInspectError):
    """The top-level JSON value of a segment is not an object."""
