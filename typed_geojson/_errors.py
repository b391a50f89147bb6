from __future__ import annotations

import re
from typing import Generic, Optional, Tuple, TypeVar, Union

import msgspec

__all__ = ("DecodeError", "Ok", "Err", "Result", "format_path")

T = TypeVar("T")

PathSegment = Union[str, int]

_AT_SUFFIX = re.compile(r"^(?P<msg>.*?)(?: - at `\$(?P<path>[^`]*)`)?$", re.DOTALL)
_PATH_SEGMENT = re.compile(r"\.([^.\[]+)|\[([^\]]*)\]")
_EXPECTED_GOT = re.compile(r"^Expected (?P<expected>.+?), got (?P<found>.+)$", re.DOTALL)
_EXPECTED = re.compile(r"^Expected (?P<expected>.+)$", re.DOTALL)
_MISSING_FIELD = re.compile(r"^Object missing required field `(?P<field>[^`]*)`$")
_INVALID_VALUE = re.compile(r"^Invalid value (?P<value>.+)$", re.DOTALL)


def format_path(path) -> str:
    """Render a decode path as a JSONPath-like string (``$.a[0].b``)"""
    parts = ["$"]
    for seg in path:
        if isinstance(seg, int):
            parts.append(f"[{seg}]")
        else:
            parts.append(f".{seg}")
    return "".join(parts)


def _parse_path(text: str) -> Tuple[PathSegment, ...]:
    out = []
    for field, index in _PATH_SEGMENT.findall(text):
        if field:
            out.append(field)
        elif index.isdigit():
            out.append(int(index))
        else:
            out.append(index.strip("\"'"))
    return tuple(out)


class DecodeError(msgspec.ValidationError):
    """The input was well formed JSON, but not valid GeoJSON.

    Parameters
    ----------
    expected : str
        A description of the expected shape (``"array"``, ``"type field"``, ...).
    found : str
        A description of what was found instead. This is usually the JSON type
        of the offending value, or ``"missing"`` for an absent field.
    path : tuple, optional
        Field names and array indices leading from the decode root to the
        failure.
    message : str, optional
        A preformatted message, used in place of the default
        ``Expected ..., got ...`` text.
    """

    def __init__(
        self,
        expected: str,
        found: str,
        path: Tuple[PathSegment, ...] = (),
        message: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.path = tuple(path)
        self.message = message
        super().__init__(expected, found, self.path, message)

    def __str__(self):
        msg = self.message or f"Expected {self.expected}, got {self.found}"
        if self.path:
            msg = f"{msg} - at `{format_path(self.path)}`"
        return msg

    def __repr__(self):
        return f"DecodeError({str(self)!r})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.expected, self.found, self.path, self.message) == (
            other.expected,
            other.found,
            other.path,
            other.message,
        )

    def __hash__(self):
        return hash((self.expected, self.found, self.path, self.message))

    def __reduce__(self):
        return (type(self), (self.expected, self.found, self.path, self.message))

    def with_prefix(self, *segments: PathSegment) -> "DecodeError":
        """Return a copy of this error with ``segments`` prepended to its path"""
        out = type(self)(
            self.expected, self.found, segments + self.path, self.message
        )
        out.__cause__ = self.__cause__
        return out

    @classmethod
    def from_validation_error(cls, exc: msgspec.ValidationError) -> "DecodeError":
        """Convert a ``msgspec.ValidationError`` into a ``DecodeError``.

        The ``- at `$...``` suffix msgspec appends to its messages is parsed
        back into path segments. msgspec does not report which key of a
        ``dict`` failed, so a ``$[...]`` segment is kept as the opaque string
        ``"..."``.

        Known message forms map onto ``expected`` and ``found``:

        - ``Expected `X`, got `Y``` gives ``(X, Y)``
        - ``Object missing required field `f``` gives ``("f field", "missing")``
        - ``Invalid value V`` gives ``("valid value", V)``
        - ``Expected `X` ...`` gives ``(X ..., "invalid value")``

        Anything else is kept verbatim as the error message.
        """
        if isinstance(exc, cls):
            return exc
        match = _AT_SUFFIX.match(str(exc))
        msg = match.group("msg")
        path = _parse_path(match.group("path") or "")
        if (parts := _EXPECTED_GOT.match(msg)) is not None:
            expected = parts.group("expected").replace("`", "")
            found = parts.group("found").replace("`", "")
            out = cls(expected, found, path)
        elif (parts := _MISSING_FIELD.match(msg)) is not None:
            out = cls(f"{parts.group('field')} field", "missing", path)
        elif (parts := _INVALID_VALUE.match(msg)) is not None:
            out = cls("valid value", parts.group("value"), path)
        elif (parts := _EXPECTED.match(msg)) is not None:
            out = cls(parts.group("expected").replace("`", ""), "invalid value", path)
        else:
            out = cls("valid value", "invalid value", path, message=msg)
        out.__cause__ = exc
        return out


class Ok(msgspec.Struct, Generic[T], frozen=True):
    """A successful decode result"""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


class Err(msgspec.Struct, frozen=True):
    """A failed decode result"""

    error: DecodeError

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the wrapped `DecodeError`"""
        raise self.error


Result = Union[Ok[T], Err]
