"""Codecs for the ``properties`` member of a Feature.

A properties codec is a pair of functions. The encoder takes a properties
value and returns a JSON-compatible builtin, the decoder takes a JSON builtin
and returns ``Ok(value)`` or ``Err(error)``.
"""
from __future__ import annotations

from typing import Any, Callable, Type, TypeVar

import msgspec

from ._decode import _null_decoder
from ._encode import _null_encoder
from ._errors import DecodeError, Err, Ok, Result

__all__ = (
    "PropertiesCodec",
    "null_properties",
    "raw_properties",
    "typed_properties",
)


def __dir__():
    return __all__


T = TypeVar("T")


class PropertiesCodec(msgspec.Struct, frozen=True):
    """A paired properties encoder and decoder.

    Parameters
    ----------
    encode : callable
        ``encode(properties) -> Any``, returning a JSON-compatible builtin.
    decode : callable
        ``decode(obj) -> Ok | Err``.
    """

    encode: Callable[[Any], Any]
    decode: Callable[[Any], Result]


def _json_type(obj) -> str:
    if obj is None:
        return "null"
    elif isinstance(obj, bool):
        return "bool"
    elif isinstance(obj, (int, float, str)):
        return type(obj).__name__
    elif isinstance(obj, (list, tuple)):
        return "array"
    return type(obj).__name__


#: Drops all properties. Encodes to ``null`` and decodes to ``None``.
null_properties = PropertiesCodec(_null_encoder, _null_decoder)


def _raw_encode(properties: Any) -> Any:
    return properties


def _raw_decode(obj: Any) -> Result:
    if not isinstance(obj, dict):
        return Err(DecodeError("object", _json_type(obj)))
    return Ok(obj)


#: Passes properties through as a plain ``dict``.
raw_properties = PropertiesCodec(_raw_encode, _raw_decode)


def typed_properties(type: Type[T], *, strict: bool = True) -> PropertiesCodec:
    """Create a properties codec for any type msgspec supports.

    Parameters
    ----------
    type : type
        A Python type (in type annotation form) for the properties value.
        Commonly a ``msgspec.Struct``, a dataclass, a ``TypedDict`` or a
        ``Dict[str, ...]``.
    strict : bool, optional
        Passed through to ``msgspec.convert``. Set to ``False`` to allow
        lax conversions such as ``"1"`` to ``1``.

    Returns
    -------
    codec : PropertiesCodec

    Examples
    --------
    >>> class Place(msgspec.Struct):
    ...     name: str
    >>> codec = typed_properties(Place)
    >>> codec.decode({"name": "Dinagat Islands"})
    Ok(value=Place(name='Dinagat Islands'))
    """

    def encode(properties: T) -> Any:
        return msgspec.to_builtins(properties)

    def decode(obj: Any) -> Result:
        try:
            return Ok(msgspec.convert(obj, type, strict=strict))
        except msgspec.ValidationError as exc:
            return Err(DecodeError.from_validation_error(exc))

    return PropertiesCodec(encode, decode)
