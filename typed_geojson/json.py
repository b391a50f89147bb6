from __future__ import annotations

from typing import Any, Callable, Iterable, Literal, Optional, Union

import msgspec

from ._decode import _null_decoder, decode as _decode
from ._encode import _null_encoder, encode as _encode
from ._errors import DecodeError, Err, Ok, Result

__all__ = ("Encoder", "Decoder", "encode", "decode", "format")


def __dir__():
    return __all__


def _malformed(exc: msgspec.DecodeError) -> DecodeError:
    err = DecodeError("JSON", "malformed input", message=str(exc))
    err.__cause__ = exc
    return err


class Encoder:
    """A GeoJSON encoder.

    Parameters
    ----------
    properties_encoder : callable, optional
        Called with every non-null ``Feature.properties`` value. Should
        return a JSON-compatible builtin. Defaults to always encoding
        ``null``.
    order : {None, 'deterministic', 'sorted'}, optional
        Key ordering of the output objects, passed through to
        ``msgspec.json.Encoder``. The default preserves the order ``type``,
        then the geometry or member fields, then ``properties``, then ``id``.
    """

    __slots__ = ("properties_encoder", "order", "_encoder")

    def __init__(
        self,
        *,
        properties_encoder: Callable[[Any], Any] = _null_encoder,
        order: Optional[Literal["deterministic", "sorted"]] = None,
    ):
        self.properties_encoder = properties_encoder
        self.order = order
        self._encoder = msgspec.json.Encoder(order=order)

    def encode(self, obj) -> bytes:
        """Serialize a GeoJSON object as JSON"""
        return self._encoder.encode(_encode(obj, self.properties_encoder))

    def encode_lines(self, items: Iterable) -> bytes:
        """Serialize an iterable of GeoJSON objects as newline-delimited JSON"""
        return self._encoder.encode_lines(
            [_encode(obj, self.properties_encoder) for obj in items]
        )


class Decoder:
    """A GeoJSON decoder.

    Parameters
    ----------
    properties_decoder : callable, optional
        Called with every non-null ``properties`` member. Should return
        ``Ok(value)`` or ``Err(error)``. Defaults to always decoding
        ``None``.
    """

    __slots__ = ("properties_decoder", "_decoder")

    def __init__(
        self, *, properties_decoder: Callable[[Any], Result] = _null_decoder
    ):
        self.properties_decoder = properties_decoder
        self._decoder = msgspec.json.Decoder()

    def decode(self, buf: Union[bytes, str]) -> Result:
        """Deserialize a GeoJSON object from JSON.

        Returns
        -------
        result : Ok or Err
            Malformed JSON and invalid GeoJSON are both reported as ``Err``.
        """
        try:
            obj = self._decoder.decode(buf)
        except msgspec.DecodeError as exc:
            return Err(_malformed(exc))
        return _decode(obj, self.properties_decoder)

    def decode_lines(self, buf: Union[bytes, str]) -> Result:
        """Deserialize newline-delimited GeoJSON objects.

        Returns
        -------
        result : Ok or Err
            ``Ok`` wrapping a list of decoded objects, or ``Err`` for the
            first failing line. The error path starts with the line index.
        """
        try:
            objs = self._decoder.decode_lines(buf)
        except msgspec.DecodeError as exc:
            return Err(_malformed(exc))
        out = []
        for i, obj in enumerate(objs):
            res = _decode(obj, self.properties_decoder)
            if isinstance(res, Err):
                return Err(res.error.with_prefix(i))
            out.append(res.value)
        return Ok(out)


def encode(
    obj,
    *,
    properties_encoder: Callable[[Any], Any] = _null_encoder,
    order: Optional[Literal["deterministic", "sorted"]] = None,
) -> bytes:
    """Serialize a GeoJSON object as JSON.

    Parameters
    ----------
    obj : GeoJSON
        The object to serialize.
    properties_encoder : callable, optional
        Called with every non-null ``Feature.properties`` value.
    order : {None, 'deterministic', 'sorted'}, optional
        Key ordering of the output objects.

    Returns
    -------
    data : bytes
        The serialized object.

    See Also
    --------
    Encoder.encode
    """
    return Encoder(properties_encoder=properties_encoder, order=order).encode(obj)


def decode(
    buf: Union[bytes, str],
    *,
    properties_decoder: Callable[[Any], Result] = _null_decoder,
) -> Result:
    """Deserialize a GeoJSON object from JSON.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    properties_decoder : callable, optional
        Called with every non-null ``properties`` member.

    Returns
    -------
    result : Ok or Err

    See Also
    --------
    Decoder.decode
    """
    return Decoder(properties_decoder=properties_decoder).decode(buf)


def format(buf: Union[bytes, str], *, indent: int = 2):
    """Pretty-print an encoded JSON message.

    A thin wrapper around ``msgspec.json.format``. A negative ``indent``
    strips all whitespace, returning the most compact form. ``indent=0``
    puts everything on one line but keeps a space after each ``:`` and ``,``.
    """
    return msgspec.json.format(buf, indent=indent)
