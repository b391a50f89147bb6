from __future__ import annotations

from typing import Any, Callable, Union

from ._decode import _null_decoder, decode as _decode
from ._encode import _null_encoder, encode as _encode
from ._errors import DecodeError, Err, Result

__all__ = ("encode", "decode")


def __dir__():
    return __all__


def _import_pyyaml(name):
    try:
        import yaml
    except ImportError:
        raise ImportError(
            f"`typed_geojson.yaml.{name}` requires PyYAML be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install pyyaml  # using pip\n"
            "  $ conda install pyyaml          # or using conda"
        ) from None
    else:
        return yaml


def encode(obj, *, properties_encoder: Callable[[Any], Any] = _null_encoder) -> bytes:
    """Serialize a GeoJSON object as YAML.

    Parameters
    ----------
    obj : GeoJSON
        The object to serialize.
    properties_encoder : callable, optional
        Called with every non-null ``Feature.properties`` value.

    Returns
    -------
    data : bytes
        The serialized object.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    decode
    """
    yaml = _import_pyyaml("encode")
    # Use the C extension if available
    Dumper = getattr(yaml, "CSafeDumper", yaml.SafeDumper)

    return yaml.dump_all(
        [_encode(obj, properties_encoder)],
        encoding="utf-8",
        Dumper=Dumper,
        allow_unicode=True,
        sort_keys=False,
    )


def decode(
    buf: Union[bytes, str],
    *,
    properties_decoder: Callable[[Any], Result] = _null_decoder,
) -> Result:
    """Deserialize a GeoJSON object from YAML.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    properties_decoder : callable, optional
        Called with every non-null ``properties`` member.

    Returns
    -------
    result : Ok or Err
        Malformed YAML and invalid GeoJSON are both reported as ``Err``.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    encode
    """
    yaml = _import_pyyaml("decode")
    # Use the C extension if available
    Loader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)
    if not isinstance(buf, (str, bytes)):
        # call `memoryview` first, since `bytes(1)` is actually valid
        buf = bytes(memoryview(buf))
    try:
        obj = yaml.load(buf, Loader)
    except yaml.YAMLError as exc:
        err = DecodeError("YAML", "malformed input", message=str(exc))
        err.__cause__ = exc
        return Err(err)
    return _decode(obj, properties_decoder)
