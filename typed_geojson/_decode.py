from __future__ import annotations

import logging
from typing import Any, Callable, Union

import msgspec

from ._errors import DecodeError, Err, Ok, Result
from ._types import (
    GEOJSON_TYPES,
    GEOMETRY_TYPES,
    Feature,
    FeatureCollection,
    Geometry,
)

__all__ = ("decode",)

logger = logging.getLogger(__name__)

# Properties are left as raw JSON by the typed decode, and handed to the
# properties decoder afterwards.
_GeoJSON = Union[Geometry, Feature[Any], FeatureCollection[Any]]

_GEOMETRY_KINDS = tuple(cls.__struct_config__.tag for cls in GEOMETRY_TYPES)
_GEOJSON_KINDS = tuple(cls.__struct_config__.tag for cls in GEOJSON_TYPES)


def _null_decoder(obj):
    return Ok(None)


def _lookup(obj, path):
    for seg in path:
        obj = obj[seg]
    return obj


def _one_of(kinds) -> str:
    return "one of " + ", ".join(repr(k) for k in kinds)


def _shape_error(exc: msgspec.ValidationError, obj) -> DecodeError:
    """Convert a msgspec error, rephrasing the GeoJSON specific cases"""
    err = DecodeError.from_validation_error(exc)
    path = err.path
    if path[-1:] == ("type",):
        parent = path[:-1]
        if err.expected == "str":
            # A non-string discriminator is reported against its object
            err = DecodeError("type field", err.found, parent)
        elif err.expected == "valid value":
            if not parent:
                kinds = _GEOJSON_KINDS
            elif len(parent) >= 2 and parent[-2] == "features":
                kinds = ("Feature",)
            else:
                kinds = _GEOMETRY_KINDS
            err = DecodeError(_one_of(kinds), err.found, path)
    elif err.expected.startswith("array of length"):
        value = _lookup(obj, path)
        err = DecodeError(
            "array of length 2 or 3", f"array of length {len(value)}", path
        )
    err.__cause__ = exc
    return err


def _properties(obj, properties_decoder):
    try:
        res = properties_decoder(obj)
    except msgspec.ValidationError as exc:
        err = DecodeError.from_validation_error(exc)
        raise err from err.__cause__
    if isinstance(res, Ok):
        return res.value
    elif isinstance(res, Err):
        if isinstance(res.error, msgspec.ValidationError):
            err = DecodeError.from_validation_error(res.error)
            raise err from err.__cause__
        raise TypeError(
            "properties_decoder must return `Err` wrapping a `DecodeError`, "
            f"got `Err` wrapping {type(res.error).__name__}"
        )
    raise TypeError(
        f"properties_decoder must return `Ok` or `Err`, got {type(res).__name__}"
    )


def _feature(feature, properties_decoder):
    if feature.properties is None:
        return feature
    try:
        properties = _properties(feature.properties, properties_decoder)
    except DecodeError as exc:
        raise exc.with_prefix("properties") from exc.__cause__
    return msgspec.structs.replace(feature, properties=properties)


def _decode_properties(obj, properties_decoder):
    if type(obj) is Feature:
        return _feature(obj, properties_decoder)
    elif type(obj) is FeatureCollection:
        features = []
        for i, feature in enumerate(obj.features):
            try:
                features.append(_feature(feature, properties_decoder))
            except DecodeError as exc:
                raise exc.with_prefix("features", i) from exc.__cause__
        return FeatureCollection(features)
    return obj


def decode(
    obj: Any, properties_decoder: Callable[[Any], Result] = _null_decoder
) -> Result:
    """Convert a tree of builtin JSON types into a GeoJSON object.

    Decoding is strict and stops at the first error found. The shape of the
    whole object is checked first, then every non-null ``properties`` member
    is passed to ``properties_decoder`` in document order.

    Parameters
    ----------
    obj : Any
        The JSON tree to decode, as produced by e.g. ``msgspec.json.decode``.
    properties_decoder : callable, optional
        Called with every non-null ``properties`` member. Should return
        ``Ok(value)`` on success or ``Err(error)`` on failure; raising a
        ``DecodeError`` (or any ``msgspec.ValidationError``) is treated the
        same as returning ``Err``. Defaults to a decoder that ignores its
        input and returns ``Ok(None)``.

    Returns
    -------
    result : Ok or Err
        ``Ok`` wrapping the decoded object, or ``Err`` wrapping a
        ``DecodeError`` describing the first problem found.
    """
    try:
        try:
            out = msgspec.convert(obj, _GeoJSON)
        except msgspec.ValidationError as exc:
            raise _shape_error(exc, obj) from exc
        return Ok(_decode_properties(out, properties_decoder))
    except DecodeError as exc:
        logger.debug("Invalid GeoJSON: %s", exc)
        return Err(exc)
    except RecursionError:
        err = DecodeError(
            "shallower input",
            "input nested too deeply",
            message="Maximum nesting depth exceeded",
        )
        logger.debug("Invalid GeoJSON: %s", err)
        return Err(err)
