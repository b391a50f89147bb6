from __future__ import annotations

from typing import Any, Callable

from ._types import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = ("encode",)


def _null_encoder(properties):
    return None


def _coordinate(c) -> float:
    if isinstance(c, bool) or not isinstance(c, (int, float)):
        raise TypeError(
            f"Expected a number for a coordinate, got {type(c).__name__}"
        )
    return float(c)


def _position(pos):
    return [_coordinate(c) for c in pos]


def _positions(seq):
    return [_position(p) for p in seq]


def _rings(seq):
    return [_positions(r) for r in seq]


def _polygons(seq):
    return [_rings(p) for p in seq]


# Coordinate encoders by geometry type, one per nesting depth
_COORDINATES = {
    Point: _position,
    MultiPoint: _positions,
    LineString: _positions,
    MultiLineString: _rings,
    Polygon: _rings,
    MultiPolygon: _polygons,
}


def _encode_geometry(geom) -> dict:
    cls = type(geom)
    if cls is GeometryCollection:
        return {
            "type": cls.__struct_config__.tag,
            "geometries": [_encode_geometry(g) for g in geom.geometries],
        }
    try:
        coords = _COORDINATES[cls]
    except KeyError:
        raise TypeError(
            f"Encoding objects of type {cls.__name__} is unsupported"
        ) from None
    return {"type": cls.__struct_config__.tag, "coordinates": coords(geom.coordinates)}


def _encode_feature(feature, properties_encoder) -> dict:
    if type(feature) is not Feature:
        raise TypeError(
            f"Encoding objects of type {type(feature).__name__} is unsupported"
        )
    out = {
        "type": "Feature",
        "geometry": (
            None if feature.geometry is None else _encode_geometry(feature.geometry)
        ),
        "properties": (
            None
            if feature.properties is None
            else properties_encoder(feature.properties)
        ),
    }
    # A missing id is omitted, unlike geometry and properties which are null
    fid = feature.id
    if fid is not None:
        out["id"] = fid if isinstance(fid, str) else float(fid)
    return out


def encode(obj, properties_encoder: Callable[[Any], Any] = _null_encoder) -> dict:
    """Convert a GeoJSON object into a tree of builtin JSON types.

    Parameters
    ----------
    obj : GeoJSON
        The object to encode. Must be one of the 9 GeoJSON struct types.
    properties_encoder : callable, optional
        Called with every non-null ``Feature.properties`` value, and should
        return a JSON-compatible builtin (usually a ``dict``). Defaults to an
        encoder that always returns ``None``.

    Returns
    -------
    obj : dict
        The encoded object, composed only of ``dict``, ``list``, ``str``,
        ``float`` and ``None`` values (plus whatever ``properties_encoder``
        returns).

    Raises
    ------
    TypeError
        If ``obj`` (or anything nested in it) is not a GeoJSON type, or if a
        coordinate is not a number.
    """
    cls = type(obj)
    if cls is Feature:
        return _encode_feature(obj, properties_encoder)
    elif cls is FeatureCollection:
        return {
            "type": "FeatureCollection",
            "features": [
                _encode_feature(f, properties_encoder) for f in obj.features
            ],
        }
    return _encode_geometry(obj)
