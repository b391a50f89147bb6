from __future__ import annotations

from typing import Annotated, Generic, List, Optional, TypeVar, Union

import msgspec

__all__ = (
    "Position",
    "position",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "FeatureId",
    "Feature",
    "FeatureCollection",
    "GeoJSON",
    "GEOMETRY_TYPES",
    "GEOJSON_TYPES",
    "kind",
)

P = TypeVar("P")

# [longitude, latitude] or [longitude, latitude, altitude]. The length is only
# checked when decoding.
Position = Annotated[List[float], msgspec.Meta(min_length=2, max_length=3)]


def position(lon: float, lat: float, alt: Optional[float] = None) -> Position:
    """Create a 2D or 3D position.

    Parameters
    ----------
    lon : float
        The longitude (or easting).
    lat : float
        The latitude (or northing).
    alt : float, optional
        The altitude. If not provided a 2D position is returned.

    Returns
    -------
    position : list of float
    """
    if alt is None:
        return [float(lon), float(lat)]
    return [float(lon), float(lat), float(alt)]


# All types set `tag=True`, so the class name doubles as the `type`
# discriminator. The discriminator is never stored on an instance.
class Point(msgspec.Struct, tag=True, frozen=True):
    coordinates: Position


class MultiPoint(msgspec.Struct, tag=True, frozen=True):
    coordinates: List[Position]


class LineString(msgspec.Struct, tag=True, frozen=True):
    coordinates: List[Position]


class MultiLineString(msgspec.Struct, tag=True, frozen=True):
    coordinates: List[List[Position]]


class Polygon(msgspec.Struct, tag=True, frozen=True):
    """A polygon. The first ring is the exterior, any others are holes."""

    coordinates: List[List[Position]]


class MultiPolygon(msgspec.Struct, tag=True, frozen=True):
    coordinates: List[List[List[Position]]]


class GeometryCollection(msgspec.Struct, tag=True, frozen=True):
    geometries: List[Geometry]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

# A `str` id or a numeric id. Numeric ids are always held as `float`.
FeatureId = Union[str, float]


class Feature(msgspec.Struct, Generic[P], tag=True, frozen=True):
    """A spatially bounded thing.

    Parameters
    ----------
    geometry : Geometry, optional
        The feature geometry, or ``None`` for an unlocated feature.
    properties : P, optional
        An arbitrary properties payload. It is opaque to this library, and is
        handled entirely by the properties codec passed to ``encode`` or
        ``decode``.
    id : str or float, optional
        An optional identifier. When ``None`` the ``id`` member is omitted
        from the encoded object.
    """

    geometry: Optional[Geometry] = None
    properties: Optional[P] = None
    id: Optional[FeatureId] = None


class FeatureCollection(msgspec.Struct, Generic[P], tag=True, frozen=True):
    features: List[Feature[P]]


# A union of all 9 GeoJSON types
GeoJSON = Union[Geometry, Feature[P], FeatureCollection[P]]


GEOMETRY_TYPES = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
)

GEOJSON_TYPES = GEOMETRY_TYPES + (Feature, FeatureCollection)


def kind(obj) -> str:
    """Get the ``type`` discriminator of a GeoJSON object.

    Parameters
    ----------
    obj : GeoJSON
        A GeoJSON struct instance.

    Returns
    -------
    kind : str
        One of ``"Point"``, ``"MultiPoint"``, ``"LineString"``,
        ``"MultiLineString"``, ``"Polygon"``, ``"MultiPolygon"``,
        ``"GeometryCollection"``, ``"Feature"``, or ``"FeatureCollection"``.
    """
    cls = type(obj)
    if cls not in GEOJSON_TYPES:
        raise TypeError(f"Expected a GeoJSON object, got {cls.__name__}")
    return cls.__struct_config__.tag
