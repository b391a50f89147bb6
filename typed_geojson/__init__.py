from ._errors import DecodeError, Err, Ok, Result
from ._types import (
    GEOJSON_TYPES,
    GEOMETRY_TYPES,
    Feature,
    FeatureCollection,
    FeatureId,
    GeoJSON,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    kind,
    position,
)
from ._encode import encode
from ._decode import decode
from .properties import PropertiesCodec, null_properties, raw_properties, typed_properties

from . import json
from . import yaml
from . import properties
from ._version import __version__
