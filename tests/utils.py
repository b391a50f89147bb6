def nested_geometry_collection(depth, inner=None):
    """Build a JSON tree of ``depth`` GeometryCollections wrapping ``inner``"""
    if inner is None:
        inner = {"type": "Point", "coordinates": [1.0, 2.0]}
    obj = inner
    for _ in range(depth):
        obj = {"type": "GeometryCollection", "geometries": [obj]}
    return obj
