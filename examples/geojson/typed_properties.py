"""Decode a FeatureCollection with typed properties, then re-encode it.

Run with ``python typed_properties.py`` from this directory.
"""
from __future__ import annotations

from typing import Optional

import msgspec

import typed_geojson as tg
from typed_geojson.properties import typed_properties


class Country(msgspec.Struct):
    name: str
    iso_a3: str
    population: Optional[int] = None


DATA = b"""
{
  "type": "FeatureCollection",
  "features": [
    {
      "type": "Feature",
      "id": "ITA",
      "geometry": {"type": "Point", "coordinates": [12.5, 41.9]},
      "properties": {"name": "Italy", "iso_a3": "ITA", "population": 58850717}
    },
    {
      "type": "Feature",
      "id": 250,
      "geometry": null,
      "properties": {"name": "France", "iso_a3": "FRA"}
    }
  ]
}
"""

codec = typed_properties(Country)
loads = tg.json.Decoder(properties_decoder=codec.decode).decode
dumps = tg.json.Encoder(properties_encoder=codec.encode).encode


def main():
    res = loads(DATA)
    if not res.is_ok():
        raise SystemExit(f"Invalid input: {res.error}")
    collection = res.value
    for feature in collection.features:
        print(feature.id, feature.properties)
    print(tg.json.format(dumps(collection)).decode())


if __name__ == "__main__":
    main()
