from __future__ import annotations

import dataclasses
import json
import random
import sys
import timeit
from typing import Callable

import msgspec

import typed_geojson as tg
from typed_geojson.properties import raw_properties, typed_properties


class Place(msgspec.Struct):
    name: str
    population: int
    tags: list[str] = []


TAGS = ["capital", "coastal", "historic", "port", "river", "mountain"]


def make_feature_collection(n: int, seed: int = 42) -> bytes:
    """Generate a FeatureCollection of ``n`` features as JSON"""
    rand = random.Random(seed)

    def pos():
        return [rand.uniform(-180, 180), rand.uniform(-90, 90)]

    def ring(k):
        pts = [pos() for _ in range(k)]
        return pts + [pts[0]]

    geometries = [
        lambda: {"type": "Point", "coordinates": pos()},
        lambda: {"type": "LineString", "coordinates": [pos() for _ in range(20)]},
        lambda: {"type": "Polygon", "coordinates": [ring(30), ring(8)]},
        lambda: {
            "type": "MultiPolygon",
            "coordinates": [[ring(10)] for _ in range(4)],
        },
    ]
    features = []
    for i in range(n):
        features.append(
            {
                "type": "Feature",
                "geometry": rand.choice(geometries)(),
                "properties": {
                    "name": f"place-{i}",
                    "population": rand.randint(0, 10_000_000),
                    "tags": rand.sample(TAGS, rand.randint(0, 3)),
                },
                "id": i,
            }
        )
    return json.dumps({"type": "FeatureCollection", "features": features}).encode()


@dataclasses.dataclass
class Benchmark:
    label: str
    encode: Callable
    decode: Callable

    def run(self, data: bytes) -> dict:
        obj = self.decode(data)

        timer = timeit.Timer("func(data)", globals={"func": self.encode, "data": obj})
        n, t = timer.autorange()
        encode_time = t / n

        timer = timeit.Timer("func(data)", globals={"func": self.decode, "data": data})
        n, t = timer.autorange()
        decode_time = t / n

        return {"label": self.label, "encode": encode_time, "decode": decode_time}


def benchmarks():
    raw_enc = tg.json.Encoder(properties_encoder=raw_properties.encode)
    raw_dec = tg.json.Decoder(properties_decoder=raw_properties.decode)

    codec = typed_properties(Place)
    typed_enc = tg.json.Encoder(properties_encoder=codec.encode)
    typed_dec = tg.json.Decoder(properties_decoder=codec.decode)

    def unwrap(decode):
        return lambda buf: decode(buf).unwrap()

    return [
        Benchmark("typed_geojson (dict properties)", raw_enc.encode, unwrap(raw_dec.decode)),
        Benchmark("typed_geojson (Struct properties)", typed_enc.encode, unwrap(typed_dec.decode)),
        Benchmark("msgspec (untyped)", msgspec.json.encode, msgspec.json.decode),
        Benchmark("json (untyped)", json.dumps, json.loads),
    ]


def main():
    import argparse

    parser = argparse.ArgumentParser(
        description="Benchmark GeoJSON encoding and decoding"
    )
    parser.add_argument(
        "-n",
        type=int,
        help="The number of features in the generated data, defaults to 1000",
        default=1000,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="whether to output the results as json",
    )
    args = parser.parse_args()

    data = make_feature_collection(args.n)
    results = [bench.run(data) for bench in benchmarks()]

    if args.json:
        for line in results:
            print(json.dumps(line))
        sys.exit(0)

    results.sort(key=lambda row: row["encode"] + row["decode"])
    width = max(len(r["label"]) for r in results)
    print(f"{'':{width}} | encode (ms) | decode (ms) | total (ms)")
    for r in results:
        total = r["encode"] + r["decode"]
        print(
            f"{r['label']:{width}} | {1000 * r['encode']:11.2f} "
            f"| {1000 * r['decode']:11.2f} | {1000 * total:10.2f}"
        )


if __name__ == "__main__":
    main()
