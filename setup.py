import os

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

version = {}
with open(os.path.join(here, "typed_geojson", "_version.py")) as f:
    exec(f.read(), version)

extras_require = {
    "yaml": ["pyyaml"],
    "test": ["pytest", "pyyaml"],
}

setup(
    name="typed-geojson",
    version=version["__version__"],
    description="Typed GeoJSON (RFC 7946) encoding and decoding, built on msgspec",
    license="BSD",
    packages=["typed_geojson"],
    package_data={"typed_geojson": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require=extras_require,
)
