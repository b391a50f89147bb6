import pytest

import typed_geojson as tg


@pytest.fixture(params=["json", "yaml"])
def proto(request):
    if request.param == "json":
        return tg.json
    elif request.param == "yaml":
        pytest.importorskip("yaml")
        return tg.yaml


@pytest.fixture
def point():
    return tg.Point([100.0, 0.0])


@pytest.fixture
def feature_collection():
    return tg.FeatureCollection(
        [
            tg.Feature(
                tg.Point([102.0, 0.5]),
                {"prop0": "value0"},
                id="a",
            ),
            tg.Feature(
                tg.LineString(
                    [[102.0, 0.0], [103.0, 1.0], [104.0, 0.0], [105.0, 1.0]]
                ),
                {"prop0": "value0", "prop1": 0.0},
                id=2.0,
            ),
            tg.Feature(
                tg.Polygon(
                    [
                        [
                            [100.0, 0.0],
                            [101.0, 0.0],
                            [101.0, 1.0],
                            [100.0, 1.0],
                            [100.0, 0.0],
                        ]
                    ]
                ),
                {"prop0": "value0", "prop1": {"this": "that"}},
            ),
        ]
    )
