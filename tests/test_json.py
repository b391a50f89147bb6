import json

import msgspec
import pytest

import typed_geojson as tg
from typed_geojson import DecodeError, Err, Ok
from typed_geojson.properties import raw_properties


def test_module_dir():
    assert set(dir(tg.json)) == {"Encoder", "Decoder", "encode", "decode", "format"}


class TestEncode:
    def test_point(self):
        assert tg.json.encode(tg.Point([100.0, 0.0])) == (
            b'{"type":"Point","coordinates":[100.0,0.0]}'
        )

    def test_feature_id_omitted(self):
        msg = tg.json.encode(tg.Feature())
        assert msg == b'{"type":"Feature","geometry":null,"properties":null}'

    def test_feature_with_properties(self):
        f = tg.Feature(tg.Point([1.0, 2.0]), {"name": "x"}, id="a")
        msg = tg.json.encode(f, properties_encoder=raw_properties.encode)
        assert json.loads(msg) == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
            "properties": {"name": "x"},
            "id": "a",
        }

    def test_order_sorted(self):
        f = tg.Feature(tg.Point([1.0, 2.0]), id="a")
        msg = tg.json.encode(f, order="sorted")
        assert list(json.loads(msg)) == ["geometry", "id", "properties", "type"]
        assert list(json.loads(msg)["geometry"]) == ["coordinates", "type"]

    def test_encoder(self):
        enc = tg.json.Encoder(properties_encoder=raw_properties.encode)
        assert enc.properties_encoder is raw_properties.encode
        assert enc.order is None
        msg = enc.encode(tg.Feature(properties={"a": 1}))
        assert json.loads(msg)["properties"] == {"a": 1}

    def test_encode_lines(self):
        enc = tg.json.Encoder()
        msg = enc.encode_lines([tg.Point([1.0, 2.0]), tg.Point([3.0, 4.0])])
        assert msg == (
            b'{"type":"Point","coordinates":[1.0,2.0]}\n'
            b'{"type":"Point","coordinates":[3.0,4.0]}\n'
        )

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Encoding objects of type int is unsupported"):
            tg.json.encode(1)


class TestDecode:
    def test_point(self):
        res = tg.json.decode(b'{"type":"Point","coordinates":[100.0,0.0]}')
        assert res == Ok(tg.Point([100.0, 0.0]))

    def test_str_input(self):
        res = tg.json.decode('{"type":"Point","coordinates":[100.0,0.0]}')
        assert res == Ok(tg.Point([100.0, 0.0]))

    def test_malformed_json(self):
        res = tg.json.decode(b'{"type":"Point",')
        assert isinstance(res, Err)
        assert res.error.expected == "JSON"
        assert res.error.found == "malformed input"
        assert isinstance(res.error.__cause__, msgspec.DecodeError)
        assert "truncated" in str(res.error).lower()

    def test_invalid_geojson(self):
        res = tg.json.decode(b'{"type":"Point","coordinates":"not coordinates"}')
        assert res == Err(DecodeError("array", "str", ("coordinates",)))

    def test_id_precedence(self):
        res = tg.json.decode(b'{"type":"Feature","geometry":null,"properties":null,"id":"42"}')
        assert res.unwrap().id == "42"
        res = tg.json.decode(b'{"type":"Feature","geometry":null,"properties":null,"id":42}')
        assert res.unwrap().id == 42.0
        assert type(res.unwrap().id) is float

    def test_decoder(self):
        dec = tg.json.Decoder(properties_decoder=raw_properties.decode)
        assert dec.properties_decoder is raw_properties.decode
        res = dec.decode(b'{"type":"Feature","properties":{"a":1}}')
        assert res == Ok(tg.Feature(properties={"a": 1}))

    def test_decode_lines(self):
        dec = tg.json.Decoder()
        msg = (
            b'{"type":"Point","coordinates":[1.0,2.0]}\n'
            b'{"type":"MultiPoint","coordinates":[[3.0,4.0]]}\n'
        )
        assert dec.decode_lines(msg) == Ok(
            [tg.Point([1.0, 2.0]), tg.MultiPoint([[3.0, 4.0]])]
        )

    def test_decode_lines_error(self):
        dec = tg.json.Decoder()
        msg = (
            b'{"type":"Point","coordinates":[1.0,2.0]}\n'
            b'{"type":"Point","coordinates":[1.0]}\n'
        )
        res = dec.decode_lines(msg)
        assert res == Err(
            DecodeError("array of length 2 or 3", "array of length 1", (1, "coordinates"))
        )

    def test_decode_lines_malformed(self):
        res = tg.json.Decoder().decode_lines(b'{"type":\n')
        assert isinstance(res, Err)
        assert res.error.expected == "JSON"


def test_format():
    msg = tg.json.encode(tg.Point([1.0, 2.0]))
    assert tg.json.format(msg, indent=-1) == msg
    assert tg.json.format(msg, indent=0) == b'{"type": "Point", "coordinates": [1.0, 2.0]}'
    pretty = tg.json.format(msg)
    assert b"\n" in pretty
    assert tg.json.decode(pretty) == Ok(tg.Point([1.0, 2.0]))
