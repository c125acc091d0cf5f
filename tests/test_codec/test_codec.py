"""Tests for the JSON serialize/deserialize helpers."""

import json
import logging
from dataclasses import dataclass, field

import pytest

from objtasks.codec import (
    CodecError,
    ParseError,
    SerializeError,
    TemplateError,
    deserialize,
    parse,
    serialize,
)
from objtasks.config import CodecConfig
from objtasks.model import Circle, Rectangle, make_rectangle


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list_is_compact(self):
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert json.loads(serialize({"width": 10, "height": 20})) == {
            "width": 10,
            "height": 20,
        }

    def test_primitives(self):
        assert serialize("a") == '"a"'
        assert serialize(None) == "null"
        assert serialize(True) == "true"
        assert serialize(1.5) == "1.5"

    def test_nested(self):
        assert serialize({"a": [1, {"b": None}]}) == '{"a":[1,{"b":null}]}'

    def test_dataclass_emits_fields_only(self):
        assert json.loads(serialize(make_rectangle(10, 20))) == {"width": 10, "height": 20}

    def test_plain_object_public_attrs(self):
        class Point:
            def __init__(self):
                self.x = 1
                self.y = 2
                self._hidden = 3

        assert json.loads(serialize(Point())) == {"x": 1, "y": 2}

    def test_unserializable_raises(self):
        with pytest.raises(SerializeError):
            serialize({1, 2})

    def test_circular_reference_raises(self):
        data: list = []
        data.append(data)
        with pytest.raises(SerializeError):
            serialize(data)

    def test_serialize_error_is_codec_error(self):
        with pytest.raises(CodecError):
            serialize(object())

    def test_unicode_not_escaped(self):
        assert serialize("ä") == '"ä"'

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_raises(self, number):
        with pytest.raises(SerializeError):
            serialize({"r": number})

    def test_function_raises(self):
        with pytest.raises(SerializeError):
            serialize({"cb": lambda: 1})

    def test_class_raises(self):
        with pytest.raises(SerializeError):
            serialize(Circle)

    def test_callable_instance_raises(self):
        class Handler:
            def __init__(self):
                self.name = "h"

            def __call__(self):
                return self.name

        with pytest.raises(SerializeError):
            serialize(Handler())


class TestSerializeConfig:
    def test_sort_keys(self):
        text = serialize({"b": 1, "a": 2}, CodecConfig(sort_keys=True))
        assert text == '{"a":2,"b":1}'

    def test_indent(self):
        text = serialize({"a": 1}, CodecConfig(indent=2))
        assert text == '{\n  "a": 1\n}'

    def test_ensure_ascii(self):
        assert serialize("ä", CodecConfig(ensure_ascii=True)) == '"\\u00e4"'


# ---------------------------------------------------------------------------
# parse / deserialize
# ---------------------------------------------------------------------------


class TestParse:
    def test_plain_values(self):
        assert parse('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_malformed_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            parse('{"a": }')
        assert exc_info.value.line == 1
        assert exc_info.value.column == 7

    def test_parse_error_line_number(self):
        with pytest.raises(ParseError) as exc_info:
            parse('{\n"a": 1\n"b": 2}')
        assert exc_info.value.line == 3

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(ParseError):
            parse(text)

    def test_constant_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse('{"name": "NaN",\n "r": -Infinity}')
        assert exc_info.value.line == 2
        assert exc_info.value.column == 7
        assert "-Infinity" in str(exc_info.value)

    def test_parse_error_chains_original(self):
        with pytest.raises(ParseError) as exc_info:
            parse("nope")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


class TestDeserializeDataclass:
    def test_circle(self):
        c = deserialize(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.area() == pytest.approx(314.159, rel=1e-4)

    def test_rectangle_round_trip(self):
        r = make_rectangle(10, 20)
        back = deserialize(Rectangle, serialize(r))
        assert back == r
        assert back.area() == 200

    def test_unknown_keys_dropped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="objtasks.codec.json_codec"):
            c = deserialize(Circle, '{"radius": 2, "color": "red"}')
        assert c == Circle(radius=2)
        assert "color" in caplog.text

    def test_missing_field(self):
        with pytest.raises(TemplateError, match="radius"):
            deserialize(Circle, '{"diameter": 4}')

    def test_defaults_fill_missing(self):
        @dataclass
        class Box:
            size: int
            tags: list = field(default_factory=list)
            label: str = "box"

        b = deserialize(Box, '{"size": 3}')
        assert b == Box(size=3, tags=[], label="box")

    def test_non_object_payload(self):
        with pytest.raises(TemplateError, match="list"):
            deserialize(Circle, "[1, 2]")

    def test_malformed_text(self):
        with pytest.raises(ParseError):
            deserialize(Circle, '{"radius":')

    def test_infinity_rejected(self):
        with pytest.raises(ParseError):
            deserialize(Circle, '{"radius": Infinity}')


class TestDeserializeOtherTemplates:
    def test_from_dict_hook(self):
        class Temperature:
            def __init__(self, celsius):
                self.celsius = celsius

            @classmethod
            def from_dict(cls, data):
                return cls(celsius=(data["fahrenheit"] - 32) * 5 / 9)

        t = deserialize(Temperature, '{"fahrenheit": 212}')
        assert t.celsius == pytest.approx(100)

    def test_plain_class_called_with_keywords(self):
        class Point:
            def __init__(self, x, y):
                self.x = x
                self.y = y

        p = deserialize(Point, '{"x": 1, "y": 2}')
        assert (p.x, p.y) == (1, 2)

    def test_plain_function_template(self):
        result = deserialize(lambda **kw: sorted(kw), '{"b": 1, "a": 2}')
        assert result == ["a", "b"]

    def test_constructor_mismatch(self):
        class Point:
            def __init__(self, x, y):
                self.x = x
                self.y = y

        with pytest.raises(TemplateError, match="Point"):
            deserialize(Point, '{"x": 1}')
