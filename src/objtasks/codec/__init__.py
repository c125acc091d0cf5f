from objtasks.codec.errors import CodecError, ParseError, SerializeError, TemplateError
from objtasks.codec.json_codec import deserialize, parse, serialize

__all__ = [
    "serialize",
    "deserialize",
    "parse",
    "CodecError",
    "ParseError",
    "SerializeError",
    "TemplateError",
]
