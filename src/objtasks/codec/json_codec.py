"""JSON serialize/deserialize helpers.

``deserialize`` never attaches behaviour to parsed data.  It parses into
plain dicts/lists first and then builds the requested type explicitly:

    1. ``template.from_dict(data)`` when the template defines it
    2. dataclass templates get their init fields copied from ``data``
    3. anything else is called as ``template(**data)``
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from typing import Any, Callable, TypeVar

from objtasks.codec.errors import ParseError, SerializeError, TemplateError
from objtasks.config import DEFAULT_CODEC_CONFIG, CodecConfig

__all__ = ["serialize", "deserialize", "parse"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# String literals are matched first so constants inside them are skipped.
_CONSTANT_RE = re.compile(r'"(?:\\.|[^"\\])*"|(?P<constant>-?Infinity|NaN)')


class _NonStandardConstant(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(name)


def _constant_position(text: str, name: str) -> int:
    for match in _CONSTANT_RE.finditer(text):
        if match.group("constant") == name:
            return match.start()
    return 0


def _to_json_compatible(value: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and plain objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if callable(value) or isinstance(value, type):
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any, config: CodecConfig | None = None) -> str:
    """Return the JSON text for *value*.

    The default config produces compact output: ``serialize([1, 2, 3])``
    is ``"[1,2,3]"``.  Object key order is not guaranteed unless
    ``config.sort_keys`` is set.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    try:
        return json.dumps(
            value,
            default=_to_json_compatible,
            indent=cfg.indent,
            separators=cfg.separators,
            sort_keys=cfg.sort_keys,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializeError(str(exc)) from exc


def parse(text: str) -> Any:
    """Parse JSON *text* into plain Python values (dict, list, str, ...)."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except _NonStandardConstant as exc:
        pos = _constant_position(text, exc.name)
        line = text.count("\n", 0, pos) + 1
        column = pos - text.rfind("\n", 0, pos)
        raise ParseError(
            f"Invalid JSON: {exc.name} is not a valid value (line {line}, column {column})",
            line=line,
            column=column,
        ) from exc
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
        ) from exc


def _from_dataclass(template: type[T], data: dict[str, Any]) -> T:
    init_fields = {f.name: f for f in dataclasses.fields(template) if f.init}
    kwargs = {k: v for k, v in data.items() if k in init_fields}

    dropped = sorted(set(data) - set(kwargs))
    if dropped:
        logger.debug(
            "Dropping unrecognized keys for %s: %s", template.__name__, ", ".join(dropped)
        )

    missing = [
        name
        for name, f in init_fields.items()
        if name not in kwargs
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        raise TemplateError(
            f"Missing field(s) for {template.__name__}: {', '.join(missing)}"
        )
    return template(**kwargs)


def deserialize(template: type[T] | Callable[..., T], text: str) -> T:
    """Parse *text* and construct an instance of *template* from it.

    Raises :class:`ParseError` if *text* is not valid JSON and
    :class:`TemplateError` if the parsed value cannot populate *template*.
    """
    data = parse(text)
    name = getattr(template, "__name__", repr(template))
    if not isinstance(data, dict):
        raise TemplateError(
            f"Expected a JSON object for {name}, got {type(data).__name__}"
        )

    from_dict = getattr(template, "from_dict", None)
    if callable(from_dict):
        logger.debug("Building %s via from_dict", name)
        return from_dict(data)

    if isinstance(template, type) and dataclasses.is_dataclass(template):
        logger.debug("Building dataclass %s from %d key(s)", name, len(data))
        return _from_dataclass(template, data)

    logger.debug("Calling %s with parsed keywords", name)
    try:
        return template(**data)
    except TypeError as exc:
        raise TemplateError(f"Cannot construct {name}: {exc}") from exc
