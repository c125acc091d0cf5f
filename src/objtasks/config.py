"""Configuration for the codec and the selector builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Options controlling how :func:`objtasks.codec.serialize` emits JSON."""

    indent: int | None = None  # None = compact, no whitespace
    sort_keys: bool = False
    ensure_ascii: bool = False

    @property
    def separators(self) -> tuple[str, str] | None:
        if self.indent is None:
            return (",", ":")
        return None


@dataclass(frozen=True)
class SelectorConfig:
    """Options for :class:`objtasks.selector.SelectorBuilder`.

    When ``strict`` is False, invalid appends are kept and reported through
    ``builder.diagnostics`` instead of raising.
    """

    strict: bool = True


DEFAULT_CODEC_CONFIG = CodecConfig()
DEFAULT_SELECTOR_CONFIG = SelectorConfig()
