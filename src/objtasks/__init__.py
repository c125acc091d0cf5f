"""objtasks -- object factory, JSON codec and CSS selector builder."""

from objtasks.codec import (
    CodecError,
    ParseError,
    SerializeError,
    TemplateError,
    deserialize,
    serialize,
)
from objtasks.config import CodecConfig, SelectorConfig
from objtasks.model import Circle, Rectangle, make_rectangle
from objtasks.selector import (
    CardinalityError,
    Category,
    CombinedSelector,
    OrderError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # model
    "Rectangle",
    "Circle",
    "make_rectangle",
    # codec
    "serialize",
    "deserialize",
    "CodecError",
    "ParseError",
    "SerializeError",
    "TemplateError",
    # selector
    "Category",
    "SelectorBuilder",
    "CombinedSelector",
    "css_selector_builder",
    "SelectorError",
    "CardinalityError",
    "OrderError",
    # config
    "CodecConfig",
    "SelectorConfig",
]
