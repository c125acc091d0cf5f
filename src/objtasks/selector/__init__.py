from objtasks.selector.builder import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from objtasks.selector.errors import CardinalityError, OrderError, SelectorError
from objtasks.selector.model import Category, CombinedSelector, Fragment
from objtasks.selector.validator import validate, validate_or_raise

__all__ = [
    "css_selector_builder",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "Category",
    "Fragment",
    "CombinedSelector",
    "validate",
    "validate_or_raise",
    "SelectorError",
    "CardinalityError",
    "OrderError",
]
