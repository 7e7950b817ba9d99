"""Small helpers shared across custom_rule."""

from custom_rule.support.arr import wrap
from custom_rule.support.conditionable import unless, when
from custom_rule.support.text import make_replacements

__all__ = ["make_replacements", "unless", "when", "wrap"]
