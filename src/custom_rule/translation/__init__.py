"""Message translation.

``DictTranslator`` is the in-memory translator used when the host does not
supply its own; ``DEFAULT_LINES`` holds the built-in English messages.
"""

from custom_rule.translation.lines import DEFAULT_LINES
from custom_rule.translation.translator import DictTranslator

__all__ = ["DEFAULT_LINES", "DictTranslator"]
