"""termformat -- Typed terminal output formatting.

This package turns structured descriptions of visual attributes (colors,
weight, underline and blink styles, hyperlinks, inline images) into the
exact escape sequences a terminal emulator interprets. Everything in the
core is an immutable value and every encoder is a pure function, so
formatting can be composed freely and spliced into plain text.
"""

__version__ = "0.1.0"
