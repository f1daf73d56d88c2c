"""Parse failures.

Two kinds, both surfaced to the caller:
- Structural: the text does not have an accepted shape.
- Numeric: a component in the right place is not an integer.

Both derive from :class:`FormatError`, itself a ``ValueError``.
"""

from __future__ import annotations


class FormatError(ValueError):
    """Text cannot be parsed into a Datetime."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class StructuralFormatError(FormatError):
    """Wrong separator or wrong number of segments."""


class NumericFormatError(FormatError):
    """A date or time component is not an integer."""

    def __init__(self, text: str, component: str, value: str) -> None:
        super().__init__(text, f"Component {component} is not an integer ({value!r})")
        self.component = component
        self.value = value
