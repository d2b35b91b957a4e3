# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any

class InvalidValueError(ValueError):
    """
    Raised when a raw value cannot be converted into one of the value types.
    The rejected value is kept in ``value``.
    """

    #: Name of the type that was being constructed.
    target: str = "value"

    #: The rejected raw value.
    value: Any

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"invalid value for {self.target}(): {value!r} ({type(value).__name__})")

    def __reduce__(self):
        return (type(self), (self.value,))

class InvalidDigitError(InvalidValueError):
    """Raised for values that are not a single decimal digit."""

    target = "Digit"

class InvalidDigitSequenceError(InvalidValueError):
    """Raised for values that cannot be turned into a digit sequence."""

    target = "DigitSequence"
