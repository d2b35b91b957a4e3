# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .digit import Digit
from .digitsequence import DigitSequence
from .errors import InvalidValueError, InvalidDigitError, InvalidDigitSequenceError

__all__ = [
    "Digit",
    "DigitSequence",
    "InvalidValueError",
    "InvalidDigitError",
    "InvalidDigitSequenceError",
]
