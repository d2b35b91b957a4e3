# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of barcodedigits."""

from .digit import Digit
from .digitsequence import DigitSequence
from .interncache import InternCache, Retention
from .errors import InvalidValueError, InvalidDigitError, InvalidDigitSequenceError
