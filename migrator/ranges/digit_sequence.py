"""Digit sequence value type.

A DigitSequence is the canonical form of a phone number (E.164 without the
'+') or of a range endpoint. Leading zeros are significant, so sequences are
never converted to integers: "0123" and "123" are different values.
"""

import re
from dataclasses import dataclass

from migrator.core.config import NUMBER_FORMATTING_CHARS
from migrator.core.exceptions import DigitSequenceError

DIGITS_PATTERN = re.compile(r'[0-9]+')


@dataclass(frozen=True, order=True)
class DigitSequence:
    """Immutable, non-empty sequence of decimal digits.

    Ordering is lexicographic over the digit text: a strict prefix sorts
    before every longer sequence it prefixes ("12" < "120" < "13"). This is
    the endpoint order used by every interval in the ranges package.
    """
    digits: str

    def __post_init__(self):
        if not isinstance(self.digits, str) or not DIGITS_PATTERN.fullmatch(self.digits):
            raise DigitSequenceError(f"Not a digit sequence: {self.digits!r}")

    @classmethod
    def parse(cls, text: str) -> "DigitSequence":
        """Build a sequence from text, dropping '+' and formatting characters.

        Raises:
            DigitSequenceError: If anything other than digits remains.
        """
        if not isinstance(text, str):
            raise DigitSequenceError(f"Not a digit sequence: {text!r}")
        cleaned = "".join(c for c in text.strip() if c not in NUMBER_FORMATTING_CHARS)
        if cleaned.startswith("+"):
            cleaned = cleaned[1:]
        return cls(cleaned)

    def successor(self) -> "DigitSequence":
        """Return the sequence immediately after this one in the ordering.

        Nothing sorts strictly between s and s + "0", which makes intervals
        ending at s and starting at s + "0" adjacent.
        """
        return DigitSequence(self.digits + "0")

    def startswith(self, prefix) -> bool:
        return self.digits.startswith(str(prefix))

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return self.digits

    def __repr__(self) -> str:
        return f"DigitSequence({self.digits})"
