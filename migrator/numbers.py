"""Number source.

Turns raw phone number text into the number range map a MigrationJob works
on: DigitSequence (E.164 digits, no '+') -> the string exactly as entered.

Parsing (international and national dialling prefixes, trunk prefixes,
Italian leading zeros) is done by phonenumbers. Numbers are not checked with
phonenumbers.is_valid_number: numbers waiting for migration are frequently in
ranges the current metadata already rejects.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Union

import phonenumbers

from migrator.core.config import MAX_E164_DIGITS, NUMBER_FORMATTING_CHARS
from migrator.core.exceptions import NumberParseError
from migrator.ranges.digit_sequence import DigitSequence
from migrator.recipes.region import RegionCode

log = logging.getLogger(__name__)


def parse_number(raw: str, region) -> DigitSequence:
    """Convert one raw number into its E.164 digit sequence.

    - "+44 7100 000001" is international and kept as is
    - "0044 7100 000001" (GB) and "011 44 7100 000001" (US) use the region's
      international dialling prefix
    - "07100 000001" (GB) is national: the trunk prefix is dropped and the
      region's calling code prepended; "06 1234 5678" (IT) keeps its 0

    Args:
        raw: Number as entered by the user.
        region: RegionCode (or its text) used for national numbers.

    Returns:
        DigitSequence of the full international number.

    Raises:
        RegionCodeError: If region is not a known region code.
        NumberParseError: On characters other than digits and formatting,
            input phonenumbers cannot parse, or more than MAX_E164_DIGITS digits.
    """
    region = RegionCode.parse(region)
    if not isinstance(raw, str) or not raw.strip():
        raise NumberParseError(str(raw), "empty number")

    body = raw.strip()
    if body.startswith("+"):
        body = body[1:]

    # phonenumbers accepts vanity letters and extensions; recipe input does not
    bad = [c for c in body if not c.isascii() or not (c.isdigit() or c in NUMBER_FORMATTING_CHARS)]
    if bad:
        raise NumberParseError(raw, f"unexpected character {bad[0]!r}")
    if not any(c.isdigit() for c in body):
        raise NumberParseError(raw, "no digits")

    try:
        parsed = phonenumbers.parse(raw, region.value)
    except phonenumbers.NumberParseException as e:
        raise NumberParseError(raw, str(e)) from e

    digits = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164).lstrip("+")
    if len(digits) > MAX_E164_DIGITS:
        raise NumberParseError(raw, f"more than {MAX_E164_DIGITS} digits")
    return DigitSequence(digits)


def build_number_range_map(raws: Iterable[str], region) -> Mapping[DigitSequence, str]:
    """Parse raw numbers into a read-only DigitSequence -> raw string map.

    When several inputs resolve to the same digits the first one is kept.

    Raises:
        NumberParseError: On the first input that cannot be parsed.
    """
    region = RegionCode.parse(region)
    numbers: Dict[DigitSequence, str] = {}
    for raw in raws:
        number = parse_number(raw, region)
        if number in numbers:
            log.debug(f"Ignoring duplicate input {raw!r} for {number}")
            continue
        numbers[number] = raw
    log.info(f"Parsed {len(numbers)} numbers for region {region}")
    return MappingProxyType(numbers)


def read_numbers_file(path: Union[str, Path]) -> Iterator[str]:
    """Yield the numbers of a text file, one per line.

    Blank lines and lines starting with '#' are skipped; surrounding
    whitespace is removed.
    """
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                yield line
