"""Universal World Profile (UWP) parsing.

A UWP packs a world's main characteristics into one code, one extended-hex
digit each, with tech level after a dash:

    A788899-C
    |||||||  `- tech level
    ||||||`--- law level
    |||||`---- government
    ||||`----- population
    |||`------ hydrographics
    ||`------- atmosphere
    |`-------- size
    `--------- starport class

The spaced form ``A 7 8 8 8 9 9 - C`` is also accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

_HEX_DIGITS = "0123456789ABCDEF"


def parse_hex_digit(char: str) -> int:
    """Value of one UWP digit (0-F); anything else counts as 0."""
    index = _HEX_DIGITS.find(char.upper())
    return index if index >= 0 and len(char) == 1 else 0


@dataclass(frozen=True, slots=True)
class UWP:
    """Decoded Universal World Profile."""

    starport_class: str
    size: int
    atmosphere: int
    hydrographics: int
    population: int
    government: int
    law_level: int
    tech_level: int


def parse_uwp(code: str | None) -> UWP | None:
    """Decode a UWP code.

    Returns:
        The decoded profile, or None when the code is too short to parse

    Example:
        >>> parse_uwp("A123456-7").tech_level
        7
    """
    if not code:
        return None
    compact = code.replace(" ", "")
    if len(compact) < 8:
        return None

    digits = compact[1:7]
    tech_char = compact[8] if compact[7] == "-" and len(compact) >= 9 else compact[7]
    return UWP(
        starport_class=compact[0].upper(),
        size=parse_hex_digit(digits[0]),
        atmosphere=parse_hex_digit(digits[1]),
        hydrographics=parse_hex_digit(digits[2]),
        population=parse_hex_digit(digits[3]),
        government=parse_hex_digit(digits[4]),
        law_level=parse_hex_digit(digits[5]),
        tech_level=parse_hex_digit(tech_char),
    )
