"""
List-Response Parser

Extracts Attraction records from the free-text reply of the list prompt.

Line grammar (one attraction per line):

    line      := index "." ws name ws "-" ws description ws "(地址:" ws address ","
                 ws "緯度:" ws number "," ws "經度:" ws number ")" trailing
    index     := digit+                       ignored
    number    := ["-"] digit+ ["." digit*]    parsed as a finite float
    name, description, address                shortest match, whitespace-trimmed
    trailing  := anything                     ignored

Shortest match means: the name ends at the first "-" after which the rest of
the line still parses, the description at the first "(地址:" after which the
rest parses, the address at the first "," after which the coordinates parse.

Lines that don't follow the grammar are dropped. The parser never raises;
an empty result is reported by the caller as its own outcome.
"""

import math
from typing import Iterator, List, Optional, Tuple

from attraction_finder.schemas.attractions import (
    Attraction,
    Coordinates,
    ParsedAttractions,
)

INDEX_TERMINATOR = "."
NAME_TERMINATOR = "-"
ADDRESS_OPEN = "(地址:"
FIELD_SEPARATOR = ","
LATITUDE_LABEL = "緯度:"
LONGITUDE_LABEL = "經度:"
LOCATION_CLOSE = ")"
MINUS_SIGN = "-"
DECIMAL_POINT = "."


def _occurrences(text: str, token: str) -> Iterator[int]:
    """Yield every index of token in text, left to right."""
    position = text.find(token)
    while position != -1:
        yield position
        position = text.find(token, position + 1)


def _take_digits(text: str) -> Tuple[str, str]:
    end = 0
    while end < len(text) and text[end].isdigit() and text[end].isascii():
        end += 1
    return text[:end], text[end:]


def _take_number(text: str) -> Optional[Tuple[float, str]]:
    """
    Consume a number at the start of text.

    Returns (value, remainder), or None if text doesn't start with a number
    or the number is too large for a finite float.
    """
    sign = ""
    if text.startswith(MINUS_SIGN):
        sign, text = MINUS_SIGN, text[1:]

    whole, text = _take_digits(text)
    if not whole:
        return None

    fraction = ""
    if text.startswith(DECIMAL_POINT):
        fraction, text = _take_digits(text[1:])
        fraction = DECIMAL_POINT + fraction

    value = float(sign + whole + fraction)
    if not math.isfinite(value):
        return None
    return value, text


def _expect(text: str, token: str) -> Optional[str]:
    """Strip leading whitespace and token; None if token isn't next."""
    text = text.lstrip()
    if not text.startswith(token):
        return None
    return text[len(token):]


def _parse_labelled_number(text: str, label: str) -> Optional[Tuple[float, str]]:
    rest = _expect(text, label)
    if rest is None:
        return None
    return _take_number(rest.lstrip())


def _parse_location(body: str) -> Optional[Tuple[str, Coordinates]]:
    """Parse 'address, 緯度: lat, 經度: lon)' from the text after '(地址:'."""
    for comma in _occurrences(body, FIELD_SEPARATOR):
        latitude = _parse_labelled_number(body[comma + 1:], LATITUDE_LABEL)
        if latitude is None:
            continue
        lat_value, rest = latitude

        # no whitespace allowed between a number and its delimiter
        if not rest.startswith(FIELD_SEPARATOR):
            continue

        longitude = _parse_labelled_number(rest[1:], LONGITUDE_LABEL)
        if longitude is None:
            continue
        lon_value, rest = longitude

        if not rest.startswith(LOCATION_CLOSE):
            continue

        address = body[:comma].strip()
        return address, Coordinates(latitude=lat_value, longitude=lon_value)

    return None


def parse_attraction_line(line: str) -> Optional[Attraction]:
    """
    Parse a single reply line.

    Returns:
        The Attraction, or None if the line doesn't follow the grammar.
    """
    text = line.strip()

    index, rest = _take_digits(text)
    if not index or not rest.startswith(INDEX_TERMINATOR):
        return None
    rest = rest[len(INDEX_TERMINATOR):]

    for dash in _occurrences(rest, NAME_TERMINATOR):
        tail = rest[dash + 1:]
        for open_paren in _occurrences(tail, ADDRESS_OPEN):
            location = _parse_location(tail[open_paren + len(ADDRESS_OPEN):])
            if location is None:
                continue
            address, coordinates = location
            return Attraction(
                name=rest[:dash].strip(),
                description=tail[:open_paren].strip(),
                address=address,
                coordinates=coordinates,
            )

    return None


def parse_attraction_lines(text: str) -> ParsedAttractions:
    """
    Parse a whole reply, keeping the lines that were dropped.

    Blank lines are ignored entirely; every other line either becomes an
    Attraction or ends up in dropped_lines. Source order is preserved and
    duplicates are kept.
    """
    attractions: List[Attraction] = []
    dropped: List[str] = []

    for line in (text or "").split("\n"):
        if not line.strip():
            continue
        attraction = parse_attraction_line(line)
        if attraction is None:
            dropped.append(line.strip())
        else:
            attractions.append(attraction)

    return ParsedAttractions(attractions=attractions, dropped_lines=dropped)


def parse_attractions(text: str) -> List[Attraction]:
    """Parse a whole reply into attractions, in source order."""
    return parse_attraction_lines(text).attractions
