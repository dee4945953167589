import logging
import re
from typing import NamedTuple

from converter_errors import ParseError

logger = logging.getLogger(__name__)

_UNIT = r"(\w+|degree \w+|degrees \w+)"
REQUEST_PATTERN = re.compile(r"([-0-9.]+)\s+" + _UNIT + r"\s+\w+\s+" + _UNIT, re.ASCII)


class ConversionRequest(NamedTuple):
    value: float
    source: str
    destination: str


def parse(line):
    """Split '<number> <unit> <word> <unit>' into a ConversionRequest.

    The line is lowercased first. Raises ParseError if the line doesn't fit the
    pattern or the number is malformed ("1.2.3", "--5").
    """
    match = REQUEST_PATTERN.fullmatch(line.lower())
    if match is None:
        raise ParseError(line)

    number, source, destination = match.groups()
    try:
        value = float(number)
    except ValueError:
        raise ParseError(line) from None

    request = ConversionRequest(value, source, destination)
    logger.debug("Parsed %r as %s", line, request)
    return request
