import re
from collections import namedtuple

from .base import DOMAIN_MAX, ParseError, get_logger
from .boolmap import BoolMap

logger = get_logger(__name__)

CodePointRange = namedtuple("CodePointRange", ["low", "high"])

RE_HEX = re.compile(r"^[0-9A-Fa-f]+$")
RE_WHITESPACE = re.compile(r"\s+")


def _parse_hex(text, lineno, line):
    if not RE_HEX.match(text):
        raise ParseError(lineno, line, "not a hexadecimal code point")
    return int(text, 16)


def parse_line(line, lineno=1, separator=";", range_marker=".."):
    """Parses one descriptor line into a `CodePointRange`.

    Everything from the first `separator` onwards is annotation and is
    dropped, as is all whitespace. `0041..005A` is a range, `00AA` a single
    point. Returns None for blank lines and `#` comment lines.
    """
    raw = line.strip()
    if not raw or raw.startswith("#"):
        return None

    field = raw.split(separator, 1)[0]
    field = RE_WHITESPACE.sub("", field)
    if not field:
        raise ParseError(lineno, line, "no code point before separator")

    if range_marker in field:
        low, high = field.split(range_marker, 1)
        low = _parse_hex(low, lineno, line)
        high = _parse_hex(high, lineno, line)
        if low > high:
            raise ParseError(lineno, line, "range bounds are reversed")
        return CodePointRange(low, high)

    cp = _parse_hex(field, lineno, line)
    return CodePointRange(cp, cp)


def iter_ranges(text, separator=";", range_marker=".."):
    for lineno, line in enumerate(text.splitlines(), 1):
        r = parse_line(line, lineno, separator, range_marker)
        if r is None:
            logger.trace("Skipping line %d: %r" % (lineno, line))
            continue
        yield r


def build_membership(
    text, separator=";", range_marker="..", domain_max=DOMAIN_MAX, progress=None
):
    """Builds the membership map for one classification listing.

    The returned `BoolMap` covers exactly `domain_max + 1` points. Ranges
    are clipped to that domain; points above it never reach the table.
    `progress`, if given, is called with the running number of inserted
    points after each line.
    """
    membership = BoolMap(domain_max + 1)
    count = 0

    for r in iter_ranges(text, separator, range_marker):
        if r.low > domain_max:
            logger.debug("Ignoring %04X..%04X, beyond 0x%X" % (r.low, r.high, domain_max))
            continue
        high = min(r.high, domain_max)
        if high < r.high:
            logger.debug("Clipping %04X..%04X to 0x%X" % (r.low, r.high, domain_max))
        membership.set_range(r.low, high)
        count += high - r.low + 1
        if progress is not None:
            progress(count)

    logger.debug("Indexed %d code points." % count)
    return membership
