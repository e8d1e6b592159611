from collections import namedtuple

from .base import DOMAIN_MAX, GenerationError, get_logger

logger = get_logger(__name__)

GROUP_BITS = 8
GROUPS_PER_LINE = 8

PackedTable = namedtuple("PackedTable", ["domain_max", "groups"])


def group_count(domain_max=DOMAIN_MAX):
    """Number of 8-bit groups needed to cover `0..domain_max`."""
    return (domain_max + GROUP_BITS) // GROUP_BITS


def iter_groups(membership, domain_max=DOMAIN_MAX, progress=None):
    """Sweeps `0..domain_max` once, yielding one integer per group.

    Bit `i` of a group is the `i`th point of that group, so the earliest
    point is the least significant bit. Positions past `domain_max` in the
    final group are zero. `membership` is only read.
    """
    total = group_count(domain_max)
    acc = 0
    for cp in range(domain_max + 1):
        off = cp % GROUP_BITS
        if membership[cp]:
            acc |= 1 << off
        if off == GROUP_BITS - 1:
            yield acc
            acc = 0
            if progress is not None and (cp + 1) % (GROUP_BITS * GROUPS_PER_LINE) == 0:
                progress((cp + 1) // GROUP_BITS, total)

    if (domain_max + 1) % GROUP_BITS:
        # Pad the partial final group.
        yield acc & ((1 << ((domain_max + 1) % GROUP_BITS)) - 1)

    if progress is not None:
        progress(total, total)


def pack(membership, domain_max=DOMAIN_MAX, progress=None):
    groups = tuple(iter_groups(membership, domain_max, progress))

    expected = group_count(domain_max)
    if len(groups) != expected:
        raise GenerationError(
            "Packed %d groups, expected %d." % (len(groups), expected)
        )

    logger.debug("Packed %d groups." % len(groups))
    return PackedTable(domain_max, groups)


def format_group(group):
    return "0b{:08b}".format(group)


def iter_lines(groups, per_line=GROUPS_PER_LINE):
    for i in range(0, len(groups), per_line):
        yield ", ".join(format_group(g) for g in groups[i : i + per_line]) + ","


def lookup(groups, cp, domain_max=DOMAIN_MAX):
    if cp < 0 or cp > domain_max:
        return False
    return bool((groups[cp >> 3] >> (cp & 0b111)) & 1)


def unpack(groups, domain_max=None):
    """Decodes packed groups back into the set of member code points."""
    members = set()
    for g, group in enumerate(groups):
        for i in range(GROUP_BITS):
            if group & (1 << i):
                members.add(g * GROUP_BITS + i)
    if domain_max is not None:
        members = {cp for cp in members if cp <= domain_max}
    return members
