import re

from textwrap import dedent

from ..base import get_logger
from ..pack import iter_lines
from .base import Generator, GenerationError

logger = get_logger(__name__)

RE_DEFINE = re.compile(r"#define\s+MAX_\w+\s+\((0x[0-9A-Fa-f]+)\)")
RE_COUNT = re.compile(r"_TABLE\[\]\s*=\s*\{\s*//\s*(\d+)")
RE_GROUP = re.compile(r"0b([01]{8})")

HEADER = dedent(
    """\
    #define MAX_{name} (0x{domain_max:X})

    // clang-format off
    static const unsigned char {name}_TABLE[] = {{ // {count}
    """
)

FOOTER = "};\n// clang-format on\n"


def render_c_table(name, table):
    """Renders a packed table as C source.

    The `MAX_<name>` define bounds lookups, and the comment after the
    opening brace records how many groups follow.
    """
    out = [HEADER.format(name=name, domain_max=table.domain_max, count=len(table.groups))]
    for line in iter_lines(table.groups):
        out.append(line + "\n")
    out.append(FOOTER)
    return "".join(out)


def parse_c_table(text):
    """Reads a rendered table back as `(domain_max, groups)`."""
    define = RE_DEFINE.search(text)
    count = RE_COUNT.search(text)
    if define is None or count is None:
        raise GenerationError("Not a generated lookup table.")

    body = text[count.end():]
    groups = tuple(int(bits, 2) for bits in RE_GROUP.findall(body))
    if len(groups) != int(count.group(1)):
        raise GenerationError(
            "Table declares %s groups but contains %d." % (count.group(1), len(groups))
        )
    return int(define.group(1), 16), groups


class CTableGenerator(Generator):
    extension = "c"

    def render(self):
        logger.debug("Rendering %s_TABLE" % self.name)
        return render_c_table(self.name, self.table)
