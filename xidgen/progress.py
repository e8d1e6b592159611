import platform
import shutil
import sys

import humanize

clr_line = "%c[2K\r" % 27
blocks = " ▏▎▍▌▋▊▉█"


def generate_prog_bar(width: int, cur: int, total: int):
    if width < 1:
        return ""
    units = width
    t = cur / total * units
    if t == 0:
        bars = "▏"
    else:
        bars = "█" * int(t)
    et = t - int(t)
    if et > 0:
        extra = int(len(blocks) * et)
        bars += blocks[extra]
    return ("{:<%d}" % units).format(bars)


def format_count(label: str, cur: int) -> str:
    return "{clr}{label}: {cur}".format(clr=clr_line, label=label, cur=humanize.intcomma(cur))


def format_progress(label: str, cur: int, total: int, width: int = 80) -> str:
    pc = "%.0f" % min(cur / total * 100.0, 100.0)
    frac = "{cur}/{max}".format(cur=humanize.intcomma(cur), max=humanize.intcomma(total))
    msg_len = len(label) + len(frac) + 10
    prog = generate_prog_bar(width - msg_len, cur, total)

    return "{clr}{label}: {pc:>3}% {prog}▏ {frac}".format(
        clr=clr_line, label=label, prog=prog, frac=frac, pc=pc
    )


class TerminalProgress:
    """Progress callbacks that redraw a single line on a terminal.

    Does nothing when the stream is not a tty, so piped builds stay clean.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self.enabled = (
            platform.system() != "Windows"
            and hasattr(self.stream, "isatty")
            and self.stream.isatty()
        )
        self._dirty = False

    def _write(self, msg):
        if not self.enabled:
            return
        self.stream.write(msg)
        self.stream.flush()
        self._dirty = True

    def indexing(self, count: int):
        self._write(format_count("Indexing code points", count))

    def packing(self, cur: int, total: int):
        w = min(shutil.get_terminal_size().columns, 80)
        self._write(format_progress("Generating lookup table", cur, total, w))

    def finish(self):
        if self._dirty:
            self.stream.write("\n")
            self.stream.flush()
            self._dirty = False
