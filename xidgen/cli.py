import argparse
import platform
import sys

from . import __version__, gen
from .base import ConfigParser, UserException, logger
from .log import LEVELS
from .pack import pack
from .progress import TerminalProgress
from .ranges import build_membership


def parse_args(argv=None):
    def logging_type(string):
        n = LEVELS.get(string, None)

        if n is None:
            raise argparse.ArgumentTypeError("Invalid logging level.")
        return n

    p = argparse.ArgumentParser(prog="xidgen")

    p.add_argument("--version", action="version", version="%(prog)s " + __version__)
    p.add_argument("--logging", type=logging_type, default=20, help="Logging level")
    p.add_argument(
        "-K",
        "--key",
        nargs="*",
        dest="cfg_pairs",
        help="Key-value overrides (eg -K separator=#)",
    )
    p.add_argument(
        "-D",
        "--dry-run",
        action="store_true",
        help="Don't write anything, just parse and pack.",
    )
    p.add_argument(
        "-G",
        "--global",
        dest="global_cfg",
        type=argparse.FileType("r"),
        help="Override the global.yaml file",
    )
    p.add_argument(
        "-t",
        "--target",
        default="c",
        choices=gen.generators.keys(),
        help="Target output (default: c)",
    )
    p.add_argument("-i", "--input", help="Directory holding <CLASSIFICATION>.txt")
    p.add_argument(
        "-o",
        "--output",
        default=".",
        help="Output directory (default: current working directory)",
    )
    p.add_argument(
        "classification",
        nargs="?",
        help="Table to generate (XID_START or XID_CONTINUE)",
    )

    return p.parse_args(argv)


def print_diagnostics():
    logger.debug("Python version: %r" % " ".join(sys.version.split("\n")))
    logger.debug("Platform: %r" % platform.platform())


def run_cli(argv=None, progress=None):
    args = parse_args(argv)
    logger.setLevel(args.logging)

    print_diagnostics()

    try:
        config = ConfigParser().parse(args.global_cfg, args.cfg_pairs)
        name = config.classification(args.classification)
    except UserException as e:
        logger.critical("Error: %s" % e)
        return 1
    finally:
        if args.global_cfg is not None:
            args.global_cfg.close()

    generator_cls = gen.generators.get(args.target, None)

    if generator_cls is None:
        print("Error: '%s' is not a valid target." % args.target, file=sys.stderr)
        print("Valid targets: %s" % ", ".join(gen.generators.keys()), file=sys.stderr)
        return 1

    input_path = config.input_path(name, args.input)

    if progress is None:
        progress = TerminalProgress()

    logger.info("Generating %s.%s..." % (name, generator_cls.extension))

    try:
        with open(input_path, encoding=config.encoding) as f:
            text = f.read()

        membership = build_membership(
            text,
            separator=config.separator,
            range_marker=config.range_marker,
            progress=progress.indexing,
        )
        progress.finish()
        table = pack(membership, progress=progress.packing)
        progress.finish()

        x = generator_cls(name, table, dict(args._get_kwargs()))
        x.generate(x.output_dir)
    except FileNotFoundError as e:
        progress.finish()
        logger.critical("Input file '%s' not found." % e.filename)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        progress.finish()
        logger.critical("Error reading '%s': %s" % (input_path, e))
        return 1
    except Exception as e:
        progress.finish()
        if logger.getEffectiveLevel() < 10:
            raise e
        logger.critical(e)

        # Short-circuit for user-caused exceptions
        if isinstance(e, UserException):
            return 1

        logger.critical(
            "You should not be seeing this error. Please report this as a bug."
        )
        logger.critical(
            "To receive a more detailed stacktrace, add `--logging trace` to your build command."
        )
        return 1

    return 0
