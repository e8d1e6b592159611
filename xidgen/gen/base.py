import os
import os.path
import tempfile

from ..base import GenerationError, get_logger

logger = get_logger(__name__)


def write_atomic(path, data):
    """Writes `data` (str or bytes) to `path` via a temporary file.

    The target is replaced only once the whole payload is on disk.
    """
    dirname = os.path.dirname(os.path.abspath(path))
    mode = "wb" if isinstance(data, bytes) else "w"
    kwargs = {} if isinstance(data, bytes) else {"encoding": "utf-8", "newline": "\n"}

    fd, tmp = tempfile.mkstemp(dir=dirname, prefix=".xidgen-", suffix=".tmp")
    try:
        with os.fdopen(fd, mode, **kwargs) as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


class Generator:
    extension = None

    def __init__(self, name, table, args=None):
        self._name = name
        self._table = table
        self._args = args or {}

    @property
    def name(self):
        return self._name

    @property
    def table(self):
        return self._table

    @property
    def dry_run(self):
        return self._args.get("dry_run", False)

    @property
    def output_dir(self):
        return self._args.get("output", ".")

    def output_path(self, base="."):
        return os.path.join(os.path.abspath(base), "%s.%s" % (self.name, self.extension))

    def render(self):
        raise NotImplementedError

    def generate(self, base="."):
        data = self.render()

        if self.dry_run:
            logger.info("Dry run completed.")
            return None

        out_dir = os.path.abspath(base)
        os.makedirs(out_dir, exist_ok=True)
        fn = self.output_path(out_dir)
        write_atomic(fn, data)
        logger.info("Wrote %s" % fn)
        return fn
