import array

from .base import Generator


class BinaryGenerator(Generator):
    """Raw packed groups, byte for byte the same as the C array."""

    extension = "bin"

    def render(self):
        return array.array("B", self.table.groups).tobytes()
