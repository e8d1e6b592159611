from collections import OrderedDict

from .c import CTableGenerator
from .binary import BinaryGenerator

generators = OrderedDict(
    (
        ("c", CTableGenerator),
        ("bin", BinaryGenerator),
    )
)
