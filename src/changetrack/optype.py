"""Operation types reported to tracker functions."""

from enum import Enum, auto


class OpType(Enum):
    """What happened to the watched object."""

    GET = auto()  # Primitive value read
    SET = auto()  # Item assignment or append()
    DELETE = auto()  # Item deletion
    SORT = auto()  # In-place sort()
