import typing as tp


class Indexed[T](tp.NamedTuple):
    """A value together with its position in the traversed sequence."""

    idx: int
    value: T
