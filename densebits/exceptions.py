"""Exceptions raised by densebits."""


class InvalidArgumentError(ValueError):
    """A negative index, range bound or capacity was supplied."""


class AllocationError(MemoryError):
    """The word buffer of a bitset could not be created or resized."""
