"""Various type definitions used throughout densebits."""

from typing import Callable, Mapping, Tuple

BitRange = Tuple[int, int]

Operation = Callable[..., object]
OperationTable = Mapping[str, Operation]
