"""Top-level package for densebits."""

import importlib.metadata as importlib_metadata

from densebits.api import *  # noqa: F401,F403
from densebits.bitset import Bitset  # noqa: F401
from densebits.exceptions import AllocationError, InvalidArgumentError  # noqa: F401

__version__ = importlib_metadata.version(__name__)
