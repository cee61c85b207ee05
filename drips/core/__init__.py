"""drips.core

Core primitives.

If a module needs to exist, it should probably depend only on this package.
"""

from .config import Config
from .exceptions import DripsError
from .types import DriverTag, OnChainStreamReceiver, SplitsReceiver, StreamConfig

__all__ = [
    "Config",
    "DriverTag",
    "DripsError",
    "OnChainStreamReceiver",
    "SplitsReceiver",
    "StreamConfig",
]
