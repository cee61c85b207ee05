"""drips: encoding and validation for the Drips streaming protocol.

Every value this package produces is read verbatim by a contract that moves money.
There is no "close enough".
"""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "1.0.0"
