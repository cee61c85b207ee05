"""drips.receivers

Receiver list normalization for streams and splits.
"""

from .models import (
    AddressReceiver,
    DripListReceiver,
    EcosystemMainAccountReceiver,
    OrcidReceiver,
    ProjectReceiver,
    SplitsReceiverDescription,
    SubListReceiver,
)
from .resolver import AccountIdResolver, DriverAccountIdResolver
from .splits import ParsedSplitsReceivers, format_splits_receivers, parse_splits_receivers
from .streams import validate_and_format_stream_receivers

__all__ = [
    "AccountIdResolver",
    "AddressReceiver",
    "DriverAccountIdResolver",
    "DripListReceiver",
    "EcosystemMainAccountReceiver",
    "OrcidReceiver",
    "ParsedSplitsReceivers",
    "ProjectReceiver",
    "SplitsReceiverDescription",
    "SubListReceiver",
    "format_splits_receivers",
    "parse_splits_receivers",
    "validate_and_format_stream_receivers",
]
