"""drips.receivers.streams

Stream receivers: validate -> dedupe -> sort.

The ledger requires receivers strictly ascending by account id. A list that
names the same account twice is rejected outright, even with different configs.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from drips.codec.account_id import require_account_id
from drips.codec.stream_config import amount_per_second_of, decode_stream_config
from drips.core.constants import MAX_STREAM_RECEIVERS
from drips.core.exceptions import DuplicateReceiverError, ReceiverCountError, ZeroAmountReceiverError
from drips.core.types import OnChainStreamReceiver

logger = logging.getLogger(__name__)


def validate_and_format_stream_receivers(receivers: Sequence[OnChainStreamReceiver]) -> list[OnChainStreamReceiver]:
    """Return ``receivers`` in the order the ledger accepts, or raise."""

    if len(receivers) > MAX_STREAM_RECEIVERS:
        raise ReceiverCountError("stream", len(receivers), MAX_STREAM_RECEIVERS)

    for r in receivers:
        require_account_id(r.account_id)

    zero = [r.account_id for r in receivers if amount_per_second_of(r.config) == 0]
    if zero:
        raise ZeroAmountReceiverError(zero)

    for r in receivers:
        decode_stream_config(r.config)

    counts = Counter(r.account_id for r in receivers)
    duplicates = [account_id for account_id, n in counts.items() if n > 1]
    if duplicates:
        raise DuplicateReceiverError("stream", duplicates)

    ordered = sorted(receivers, key=lambda r: r.account_id)
    logger.debug("stream_receivers_formatted", extra={"count": len(ordered)})
    return ordered
