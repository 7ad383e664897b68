"""
seal_waiter.py
~~~~~~~~~~~~~~

Polls the access node until a submitted transaction is sealed.

The poller fetches the transaction result once, and if the transaction is not
yet sealed keeps re-fetching it at a fixed interval, writing a `.` to the
output stream per poll. Fetch failures are never retried. The wait can be
stopped through a cancel event or a timeout; both produce a Cancelled outcome
rather than an exception.
"""
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional, TextIO, Tuple, Union

from flow_txn_helper.errors import (
    SealWaitCancelled,
    TransactionExpiredError,
    TransactionFetchError,
)
from flow_txn_helper.transaction.transaction_id import TransactionId
from flow_txn_helper.transaction.transaction_result import TransactionResult
from flow_txn_helper.transaction.transaction_status import TransactionStatus

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0


@dataclass(frozen=True)
class Sealed:
    """The transaction reached SEALED."""

    result: TransactionResult

    def unwrap(self) -> TransactionResult:
        return self.result


@dataclass(frozen=True)
class Failed:
    """A fetch failed, or the transaction expired when expiry is treated as terminal."""

    error: Exception
    last_result: Optional[TransactionResult] = None

    def unwrap(self) -> TransactionResult:
        raise self.error


@dataclass(frozen=True)
class Cancelled:
    """The wait was stopped by the cancel event ("cancelled") or the timeout ("timeout")."""

    transaction_id: TransactionId
    reason: str
    last_result: Optional[TransactionResult] = None

    def unwrap(self) -> TransactionResult:
        raise SealWaitCancelled(self.transaction_id, self.reason, self.last_result)


SealOutcome = Union[Sealed, Failed, Cancelled]


def _coerce_transaction_id(transaction_id: Union[TransactionId, bytes, str]) -> TransactionId:
    if isinstance(transaction_id, TransactionId):
        return transaction_id
    if isinstance(transaction_id, str):
        return TransactionId.from_string(transaction_id)
    return TransactionId.from_bytes(transaction_id)


async def get_transaction_result(client: Any, transaction_id: TransactionId) -> TransactionResult:
    """
    Fetch the current result snapshot for a transaction.

    Args:
        client: An access API client exposing ``get_transaction_result(id=...)``.
        transaction_id (TransactionId): The transaction to look up.

    Returns:
        TransactionResult: A fresh snapshot.

    Raises:
        TransactionFetchError: If the call or the response conversion fails.
    """
    try:
        response = await client.get_transaction_result(id=transaction_id.to_bytes())
        return TransactionResult._from_response(response)  # pylint: disable=protected-access
    except Exception as e:
        raise TransactionFetchError(transaction_id, str(e) or type(e).__name__) from e


async def _sleep(interval: float, cancel: Optional[asyncio.Event]) -> bool:
    """Sleep for `interval` seconds; returns True if `cancel` was set meanwhile."""
    if cancel is None:
        await asyncio.sleep(interval)
        return False
    try:
        await asyncio.wait_for(cancel.wait(), timeout=interval)
    except asyncio.TimeoutError:
        return False
    return True


async def _bounded_fetch(
    client: Any,
    transaction_id: TransactionId,
    deadline: Optional[float],
    cancel: Optional[asyncio.Event],
) -> Tuple[Optional[TransactionResult], Optional[str]]:
    """
    Fetch a result, giving up when the deadline passes or `cancel` is set.

    Returns:
        (result, None) when the fetch finished, or (None, "timeout" | "cancelled").

    Raises:
        TransactionFetchError: If the fetch itself fails.
    """
    if deadline is None and cancel is None:
        return await get_transaction_result(client, transaction_id), None

    loop = asyncio.get_running_loop()
    fetch = asyncio.ensure_future(get_transaction_result(client, transaction_id))
    waiters = {fetch}
    cancelled = None
    if cancel is not None:
        cancelled = asyncio.ensure_future(cancel.wait())
        waiters.add(cancelled)
    remaining = None if deadline is None else max(deadline - loop.time(), 0)

    try:
        done, pending = await asyncio.wait(
            waiters, timeout=remaining, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for waiter in waiters:
            if not waiter.done():
                waiter.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)

    if fetch in done:
        return fetch.result(), None
    if cancelled is not None and cancelled in done:
        return None, "cancelled"
    return None, "timeout"


async def wait_for_seal(
    client: Any,
    transaction_id: Union[TransactionId, bytes, str],
    *,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    cancel: Optional[asyncio.Event] = None,
    timeout: Optional[float] = None,
    stop_on_expired: bool = False,
    out: Optional[TextIO] = None,
) -> SealOutcome:
    """
    Wait until the transaction is sealed.

    Args:
        client: An access API client exposing ``get_transaction_result(id=...)``.
        transaction_id: The submitted transaction, as TransactionId, raw bytes or hex.
        poll_interval (float): Seconds to sleep between polls.
        cancel (Optional[asyncio.Event]): Stops the wait when set, including
            mid-sleep and mid-fetch.
        timeout (Optional[float]): Total seconds to wait before giving up,
            including time spent inside fetches.
        stop_on_expired (bool): Treat EXPIRED as a failure instead of polling on.
        out (Optional[TextIO]): Stream for progress output, stdout by default.

    Returns:
        SealOutcome: Sealed with the final result, Failed with the error that
        stopped the wait, or Cancelled with the reason.
    """
    transaction_id = _coerce_transaction_id(transaction_id)
    out = out if out is not None else sys.stdout
    loop = asyncio.get_running_loop()
    deadline = None if timeout is None else loop.time() + timeout

    try:
        result, reason = await _bounded_fetch(client, transaction_id, deadline, cancel)
    except TransactionFetchError as e:
        return Failed(e)
    if reason is not None:
        return Cancelled(transaction_id, reason)

    if result.is_sealed:
        return Sealed(result)

    logger.info("Waiting for transaction %s to be sealed...", transaction_id)
    polled = False

    def _stop(outcome: SealOutcome) -> SealOutcome:
        # Terminate the line of progress dots.
        if polled:
            out.write("\n")
            out.flush()
        return outcome

    while not result.is_sealed:
        if stop_on_expired and result.status is TransactionStatus.EXPIRED:
            return _stop(Failed(TransactionExpiredError(transaction_id, result), result))
        if cancel is not None and cancel.is_set():
            return _stop(Cancelled(transaction_id, "cancelled", result))

        interval = poll_interval
        if deadline is not None:
            remaining = deadline - loop.time()
            if remaining <= 0:
                return _stop(Cancelled(transaction_id, "timeout", result))
            interval = min(interval, remaining)

        if await _sleep(interval, cancel):
            return _stop(Cancelled(transaction_id, "cancelled", result))

        out.write(".")
        out.flush()
        polled = True

        try:
            latest, reason = await _bounded_fetch(client, transaction_id, deadline, cancel)
        except TransactionFetchError as e:
            return _stop(Failed(e, result))
        if reason is not None:
            return _stop(Cancelled(transaction_id, reason, result))
        result = latest

    out.write("\n")
    out.write(f"Transaction {transaction_id} sealed\n")
    out.flush()
    return Sealed(result)


def seal_transaction(
    network: Any,
    transaction_id: Union[TransactionId, bytes, str],
    **kwargs: Any,
) -> TransactionResult:
    """
    Blocking convenience: connect to `network`, wait for the seal and return the result.

    Args:
        network: A Network member or a "host:port" endpoint.
        transaction_id: The submitted transaction.
        **kwargs: Forwarded to wait_for_seal.

    Returns:
        TransactionResult: The sealed result.

    Raises:
        TransactionFetchError, TransactionExpiredError, SealWaitCancelled:
            When the wait does not end in a seal.
    """
    from flow_txn_helper.client import new_client

    async def _run() -> SealOutcome:
        async with new_client(network) as client:
            return await wait_for_seal(client, transaction_id, **kwargs)

    return asyncio.run(_run()).unwrap()
