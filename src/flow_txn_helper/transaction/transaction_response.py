"""
transaction_response.py
~~~~~~~~~~~~~~~~~~~~~~~

Represents a transaction submitted to the Flow network.
Provides methods to fetch its result and to wait for it to be sealed.
"""
import logging
from typing import Any, Optional

from flow_txn_helper.transaction.seal_waiter import (
    SealOutcome,
    get_transaction_result,
    wait_for_seal,
)
from flow_txn_helper.transaction.transaction_id import TransactionId
from flow_txn_helper.transaction.transaction_result import TransactionResult

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

class TransactionResponse:
    """
    Represents the response from a transaction submitted to the network.
    """

    def __init__(self, transaction_id: TransactionId, transaction: Optional[Any] = None) -> None:
        """
        Args:
            transaction_id (TransactionId): The ID the network assigned to the transaction.
            transaction: The submitted transaction, if known.
        """
        self.transaction_id: TransactionId = transaction_id
        self.transaction: Optional[Any] = transaction

    async def get_result(self, client: Any) -> TransactionResult:
        """
        Fetch the current result of this transaction.

        Args:
            client: The access API client.

        Returns:
            TransactionResult: The current snapshot, sealed or not.
        """
        return await get_transaction_result(client, self.transaction_id)

    async def wait_for_seal(self, client: Any, **kwargs: Any) -> SealOutcome:
        """
        Wait for this transaction to be sealed.

        Args:
            client: The access API client.
            **kwargs: Forwarded to seal_waiter.wait_for_seal (poll_interval, cancel, timeout, ...).

        Returns:
            SealOutcome: Sealed, Failed or Cancelled.
        """
        return await wait_for_seal(client, self.transaction_id, **kwargs)

    def __repr__(self) -> str:
        return f"TransactionResponse(transaction_id={self.transaction_id})"


async def submit_transaction(client: Any, transaction: Any) -> TransactionResponse:
    """
    Send a signed transaction to the access node.

    Args:
        client: The access API client.
        transaction: A signed flow_py_sdk Tx.

    Returns:
        TransactionResponse: Handle carrying the assigned transaction ID.
    """
    response = await client.send_transaction(transaction=transaction.to_signed_grpc())
    transaction_id = TransactionId.from_bytes(response.id)
    logger.info("Submitted transaction %s", transaction_id)
    return TransactionResponse(transaction_id, transaction)
