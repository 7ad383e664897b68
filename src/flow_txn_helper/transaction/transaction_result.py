"""
transaction_result.py
~~~~~~~~~~~~~~~~~~~~~

Point-in-time snapshot of a transaction's processing state, as returned by
the access node for a single result query.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from flow_txn_helper.transaction.transaction_status import TransactionStatus


@dataclass(frozen=True)
class TransactionResult:
    """
    Represents the result of a transaction at the moment it was fetched.

    Attributes:
        status (TransactionStatus): Lifecycle state of the transaction.
        status_code (int): Execution status code, non-zero when execution failed.
        error_message (Optional[str]): Populated only when the transaction failed on-chain.
        events (Tuple[Any, ...]): Events emitted by the transaction, as delivered by the SDK.
    """

    status: TransactionStatus = TransactionStatus.UNKNOWN
    status_code: int = 0
    error_message: Optional[str] = None
    events: Tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_sealed(self) -> bool:
        return self.status is TransactionStatus.SEALED

    @property
    def error(self) -> Optional[str]:
        """The on-chain error, or None when the transaction did not fail."""
        return self.error_message

    @classmethod
    def _from_response(cls, response: Any) -> "TransactionResult":
        """
        Build a snapshot from the SDK's transaction result response.

        Args:
            response: Object exposing ``status``, ``status_code``,
                ``error_message`` and ``events`` attributes.

        Returns:
            TransactionResult: An immutable snapshot of the response.
        """
        events = getattr(response, "events", None) or ()
        return cls(
            status=TransactionStatus(int(response.status)),
            status_code=int(getattr(response, "status_code", 0) or 0),
            error_message=getattr(response, "error_message", None) or None,
            events=tuple(events),
        )
