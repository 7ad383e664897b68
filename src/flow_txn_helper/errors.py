"""
errors.py
~~~~~~~~~

Exception types raised by flow_txn_helper.
"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from flow_txn_helper.transaction.transaction_id import TransactionId
    from flow_txn_helper.transaction.transaction_result import TransactionResult


class FlowHelperError(Exception):
    """Base class for all helper errors."""


class ConfigError(FlowHelperError):
    """Raised when flow.json is missing, malformed or lacks a requested entry."""


class AccountError(FlowHelperError):
    """Raised when an account cannot be resolved into a usable signer."""


class TransactionFetchError(FlowHelperError):
    """
    Raised (or carried by a Failed outcome) when fetching a transaction result fails.

    The underlying SDK exception is kept as ``__cause__``.
    """

    def __init__(self, transaction_id: "TransactionId", message: str) -> None:
        super().__init__(f"Failed to fetch result for transaction {transaction_id}: {message}")
        self.transaction_id = transaction_id


class TransactionExpiredError(FlowHelperError):
    """Raised when a transaction expires before it is sealed."""

    def __init__(self, transaction_id: "TransactionId", result: "TransactionResult") -> None:
        super().__init__(f"Transaction {transaction_id} expired before being sealed")
        self.transaction_id = transaction_id
        self.result = result


class SealWaitCancelled(FlowHelperError):
    """Raised when unwrapping a wait that was cancelled or timed out."""

    def __init__(
        self,
        transaction_id: "TransactionId",
        reason: str,
        last_result: Optional["TransactionResult"] = None,
    ) -> None:
        super().__init__(f"Stopped waiting for transaction {transaction_id} to be sealed ({reason})")
        self.transaction_id = transaction_id
        self.reason = reason
        self.last_result = last_result
