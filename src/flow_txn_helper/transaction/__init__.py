from flow_txn_helper.transaction.seal_waiter import (
    Cancelled,
    Failed,
    SealOutcome,
    Sealed,
    get_transaction_result,
    seal_transaction,
    wait_for_seal,
)
from flow_txn_helper.transaction.transaction_id import TransactionId
from flow_txn_helper.transaction.transaction_response import (
    TransactionResponse,
    submit_transaction,
)
from flow_txn_helper.transaction.transaction_result import TransactionResult
from flow_txn_helper.transaction.transaction_status import TransactionStatus

__all__ = [
    "Cancelled",
    "Failed",
    "SealOutcome",
    "Sealed",
    "TransactionId",
    "TransactionResponse",
    "TransactionResult",
    "TransactionStatus",
    "get_transaction_result",
    "seal_transaction",
    "submit_transaction",
    "wait_for_seal",
]
