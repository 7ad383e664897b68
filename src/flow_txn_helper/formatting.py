"""
Human-readable renderings of transactions, transaction results and blocks.
"""
import sys
from typing import Any, Optional, TextIO

from flow_txn_helper.transaction.transaction_result import TransactionResult

BANNER = "================================"


def _hex(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return str(value)


def format_transaction(tx: Any, transaction_id: Optional[Any] = None) -> str:
    """
    Render a transaction's ID, payer, proposer and authorizers.

    Args:
        tx: A transaction exposing ``payer``, ``proposal_key.key_address`` and ``authorizers``.
        transaction_id: The ID to show; omitted from the output when None.
    """
    authorizers = ", ".join(str(a) for a in (tx.authorizers or []))
    lines = ["Printing Transaction", BANNER]
    if transaction_id is not None:
        lines.append(f"ID: {_hex(transaction_id)}")
    lines.extend(
        [
            f"Payer: {tx.payer}",
            f"Proposal key address: {tx.proposal_key.key_address}",
            f"Authorizers: [{authorizers}]",
            BANNER,
        ]
    )
    return "\n".join(lines) + "\n"


def format_transaction_result(result: TransactionResult) -> str:
    return "\n".join(
        [
            "Printing Tx Result",
            BANNER,
            f"Status: {result.status.name}",
            f"Error: {result.error}",
            BANNER,
        ]
    ) + "\n"


def block_timestamp(block: Any) -> str:
    """Return the block timestamp as an ISO-8601 string when it is a datetime."""
    timestamp = block.timestamp
    if hasattr(timestamp, "isoformat"):
        return timestamp.isoformat()
    return str(timestamp)


def format_block(block: Any) -> str:
    return (
        f"\nID: {_hex(block.id)}\n"
        f"height: {block.height}\n"
        f"timestamp: {block_timestamp(block)}\n\n"
    )


def print_transaction(tx: Any, transaction_id: Optional[Any] = None, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_transaction(tx, transaction_id))


def print_transaction_result(result: TransactionResult, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_transaction_result(result))


def print_block(block: Any, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_block(block))
