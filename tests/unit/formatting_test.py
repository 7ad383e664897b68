import io
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from flow_txn_helper.formatting import (
    block_timestamp,
    format_block,
    format_transaction,
    format_transaction_result,
    print_block,
    print_transaction_result,
)
from flow_txn_helper.transaction.transaction_result import TransactionResult
from flow_txn_helper.transaction.transaction_status import TransactionStatus

pytestmark = pytest.mark.unit


@pytest.fixture
def block():
    """A block with a fixed timestamp."""
    return SimpleNamespace(
        id=bytes.fromhex("aa" * 32),
        height=42,
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


def test_format_transaction():
    """Test a transaction is formatted with its fields."""
    tx = SimpleNamespace(
        payer="0x01cf0e2f2f715450",
        proposal_key=SimpleNamespace(key_address="0xf8d6e0586b0a20c7"),
        authorizers=["0x01cf0e2f2f715450", "0xf8d6e0586b0a20c7"],
    )

    text = format_transaction(tx, transaction_id=b"\x01" * 32)

    assert text.startswith("Printing Transaction\n")
    assert f"ID: {'01' * 32}\n" in text
    assert "Payer: 0x01cf0e2f2f715450\n" in text
    assert "Proposal key address: 0xf8d6e0586b0a20c7\n" in text
    assert "Authorizers: [0x01cf0e2f2f715450, 0xf8d6e0586b0a20c7]\n" in text


def test_format_transaction_without_id():
    """Test formatting a transaction that has no ID yet."""
    tx = SimpleNamespace(
        payer="0x01", proposal_key=SimpleNamespace(key_address="0x01"), authorizers=[]
    )

    text = format_transaction(tx)

    assert "ID:" not in text
    assert "Authorizers: []" in text


def test_format_transaction_result():
    """Test a result is formatted with its status and error."""
    result = TransactionResult(status=TransactionStatus.SEALED, error_message="reverted")

    text = format_transaction_result(result)

    assert "Status: SEALED\n" in text
    assert "Error: reverted\n" in text


def test_block_helpers(block):
    """Test block ID and timestamp helpers."""
    assert block_timestamp(block) == "2024-01-02T03:04:05+00:00"
    assert format_block(block) == (
        f"\nID: {'aa' * 32}\nheight: 42\ntimestamp: 2024-01-02T03:04:05+00:00\n\n"
    )


def test_print_helpers_write_to_stream(block):
    """Test the print helpers write to the given stream."""
    out = io.StringIO()

    print_block(block, out=out)
    print_transaction_result(TransactionResult(status=TransactionStatus.PENDING), out=out)

    assert "height: 42" in out.getvalue()
    assert "Status: PENDING" in out.getvalue()
    assert "Error: None" in out.getvalue()
