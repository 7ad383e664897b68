"""Helpers for configuring Flow accounts, submitting transactions and waiting for seals."""
from flow_txn_helper.account import (
    ResolvedAccount,
    new_account_key,
    random_private_key,
    resolve_account,
)
from flow_txn_helper.address import Address
from flow_txn_helper.client import (
    Network,
    Session,
    emulator_session,
    get_reference_block_id,
    mainnet_session,
    new_client,
    new_emulator_client,
    new_mainnet_client,
    new_testnet_client,
    open_session,
    session_from_config,
    testnet_session,
)
from flow_txn_helper.config import FlowConfig, config_exists
from flow_txn_helper.errors import (
    AccountError,
    ConfigError,
    FlowHelperError,
    SealWaitCancelled,
    TransactionExpiredError,
    TransactionFetchError,
)
from flow_txn_helper.formatting import (
    block_timestamp,
    format_block,
    format_transaction,
    format_transaction_result,
    print_block,
    print_transaction,
    print_transaction_result,
)
from flow_txn_helper.transaction import (
    Cancelled,
    Failed,
    SealOutcome,
    Sealed,
    TransactionId,
    TransactionResponse,
    TransactionResult,
    TransactionStatus,
    get_transaction_result,
    seal_transaction,
    submit_transaction,
    wait_for_seal,
)

__version__ = "0.1.0"

__all__ = [
    "AccountError",
    "Address",
    "Cancelled",
    "ConfigError",
    "Failed",
    "FlowConfig",
    "FlowHelperError",
    "Network",
    "ResolvedAccount",
    "SealOutcome",
    "SealWaitCancelled",
    "Sealed",
    "Session",
    "TransactionExpiredError",
    "TransactionFetchError",
    "TransactionId",
    "TransactionResponse",
    "TransactionResult",
    "TransactionStatus",
    "block_timestamp",
    "config_exists",
    "emulator_session",
    "format_block",
    "format_transaction",
    "format_transaction_result",
    "get_reference_block_id",
    "get_transaction_result",
    "mainnet_session",
    "new_account_key",
    "new_client",
    "new_emulator_client",
    "new_mainnet_client",
    "new_testnet_client",
    "open_session",
    "print_block",
    "print_transaction",
    "print_transaction_result",
    "random_private_key",
    "resolve_account",
    "seal_transaction",
    "session_from_config",
    "submit_transaction",
    "testnet_session",
    "wait_for_seal",
]
