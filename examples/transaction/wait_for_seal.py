"""
Wait for an already submitted transaction to be sealed and print its result.

Reads the network from NETWORK (default: testnet).

python examples/transaction/wait_for_seal.py <transaction-id>
"""
import asyncio
import os
import sys

from dotenv import load_dotenv

from flow_txn_helper import (
    Sealed,
    new_client,
    print_transaction_result,
    wait_for_seal,
)

load_dotenv()

NETWORK_NAME = os.getenv("NETWORK", "testnet").lower()


async def wait(transaction_id: str) -> None:
    """
    Connect to NETWORK_NAME and block until the transaction is sealed or 5 minutes pass.
    """
    print(f"Connecting to Flow {NETWORK_NAME} network!")
    async with new_client(NETWORK_NAME) as client:
        outcome = await wait_for_seal(client, transaction_id, timeout=300)

    if not isinstance(outcome, Sealed):
        print(f"Transaction was not sealed: {outcome}")
        sys.exit(1)

    print_transaction_result(outcome.result)


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)

    try:
        asyncio.run(wait(sys.argv[1]))
    except Exception as exc:
        print(f"Error while waiting for seal: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
