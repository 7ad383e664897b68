"""
Submit a transaction signed by the account configured in flow.json and wait
for it to be sealed.

Account and network come from FLOW_ACCOUNT (default: testnet-admin) and
FLOW_NETWORK (default: testnet); flow.json is read from FLOW_CONFIG_PATH or
the current directory.

python examples/transaction/submit_and_wait.py
"""
import asyncio
import sys

from dotenv import load_dotenv
from flow_py_sdk import ProposalKey, Tx, cadence

from flow_txn_helper import (
    FlowConfig,
    FlowHelperError,
    get_reference_block_id,
    print_block,
    print_transaction,
    print_transaction_result,
    session_from_config,
    submit_transaction,
)

load_dotenv()

HELLO_TRANSACTION = """
transaction {
    prepare(signer: &Account) {
        log(signer.address)
    }
}
"""


async def run() -> None:
    """
    1. Load flow.json and open a session for the configured account.
    2. Build and sign a transaction proposed and paid by that account.
    3. Submit it without waiting, then wait for the seal.
    """
    config = FlowConfig.load()

    async with session_from_config(config) as session:
        client = session.client
        address = cadence.Address.from_hex(session.address.hex())

        latest = await client.get_latest_block(is_sealed=True)
        print_block(latest)

        account = await client.get_account_at_latest_block(address=session.address.to_bytes())
        key = account.keys[session.account.key_index]

        tx = (
            Tx(
                code=HELLO_TRANSACTION,
                reference_block_id=await get_reference_block_id(client),
                payer=address,
                proposal_key=ProposalKey(
                    key_address=address,
                    key_id=session.account.key_index,
                    key_sequence_number=key.sequence_number,
                ),
            )
            .add_authorizers(address)
            .with_envelope_signature(address, session.account.key_index, session.signer)
        )

        response = await submit_transaction(client, tx)
        print_transaction(tx, response.transaction_id)

        result = (await response.wait_for_seal(client, timeout=300)).unwrap()
        print_transaction_result(result)


def main():
    try:
        asyncio.run(run())
    except FlowHelperError as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
