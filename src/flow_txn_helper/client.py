"""
client.py
~~~~~~~~~

Constructors for access-node clients bound to a fixed network endpoint, and
sessions pairing a client with a resolved signing account.
"""
import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterator, Optional, Tuple, Union, TYPE_CHECKING

from flow_py_sdk import flow_client

from flow_txn_helper.account import ResolvedAccount, resolve_account
from flow_txn_helper.address import Address

if TYPE_CHECKING:
    from flow_txn_helper.config import FlowConfig

logger = logging.getLogger(__name__)


class Network(Enum):
    """Flow networks with their public access-node endpoints."""

    EMULATOR = "127.0.0.1:3569"
    TESTNET = "access.devnet.nodes.onflow.org:9000"
    MAINNET = "access.mainnet.nodes.onflow.org:9000"

    @property
    def endpoint(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Network":
        """Look up a network by case-insensitive name, e.g. "testnet"."""
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(
                f"Unknown network '{name}', expected one of: "
                f"{', '.join(n.name.lower() for n in cls)}"
            ) from exc


def _parse_endpoint(endpoint: str) -> Tuple[str, int]:
    host, sep, port_str = endpoint.strip().rpartition(":")
    if not sep or not host:
        raise ValueError(f"Endpoint must be 'host:port', got: '{endpoint}'")
    try:
        port = int(port_str)
    except ValueError as exc:
        raise ValueError(f"Endpoint port must be a valid integer, got: '{port_str}'") from exc
    if not (1 <= port <= 65535):
        raise ValueError(f"Endpoint port must be between 1 and 65535, got: {port}")
    return host, port


def resolve_endpoint(network: Union[Network, str]) -> str:
    """
    Return the "host:port" endpoint for a Network, a network name or an endpoint string.
    """
    if isinstance(network, Network):
        return network.endpoint
    if ":" in network:
        return network
    return Network.from_name(network).endpoint


def new_client(network: Union[Network, str]):
    """
    Create an access API client for a network.

    The returned object is an async context manager; the connection is opened
    on entry and closed on exit:

        async with new_client(Network.TESTNET) as client:
            ...

    Args:
        network: A Network member, a network name, or a "host:port" endpoint.
    """
    host, port = _parse_endpoint(resolve_endpoint(network))
    logger.debug("Creating access client for %s:%d", host, port)
    return flow_client(host=host, port=port)


def new_emulator_client():
    """Client bound to the local emulator."""
    return new_client(Network.EMULATOR)


def new_testnet_client():
    """Client bound to the public testnet access node."""
    return new_client(Network.TESTNET)


def new_mainnet_client():
    """Client bound to the mainnet access node."""
    return new_client(Network.MAINNET)


async def get_reference_block_id(client: Any) -> bytes:
    """
    Return the ID of the latest sealed block, for use as a transaction's reference block.
    """
    block = await client.get_latest_block(is_sealed=True)
    return block.id


@dataclass(frozen=True)
class Session:
    """An open client together with the account that signs through it."""

    client: Any
    account: ResolvedAccount

    @property
    def address(self) -> Address:
        return self.account.address

    @property
    def account_key(self) -> Any:
        return self.account.account_key

    @property
    def signer(self) -> Any:
        return self.account.signer


@asynccontextmanager
async def open_session(
    network: Union[Network, str],
    key: str,
    address: Union[Address, str],
    key_index: int = 0,
    hash_algo: Optional[Any] = None,
) -> AsyncIterator[Session]:
    """
    Open a client for `network` and resolve the signing account on it.

    Args:
        network: A Network member, a network name, or a "host:port" endpoint.
        key (str): Hex-encoded ECDSA P-256 private key.
        address: The account address.
        key_index (int): Which of the account's keys the private key belongs to.
        hash_algo: Expected HashAlgo of the key, checked against the on-chain record.

    Yields:
        Session: The client and the resolved account.
    """
    async with new_client(network) as client:
        account = await resolve_account(
            client, key, address, key_index=key_index, hash_algo=hash_algo
        )
        yield Session(client=client, account=account)


def emulator_session(key: str, address: Union[Address, str]):
    return open_session(Network.EMULATOR, key, address)


def testnet_session(key: str, address: Union[Address, str]):
    return open_session(Network.TESTNET, key, address)


def mainnet_session(key: str, address: Union[Address, str]):
    return open_session(Network.MAINNET, key, address)


def session_from_config(
    config: Optional["FlowConfig"] = None,
    network: Optional[Union[Network, str]] = None,
    account: Optional[str] = None,
):
    """
    Open a session using the account and endpoint configured in flow.json.

    Args:
        config (Optional[FlowConfig]): Loaded configuration; read from disk when omitted.
        network: Target network; defaults to $FLOW_NETWORK or testnet.
        account (Optional[str]): Account name in flow.json; defaults to $FLOW_ACCOUNT
            or "testnet-admin".
    """
    from flow_txn_helper.config import FlowConfig

    if config is None:
        config = FlowConfig.load()
    if network is None:
        network = os.getenv("FLOW_NETWORK", "testnet")

    entry = config.account(account)
    return open_session(
        config.endpoint(network),
        entry.key,
        entry.address,
        key_index=entry.key_index,
        hash_algo=entry.hash_algo,
    )
