from types import SimpleNamespace

import pytest

from flow_txn_helper import client as client_module
from flow_txn_helper.address import Address
from flow_txn_helper.account import random_private_key
from flow_txn_helper.client import (
    Network,
    get_reference_block_id,
    new_client,
    new_emulator_client,
    new_mainnet_client,
    new_testnet_client,
    open_session,
    resolve_endpoint,
)
from tests.unit.mock_client import MockAccessClient, mock_flow_client

pytestmark = pytest.mark.unit

ADDRESS = Address.from_string("0xf8d6e0586b0a20c7")


@pytest.fixture
def opened(monkeypatch):
    """Record the endpoints clients are created for."""
    calls = []
    monkeypatch.setattr(client_module, "flow_client", mock_flow_client(MockAccessClient(), calls))
    return calls


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "factory, expected",
    [
        (new_emulator_client, ("127.0.0.1", 3569)),
        (new_testnet_client, ("access.devnet.nodes.onflow.org", 9000)),
        (new_mainnet_client, ("access.mainnet.nodes.onflow.org", 9000)),
    ],
)
async def test_network_constructors_use_fixed_endpoints(opened, factory, expected):
    """Test each network constructor connects to its fixed endpoint."""
    async with factory():
        pass

    assert opened == [expected]


@pytest.mark.asyncio
async def test_new_client_accepts_names_and_endpoints(opened):
    """Test new_client accepts network names and host:port endpoints."""
    async with new_client("Testnet"):
        pass
    async with new_client("localhost:3570"):
        pass

    assert opened == [("access.devnet.nodes.onflow.org", 9000), ("localhost", 3570)]


def test_network_from_name_rejects_unknown():
    """Test an unknown network name is rejected."""
    with pytest.raises(ValueError, match="Unknown network 'devnet'"):
        Network.from_name("devnet")


@pytest.mark.parametrize("endpoint", ["localhost:port", "localhost:0", ":9000"])
def test_new_client_rejects_bad_endpoints(endpoint):
    """Test malformed endpoints are rejected."""
    with pytest.raises(ValueError):
        new_client(endpoint)


def test_resolve_endpoint():
    """Test endpoint resolution for members, names and endpoints."""
    assert resolve_endpoint(Network.EMULATOR) == "127.0.0.1:3569"
    assert resolve_endpoint("mainnet") == "access.mainnet.nodes.onflow.org:9000"
    assert resolve_endpoint("10.0.0.1:9000") == "10.0.0.1:9000"


@pytest.mark.asyncio
async def test_get_reference_block_id_uses_latest_sealed_block():
    """Test the reference block is the latest sealed block."""
    client = MockAccessClient(latest_block=SimpleNamespace(id=b"\x07" * 32))

    assert await get_reference_block_id(client) == b"\x07" * 32


@pytest.mark.asyncio
async def test_open_session_resolves_account(monkeypatch):
    """Test open_session pairs the client with the resolved account."""
    account = SimpleNamespace(keys=[SimpleNamespace(hash_algo=3)])
    fake = MockAccessClient(accounts={ADDRESS.to_bytes(): account})
    opened = []
    monkeypatch.setattr(client_module, "flow_client", mock_flow_client(fake, opened))

    async with open_session(Network.EMULATOR, random_private_key(), ADDRESS) as session:
        assert session.client is fake
        assert session.address == ADDRESS
        assert session.account_key is account.keys[0]
        assert session.signer is session.account.signer

    assert opened == [("127.0.0.1", 3569)]


@pytest.mark.asyncio
async def test_testnet_session_targets_testnet(monkeypatch):
    """Test testnet_session connects to the testnet access node."""
    account = SimpleNamespace(keys=[SimpleNamespace(hash_algo=3)])
    fake = MockAccessClient(accounts={ADDRESS.to_bytes(): account})
    opened = []
    monkeypatch.setattr(client_module, "flow_client", mock_flow_client(fake, opened))

    async with client_module.testnet_session(random_private_key(), str(ADDRESS)) as session:
        assert session.address == ADDRESS

    assert opened == [("access.devnet.nodes.onflow.org", 9000)]
