"""Shared fixtures for tests that run against a local Flow emulator."""
import os
from dataclasses import dataclass
from typing import Any

import pytest
import pytest_asyncio

from flow_txn_helper.client import Network, open_session
from flow_txn_helper.config import FlowConfig

EMULATOR_ACCOUNT = "emulator-account"


@dataclass
class IntegrationEnv:
    client: Any
    session: Any


@pytest_asyncio.fixture
async def env():
    """
    Open a session for the emulator service account configured in flow.json.

    Skips unless FLOW_INTEGRATION=1.
    """
    if os.getenv("FLOW_INTEGRATION") != "1":
        pytest.skip("set FLOW_INTEGRATION=1 to run against a local emulator")

    config = FlowConfig.load()
    entry = config.account(os.getenv("FLOW_ACCOUNT", EMULATOR_ACCOUNT))
    endpoint = config.endpoint(Network.EMULATOR)

    async with open_session(
        endpoint, entry.key, entry.address, key_index=entry.key_index, hash_algo=entry.hash_algo
    ) as session:
        yield IntegrationEnv(client=session.client, session=session)
