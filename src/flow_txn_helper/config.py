"""
config.py
~~~~~~~~~

Reads account key material, network endpoints and contract sources from a
flow.json file.

Example:

    {
      "networks": {"testnet": "access.devnet.nodes.onflow.org:9000"},
      "accounts": {
        "testnet-admin": {"address": "0x01cf0e2f2f715450", "key": "$ADMIN_KEY"}
      },
      "contracts": {"HelloWorld": "./cadence/HelloWorld.cdc"}
    }

Keys may also be given in object form:

    {"type": "hex", "index": 0, "privateKey": "...", "hashAlgorithm": "SHA3_256"}
"""
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from flow_py_sdk import HashAlgo

from flow_txn_helper.account import check_signature_algorithm, hash_algo_from_name
from flow_txn_helper.address import Address
from flow_txn_helper.client import Network, resolve_endpoint
from flow_txn_helper.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./flow.json"
DEFAULT_ACCOUNT = "testnet-admin"


def config_exists(path: Union[str, Path]) -> bool:
    """Return True if `path` exists."""
    return Path(path).exists()


def _resolve_env(value: str, field_name: str) -> str:
    if value.startswith("$"):
        var = value[1:]
        resolved = os.getenv(var)
        if resolved is None:
            raise ConfigError(f"{field_name} refers to ${var}, which is not set")
        return resolved
    return value


@dataclass
class AccountEntry:
    """An account from the `accounts` section."""

    name: str
    address: Address
    key: str
    key_index: int = 0
    hash_algorithm: Optional[str] = None
    signature_algorithm: Optional[str] = None

    @property
    def hash_algo(self) -> Optional[HashAlgo]:
        """The configured hash algorithm, or None to accept the on-chain one."""
        if self.hash_algorithm is None:
            return None
        return hash_algo_from_name(self.hash_algorithm)

    @classmethod
    def _from_json(cls, name: str, data: Any) -> "AccountEntry":
        if not isinstance(data, dict):
            raise ConfigError(f"Account '{name}' must be an object")

        address = data.get("address")
        if not isinstance(address, str) or not address:
            raise ConfigError(f"Account '{name}' has no address")
        try:
            parsed_address = Address.from_string(_resolve_env(address, f"accounts.{name}.address"))
        except ValueError as e:
            raise ConfigError(f"Account '{name}' has an invalid address: {e}") from e

        key = data.get("key")
        if isinstance(key, str):
            return cls(name=name, address=parsed_address, key=_resolve_env(key, f"accounts.{name}.key"))
        if isinstance(key, dict):
            private_key = key.get("privateKey")
            if not isinstance(private_key, str) or not private_key:
                raise ConfigError(f"Account '{name}' key has no privateKey")
            index = key.get("index", 0)
            try:
                key_index = int(index)
            except (TypeError, ValueError):
                raise ConfigError(f"Account '{name}' key index must be an integer, got {index!r}") from None
            if key_index < 0:
                raise ConfigError(f"Account '{name}' key index must not be negative, got {key_index}")

            hash_algorithm = key.get("hashAlgorithm")
            signature_algorithm = key.get("signatureAlgorithm")
            try:
                if hash_algorithm is not None:
                    hash_algorithm = hash_algo_from_name(hash_algorithm).name
                if signature_algorithm is not None:
                    signature_algorithm = check_signature_algorithm(signature_algorithm)
            except ValueError as e:
                raise ConfigError(f"Account '{name}': {e}") from e

            return cls(
                name=name,
                address=parsed_address,
                key=_resolve_env(private_key, f"accounts.{name}.key.privateKey"),
                key_index=key_index,
                hash_algorithm=hash_algorithm,
                signature_algorithm=signature_algorithm,
            )
        raise ConfigError(f"Account '{name}' has no key")


@dataclass
class FlowConfig:
    """Parsed flow.json."""

    path: Path
    accounts: Dict[str, AccountEntry] = field(default_factory=dict)
    networks: Dict[str, str] = field(default_factory=dict)
    contracts: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "FlowConfig":
        """
        Load configuration from `path`, $FLOW_CONFIG_PATH, or ./flow.json.

        Raises:
            ConfigError: If the file is missing or malformed.
        """
        if path is None:
            path = os.getenv("FLOW_CONFIG_PATH", DEFAULT_CONFIG_PATH)
        path = Path(path)

        if not config_exists(path):
            raise ConfigError(f"{path} not found")

        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load config from {path}: {e}") from e

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data, path=path)

    @classmethod
    def from_dict(cls, data: Any, path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> "FlowConfig":
        if not isinstance(data, dict):
            raise ConfigError("Config root must be an object")

        accounts = data.get("accounts") or {}
        networks = data.get("networks") or {}
        contracts = data.get("contracts") or {}
        for section, value in (("accounts", accounts), ("networks", networks), ("contracts", contracts)):
            if not isinstance(value, dict):
                raise ConfigError(f"'{section}' must be an object")

        parsed_networks: Dict[str, str] = {}
        for name, endpoint in networks.items():
            # flow-cli also allows {"host": ..., "key": ...}
            if isinstance(endpoint, dict):
                endpoint = endpoint.get("host")
            if not isinstance(endpoint, str):
                raise ConfigError(f"Network '{name}' must be a 'host:port' string")
            parsed_networks[name] = endpoint

        return cls(
            path=Path(path),
            accounts={name: AccountEntry._from_json(name, entry) for name, entry in accounts.items()},
            networks=parsed_networks,
            contracts={name: str(src) for name, src in contracts.items()},
        )

    def account(self, name: Optional[str] = None) -> AccountEntry:
        """
        Return the named account, defaulting to $FLOW_ACCOUNT or "testnet-admin".
        """
        if name is None:
            name = os.getenv("FLOW_ACCOUNT", DEFAULT_ACCOUNT)
        try:
            return self.accounts[name]
        except KeyError:
            raise ConfigError(f"Account '{name}' not found in {self.path}") from None

    def endpoint(self, network: Union[Network, str]) -> str:
        """
        Return "host:port" for `network`, preferring the file's `networks` section.
        """
        name = network.name.lower() if isinstance(network, Network) else network
        if name in self.networks:
            return self.networks[name]
        try:
            return resolve_endpoint(network)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def read_contract(self, name: str) -> str:
        """Read a contract's source, resolved relative to the config file."""
        try:
            source = self.contracts[name]
        except KeyError:
            raise ConfigError(f"Contract '{name}' not found in {self.path}") from None

        contract_path = Path(source)
        if not contract_path.is_absolute():
            contract_path = self.path.parent / contract_path
        try:
            return contract_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read contract '{name}' from {contract_path}: {e}") from e
