"""
account.py
~~~~~~~~~~

Resolve an on-chain account into an (address, account key, signer) triple,
and generate new ECDSA P-256 keys.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import ecdsa
from flow_py_sdk import AccountKey, HashAlgo, InMemorySigner, SignAlgo

from flow_txn_helper.address import Address
from flow_txn_helper.errors import AccountError

logger = logging.getLogger(__name__)

PRIVATE_KEY_LENGTH = 32

# Hash algorithm codes used by the access API for account keys.
_HASH_ALGO_BY_CODE = {
    1: HashAlgo.SHA2_256,
    3: HashAlgo.SHA3_256,
}

_HASH_ALGO_BY_NAME = {
    "SHA2_256": HashAlgo.SHA2_256,
    "SHA3_256": HashAlgo.SHA3_256,
}

# Keys are decoded as P-256 only.
SIGNATURE_ALGORITHM = "ECDSA_P256"


@dataclass(frozen=True)
class ResolvedAccount:
    """
    An account ready to sign transactions.

    Attributes:
        address (Address): The account address.
        account_key: The on-chain key record the private key belongs to.
        signer (InMemorySigner): Signs with the local private key.
        key_index (int): Index of `account_key` within the account's keys.
    """

    address: Address
    account_key: Any
    signer: InMemorySigner
    key_index: int = 0


def _decode_private_key(key_hex: str) -> ecdsa.SigningKey:
    value = key_hex.strip() if isinstance(key_hex, str) else ""
    if value[:2].lower() == "0x":
        value = value[2:]
    try:
        raw = bytes.fromhex(value)
    except ValueError as e:
        raise AccountError("Private key is not valid hex") from e
    if len(raw) != PRIVATE_KEY_LENGTH:
        raise AccountError(
            f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(raw)}"
        )
    try:
        return ecdsa.SigningKey.from_string(raw, curve=ecdsa.NIST256p)
    except (ValueError, ecdsa.MalformedPointError) as e:
        raise AccountError(f"Private key is not a valid ECDSA P-256 key: {e}") from e


def _hash_algo(account_key: Any) -> HashAlgo:
    algo = account_key.hash_algo
    if isinstance(algo, HashAlgo):
        return algo
    try:
        return _HASH_ALGO_BY_CODE[int(algo)]
    except (KeyError, TypeError, ValueError) as e:
        raise AccountError(f"Unsupported hash algorithm on account key: {algo!r}") from e


def hash_algo_from_name(name: str) -> HashAlgo:
    """
    Look up a hash algorithm by its flow.json name, e.g. "SHA3_256".

    Raises:
        ValueError: If the name is not SHA2_256 or SHA3_256.
    """
    try:
        return _HASH_ALGO_BY_NAME[name.strip().upper()]
    except (AttributeError, KeyError):
        raise ValueError(
            f"Unsupported hash algorithm {name!r}, expected one of: "
            f"{', '.join(_HASH_ALGO_BY_NAME)}"
        ) from None


def check_signature_algorithm(name: str) -> str:
    """
    Normalize a flow.json signature algorithm name.

    Raises:
        ValueError: If the algorithm is not ECDSA_P256.
    """
    if not isinstance(name, str) or name.strip().upper() != SIGNATURE_ALGORITHM:
        raise ValueError(
            f"Unsupported signature algorithm {name!r}, only {SIGNATURE_ALGORITHM} is supported"
        )
    return SIGNATURE_ALGORITHM


async def resolve_account(
    client: Any,
    key_hex: str,
    address: Union[Address, str],
    key_index: int = 0,
    hash_algo: Optional[HashAlgo] = None,
) -> ResolvedAccount:
    """
    Pair a locally held private key with the account's on-chain key record.

    Args:
        client: An access API client exposing ``get_account(address=...)``.
        key_hex (str): Hex-encoded ECDSA P-256 private key.
        address: The account address, as Address or hex string.
        key_index (int): Which of the account's keys the private key belongs to.
        hash_algo (Optional[HashAlgo]): Expected hash algorithm of the key; must
            match the on-chain record when given.

    Returns:
        ResolvedAccount: Address, account key and signer.

    Raises:
        AccountError: If the key does not decode, the account has no key at
            `key_index`, or the key's hash algorithm differs from `hash_algo`.
    """
    signing_key = _decode_private_key(key_hex)
    if not isinstance(address, Address):
        address = Address.from_string(address)

    account = await client.get_account(address=address.to_bytes())
    keys = list(getattr(account, "keys", None) or [])
    if not keys:
        raise AccountError(f"Account {address} has no keys")
    if not 0 <= key_index < len(keys):
        raise AccountError(
            f"Account {address} has {len(keys)} key(s), no key at index {key_index}"
        )

    account_key = keys[key_index]
    key_hash_algo = _hash_algo(account_key)
    if hash_algo is not None and hash_algo != key_hash_algo:
        raise AccountError(
            f"Account {address} key {key_index} uses {key_hash_algo.name}, "
            f"configured for {hash_algo.name}"
        )

    signer = InMemorySigner(
        hash_algo=key_hash_algo,
        sign_algo=SignAlgo.ECDSA_P256,
        private_key_hex=signing_key.to_string().hex(),
    )
    logger.debug("Resolved account %s using key %d", address, key_index)
    return ResolvedAccount(
        address=address,
        account_key=account_key,
        signer=signer,
        key_index=key_index,
    )


def random_private_key() -> str:
    """Return a randomly generated ECDSA P-256 private key as hex."""
    return ecdsa.SigningKey.generate(curve=ecdsa.NIST256p).to_string().hex()


def new_account_key(private_key_hex: str, weight: int = 1000) -> AccountKey:
    """
    Build an AccountKey for the public half of `private_key_hex`, hashed with SHA3-256.
    """
    signing_key = _decode_private_key(private_key_hex)
    return AccountKey(
        public_key=signing_key.get_verifying_key().to_string(),
        sign_algo=SignAlgo.ECDSA_P256,
        hash_algo=HashAlgo.SHA3_256,
        weight=weight,
    )
