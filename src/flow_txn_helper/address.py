"""
Address class.
"""

import re

ADDRESS_LENGTH = 8

HEX_REGEX = re.compile(r"^[0-9a-fA-F]*$")


class Address:
    """
    Represents an account address on the Flow network.

    An address is 8 bytes, rendered as `0x` followed by 16 hex digits,
    e.g., `0xf8d6e0586b0a20c7`.
    """

    def __init__(self, address_bytes: bytes = bytes(ADDRESS_LENGTH)) -> None:
        """
        Initialize a new Address instance.
        Args:
            address_bytes (bytes): The raw 8 address bytes.
        """
        if not isinstance(address_bytes, (bytes, bytearray)):
            raise TypeError(
                f"address_bytes must be bytes, got {type(address_bytes).__name__}."
            )
        if len(address_bytes) != ADDRESS_LENGTH:
            raise ValueError(
                f"Address must be {ADDRESS_LENGTH} bytes, got {len(address_bytes)}."
            )
        self._bytes = bytes(address_bytes)

    @classmethod
    def from_string(cls, address_str: str) -> "Address":
        """
        Creates an Address from a hex string.

        The `0x` prefix is optional. An odd number of digits is padded with a
        leading zero, shorter values are left-padded with zero bytes and
        longer values keep their trailing 8 bytes.

        Args:
            address_str (str): Address hex string

        Returns:
            Address: An instance of Address

        Raises:
            TypeError: If the input is not a string
            ValueError: If the string is not hex
        """
        if address_str is None or not isinstance(address_str, str):
            raise TypeError(
                f"address_str must be a string, got {type(address_str).__name__}."
            )

        value = address_str.strip()
        if value[:2].lower() == "0x":
            value = value[2:]

        if not HEX_REGEX.match(value):
            raise ValueError(f"Invalid address string '{address_str}'.")

        if len(value) % 2 == 1:
            value = "0" + value

        return cls.from_bytes(bytes.fromhex(value))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Address":
        """
        Creates an Address from raw bytes, padding or truncating on the left.
        """
        if len(data) > ADDRESS_LENGTH:
            data = data[-ADDRESS_LENGTH:]
        return cls(bytes(ADDRESS_LENGTH - len(data)) + bytes(data))

    def to_bytes(self) -> bytes:
        """Return the raw 8 address bytes."""
        return self._bytes

    def hex(self) -> str:
        """Return the address as hex without the `0x` prefix."""
        return self._bytes.hex()

    def __str__(self) -> str:
        return f"0x{self._bytes.hex()}"

    def __repr__(self) -> str:
        return f"Address({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return False
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)
