"""
TransactionId class.
"""

ID_LENGTH = 32


class TransactionId:
    """
    Identifier of a submitted transaction: the 32-byte hash of its contents.

    Instances are immutable; the network assigns the value at submission time.
    """

    __slots__ = ("_bytes",)

    def __init__(self, id_bytes: bytes) -> None:
        if not isinstance(id_bytes, (bytes, bytearray)):
            raise TypeError(f"id_bytes must be bytes, got {type(id_bytes).__name__}.")
        if len(id_bytes) != ID_LENGTH:
            raise ValueError(
                f"Transaction ID must be {ID_LENGTH} bytes, got {len(id_bytes)}."
            )
        object.__setattr__(self, "_bytes", bytes(id_bytes))

    def __setattr__(self, name, value):
        raise AttributeError("TransactionId is immutable")

    @classmethod
    def from_string(cls, id_str: str) -> "TransactionId":
        """
        Creates a TransactionId from a hex string, with or without `0x`.

        Raises:
            ValueError: If the string is not 64 hex digits
        """
        if id_str is None or not isinstance(id_str, str):
            raise TypeError(f"id_str must be a string, got {type(id_str).__name__}.")

        value = id_str.strip()
        if value[:2].lower() == "0x":
            value = value[2:]
        try:
            raw = bytes.fromhex(value)
        except ValueError as e:
            raise ValueError(f"Invalid transaction ID string '{id_str}'.") from e
        return cls(raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> "TransactionId":
        return cls(data)

    def to_bytes(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return self._bytes.hex()

    def __repr__(self) -> str:
        return f"TransactionId({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransactionId):
            return False
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)
