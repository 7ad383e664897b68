"""
Lifecycle states reported by the access node for a transaction.
"""
from enum import IntEnum


class TransactionStatus(IntEnum):
    """
    Transaction status codes as defined by the Flow access API.

    The happy path is UNKNOWN -> PENDING -> FINALIZED -> EXECUTED -> SEALED.
    EXPIRED is reached instead when the reference block falls too far behind.
    """

    UNKNOWN = 0
    PENDING = 1
    FINALIZED = 2
    EXECUTED = 3
    SEALED = 4
    EXPIRED = 5

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @property
    def is_sealed(self) -> bool:
        return self is TransactionStatus.SEALED

    def __str__(self) -> str:
        return self.name
