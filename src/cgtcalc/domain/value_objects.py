from enum import Enum


class TransactionKind(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    GIFT = "GIFT"

    @property
    def is_disposal(self) -> bool:
        return self in (TransactionKind.SELL, TransactionKind.GIFT)


__all__ = ["TransactionKind"]
