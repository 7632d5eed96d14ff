"""Data models for Bitcoin Well and Koinly transactions."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

# Placeholder the Bitcoin Well export uses for "not applicable"
PLACEHOLDER = "-"

# Bitcoin Well column name -> SourceRecord attribute
SOURCE_COLUMNS: dict[str, str] = {
    "Transaction ID": "transaction_id",
    "Order Type": "order_type",
    "Network": "network",
    "Order Status": "order_status",
    "Order Date": "order_date",
    "Fiat Amount": "fiat_amount",
    "Fiat Code": "fiat_currency_code",
    "Crypto Amount": "crypto_amount",
    "Crypto Code": "crypto_currency_code",
    "Miner Fee": "miner_fee",
    "Rate": "rate",
    "Receiving Address": "receiving_address",
    "Transaction Hash": "transaction_hash",
    "Fail reason": "fail_reason",
}


class OrderCategory(Enum):
    """Semantic category of a Bitcoin Well order."""

    BUY = "Buy"
    SELL = "Sell"
    OTHER = "Other"


@dataclass(frozen=True)
class SourceRecord:
    """One transaction row from a Bitcoin Well export.

    All values are kept as the strings delivered by the export.
    """

    transaction_id: str = ""
    order_type: str = ""
    network: str = ""
    order_status: str = ""
    order_date: str = ""
    fiat_amount: str = ""
    fiat_currency_code: str = ""
    crypto_amount: str = ""
    crypto_currency_code: str = ""
    miner_fee: str = ""
    rate: str = ""
    receiving_address: str = ""
    transaction_hash: str = ""
    fail_reason: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, str | None]) -> "SourceRecord":
        """Build a record from a header-keyed row.

        Missing columns and None values are read as empty strings.
        """
        values = {attr: row.get(column) or "" for column, attr in SOURCE_COLUMNS.items()}
        return cls(**values)

    @property
    def order_type_key(self) -> str:
        """Lower-cased order type used for keyword matching."""
        return self.order_type.lower()

    @property
    def is_swap(self) -> bool:
        """Return True if this is a swap order."""
        return "swap" in self.order_type_key


@dataclass(frozen=True)
class TargetRecord:
    """One row of a Koinly universal CSV import."""

    date: str
    sent_amount: str = ""
    sent_currency: str = ""
    received_amount: str = ""
    received_currency: str = ""
    fee_amount: str = ""
    fee_currency: str = ""
    net_worth_amount: str = ""
    net_worth_currency: str = ""
    label: str = ""
    description: str = ""
    tx_hash: str = ""
