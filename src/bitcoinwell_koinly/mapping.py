"""Classify Bitcoin Well orders and map them onto Koinly rows."""

from collections.abc import Iterable, Mapping

from bitcoinwell_koinly.exceptions import MalformedTimestamp
from bitcoinwell_koinly.logger import setup_logger
from bitcoinwell_koinly.models import OrderCategory, SourceRecord, TargetRecord
from bitcoinwell_koinly.utils import clean_optional, to_utc

logger = setup_logger(__name__)


def filter_swaps(records: Iterable[SourceRecord]) -> list[SourceRecord]:
    """Drop swap orders, keeping everything else in input order."""
    kept: list[SourceRecord] = []
    dropped = 0

    for record in records:
        if record.is_swap:
            dropped += 1
            continue
        kept.append(record)

    if dropped:
        logger.debug(f"Dropped {dropped} swap rows")
    return kept


def classify(order_type: str) -> OrderCategory:
    """
    Classify an order type by keyword.

    "buy" wins over "sell"; anything matching neither is OTHER.
    """
    key = order_type.lower()
    if "buy" in key:
        return OrderCategory.BUY
    if "sell" in key:
        return OrderCategory.SELL
    return OrderCategory.OTHER


def convert_row(record: SourceRecord) -> TargetRecord:
    """
    Convert a single Bitcoin Well record to a Koinly row.

    Buys spend fiat to receive crypto, sells the reverse. Any other order
    type is mapped like a buy but keeps its own order type as the label.

    Args:
        record: Source record (swaps already filtered out)

    Returns:
        TargetRecord for the Koinly CSV

    Raises:
        MalformedTimestamp: If the order date cannot be parsed
    """
    category = classify(record.order_type)

    fiat_amount = clean_optional(record.fiat_amount)
    fiat_currency = record.fiat_currency_code
    crypto_amount = record.crypto_amount
    crypto_currency = record.crypto_currency_code

    if category is OrderCategory.SELL:
        sent = (crypto_amount, crypto_currency)
        received = (fiat_amount, fiat_currency)
        label = OrderCategory.SELL.value
    else:
        sent = (fiat_amount, fiat_currency)
        received = (crypto_amount, crypto_currency)
        label = OrderCategory.BUY.value if category is OrderCategory.BUY else record.order_type

    return TargetRecord(
        date=to_utc(record.order_date),
        sent_amount=sent[0],
        sent_currency=sent[1],
        received_amount=received[0],
        received_currency=received[1],
        fee_amount=clean_optional(record.miner_fee),
        # Fee is always charged in the crypto currency, sells included
        fee_currency=crypto_currency,
        label=label,
        tx_hash=record.transaction_hash,
    )


def convert_rows(rows: Iterable[Mapping[str, str | None]]) -> list[TargetRecord]:
    """
    Filter and convert header-keyed rows, preserving order.

    Stops at the first malformed row.

    Args:
        rows: Parsed rows keyed by Bitcoin Well column name

    Returns:
        List of TargetRecord objects, one per non-swap row

    Raises:
        MalformedTimestamp: With the 1-based data row number in details
    """
    records = [SourceRecord.from_row(row) for row in rows]

    targets: list[TargetRecord] = []
    for record in filter_swaps(records):
        try:
            targets.append(convert_row(record))
        except MalformedTimestamp as e:
            # Equal records fail identically, so the first match is the failing row
            e.details["row_number"] = records.index(record) + 1
            e.details.setdefault("transaction_id", record.transaction_id)
            raise

    logger.debug(f"Converted {len(targets)} of {len(records)} rows")
    return targets
