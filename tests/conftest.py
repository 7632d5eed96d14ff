"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

BITCOINWELL_HEADER = (
    "Transaction ID,Order Type,Network,Order Status,Order Date,Fiat Amount,Fiat Code,"
    "Crypto Amount,Crypto Code,Miner Fee,Rate,Receiving Address,Transaction Hash,Fail reason"
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from any real config.json or LOG_LEVEL."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_config"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def history_file(fixtures_dir: Path) -> Path:
    """Return path to a Bitcoin Well history export with buy, sell, swap and other rows."""
    return fixtures_dir / "bitcoinwell_history.csv"


@pytest.fixture
def bad_date_file(fixtures_dir: Path) -> Path:
    """Return path to an export whose only row has an impossible date."""
    return fixtures_dir / "bitcoinwell_bad_date.csv"


@pytest.fixture
def bitcoinwell_header() -> str:
    """Return the Bitcoin Well export header line."""
    return BITCOINWELL_HEADER


@pytest.fixture
def buy_row() -> dict[str, str]:
    """Return a header-keyed Bitcoin Well buy row."""
    return {
        "Transaction ID": "BW-1",
        "Order Type": "Buy",
        "Network": "Bitcoin",
        "Order Status": "Completed",
        "Order Date": "2024-01-15 10:00:00",
        "Fiat Amount": "100.00",
        "Fiat Code": "CAD",
        "Crypto Amount": "0.0021",
        "Crypto Code": "BTC",
        "Miner Fee": "-",
        "Rate": "47619.05",
        "Receiving Address": "bc1qexampleaddress1",
        "Transaction Hash": "abc123",
    }
