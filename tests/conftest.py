"""
Pytest configuration and shared fixtures for tradetypes tests.
"""
import os
from datetime import datetime, timezone

import pytest

from tradetypes.config.settings import Settings, ValidationSettings, get_settings
from tradetypes.schemas import (
    Execution,
    OptionChain,
    OptionQuote,
    PutOrCall,
    Quote,
    Trade,
)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the caller's TRADETYPES_* environment."""
    for key in list(os.environ):
        if key.upper().startswith("TRADETYPES_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        _env_file=None,
        environment="testing",
        validation=ValidationSettings(strict=False),
    )


@pytest.fixture
def fill_time():
    return datetime(2025, 1, 17, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_quote(fill_time):
    return Quote(
        bid=101.25,
        bid_size=300,
        bid_exch="ARCA",
        ask=101.30,
        ask_size=200,
        ask_exch="NSDQ",
        last=101.27,
        last_size=100,
        last_time=fill_time,
        volume=1_250_000,
        time=fill_time,
    )


@pytest.fixture
def sample_option_quote(fill_time):
    return OptionQuote(
        underlying="SPY",
        strike=450.0,
        expiration="2025-01-17",
        type=PutOrCall.CALL,
        full_symbol="SPY   250117C00450000",
        open_interest=1200,
        bid=3.10,
        ask=3.20,
        time=fill_time,
        delta=0.52,
        gamma=0.03,
        theta=-0.11,
        vega=0.21,
    )


@pytest.fixture
def sample_chain():
    return OptionChain(
        underlying="SPY",
        multiplier="100",
        exchanges={"CBOE", "AMEX"},
        strikes=[100.0, 105.0, 110.0],
        expirations=["2025-01-17", "2025-02-21"],
    )


@pytest.fixture
def make_execution(fill_time):
    """Factory for equity executions."""
    def _create(execution_id: str = "E-1", size: int = 5, price: float = 10.0, **kwargs) -> Execution:
        return Execution(
            execution_id=execution_id,
            exchange="NYSE",
            size=size,
            price=price,
            commissions=1.0,
            time=fill_time,
            **kwargs,
        )
    return _create


@pytest.fixture
def open_trade(fill_time):
    return Trade(
        account="U1",
        broker="broker-x",
        order_id="O-1",
        symbol="AAPL",
        size=10,
        price=10.0,
        time=fill_time,
    )
