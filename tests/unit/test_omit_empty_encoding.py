"""
Zero-valued optional fields are left out of the encoded form and come back
as zero values when decoded.
"""
import json

import pytest

from tradetypes.schemas import Execution, OptionChain, Quote, Trade
from tradetypes.schemas.base import is_empty_value, is_omit_empty


@pytest.mark.parametrize(
    "model, minimal",
    [
        (Quote, {}),
        (Execution, {"id": "E-1"}),
        (Trade, {"id": "O-1"}),
        (OptionChain, {"underlying": "SPY"}),
    ],
)
def test_zero_valued_optional_fields_round_trip(model, minimal):
    record = model.from_wire(minimal)
    wire = record.to_wire()

    omitted = {
        (field.alias or name)
        for name, field in model.model_fields.items()
        if is_omit_empty(field)
    }
    assert omitted.isdisjoint(wire)

    decoded = model.from_json(json.dumps(wire))
    assert decoded == record
    assert decoded.to_wire() == wire


def test_required_wire_fields_are_kept_when_zero():
    wire = Trade(order_id="O-1").to_wire()
    assert wire == {
        "account": "",
        "broker": "",
        "id": "O-1",
        "symbol": "",
        "size": 0,
        "price": 0.0,
        "executions": [],
        "time": None,
    }


def test_python_names_when_not_encoding_by_alias():
    dumped = Execution(execution_id="E-1", realized_pnl=3.5).model_dump()
    assert dumped["execution_id"] == "E-1"
    assert dumped["realized_pnl"] == 3.5
    assert "option_type" not in dumped


def test_unknown_vendor_keys_are_ignored():
    quote = Quote.from_wire({"bid": 1.0, "vendorSeq": 99182, "time": None})
    assert quote.bid == 1.0
    assert "vendorSeq" not in quote.to_wire()


@pytest.mark.parametrize(
    "value, empty",
    [
        (None, True),
        (0, True),
        (0.0, True),
        (False, True),
        ("", True),
        ([], True),
        ({}, True),
        (0.01, False),
        (True, False),
        ("PUT", False),
        ([0], False),
    ],
)
def test_is_empty_value(value, empty):
    assert is_empty_value(value) is empty
