"""Validation behaviour of the device payload schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.schemas import IngestRequest, describe_validation_error
from models.records import Reading


def test_ingest_request_maps_mq_to_gas_level() -> None:
    request = IngestRequest.model_validate({"mq": "410.5", "temperature": 28, "humidity": 70.2})

    assert request.to_reading() == Reading(gas_level=410.5, temperature=28.0, humidity=70.2)


def test_missing_fields_are_named() -> None:
    with pytest.raises(ValidationError) as exc_info:
        IngestRequest.model_validate({"temperature": 25})

    message = describe_validation_error(exc_info.value)
    assert message.startswith("Incomplete sensor data")
    assert "mq" in message
    assert "humidity" in message


@pytest.mark.parametrize(
    "payload",
    [
        {"mq": "abc", "temperature": 25, "humidity": 60},
        {"mq": None, "temperature": 25, "humidity": 60},
        {"mq": float("nan"), "temperature": 25, "humidity": 60},
        {"mq": 150, "temperature": float("inf"), "humidity": 60},
        {"mq": True, "temperature": 25, "humidity": 60},
        {"mq": 150, "temperature": 25, "humidity": False},
    ],
)
def test_non_numeric_values_are_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError) as exc_info:
        IngestRequest.model_validate(payload)

    assert describe_validation_error(exc_info.value).startswith("Invalid sensor data")
