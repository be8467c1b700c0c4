"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.records import LatestState, Reading


class IngestRequest(BaseModel):
    """Payload posted by the sensor device; ``mq`` is the gas sensor level."""

    mq: float = Field(..., allow_inf_nan=False, description="Gas sensor level.")
    temperature: float = Field(..., allow_inf_nan=False)
    humidity: float = Field(..., allow_inf_nan=False)

    @field_validator("mq", "temperature", "humidity", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # JSON true/false would otherwise be coerced to 1.0/0.0.
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    def to_reading(self) -> Reading:
        return Reading(gas_level=self.mq, temperature=self.temperature, humidity=self.humidity)


class IngestResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str
    prediction: int
    spray_active: bool
    confidence: float
    timestamp: datetime

    @classmethod
    def from_state(cls, state: LatestState) -> "IngestResponse":
        spray_active = state.decision.spray_active
        return cls(
            message="odor detected" if spray_active else "safe",
            prediction=state.prediction.label,
            spray_active=spray_active,
            confidence=state.prediction.confidence,
            timestamp=state.timestamp,
        )


class LatestStateResponse(BaseModel):
    """Dashboard view of the most recent reading."""

    gas_level: float
    temperature: float
    humidity: float
    status: str
    time: datetime
    spray_active: bool
    prediction: int
    confidence: float

    @classmethod
    def from_state(cls, state: LatestState) -> "LatestStateResponse":
        return cls(
            gas_level=state.reading.gas_level,
            temperature=state.reading.temperature,
            humidity=state.reading.humidity,
            status=state.decision.status_text,
            time=state.timestamp,
            spray_active=state.decision.spray_active,
            prediction=state.prediction.label,
            confidence=state.prediction.confidence,
        )


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str
    timestamp: datetime
    environment: str
    version: str


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
    error: Optional[str] = None


def describe_validation_error(exc: ValidationError) -> str:
    """Summarize pydantic errors as a single message for the device."""
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        if error.get("type") == "missing":
            missing.append(field)
        elif field not in invalid:
            invalid.append(field)
    if missing:
        return f"Incomplete sensor data: missing {', '.join(missing)}."
    return f"Invalid sensor data: {', '.join(invalid)} must be finite numbers."
