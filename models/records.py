"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Reading:
    """A single sample reported by the sensor device."""

    gas_level: float
    temperature: float
    humidity: float

    def as_features(self) -> Tuple[float, float, float]:
        return (self.gas_level, self.temperature, self.humidity)


@dataclass(frozen=True, slots=True)
class TrainingExample:
    """Labelled feature row; label 1 means odor detected."""

    features: Tuple[float, float, float]
    label: int


@dataclass(frozen=True, slots=True)
class PredictionResult:
    label: int
    confidence: float


@dataclass(frozen=True, slots=True)
class DecisionOutcome:
    status_text: str
    spray_active: bool


@dataclass(frozen=True, slots=True)
class LatestState:
    """Snapshot of the most recent ingest, replaced wholesale on every update."""

    reading: Reading
    decision: DecisionOutcome
    prediction: PredictionResult
    timestamp: datetime
