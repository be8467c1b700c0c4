from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Optional

from models.records import DecisionOutcome, LatestState, PredictionResult, Reading

WAITING_STATUS = "waiting for first reading"


def initial_state(timestamp: Optional[datetime] = None) -> LatestState:
    """State reported before the device has sent anything."""
    return LatestState(
        reading=Reading(gas_level=0.0, temperature=0.0, humidity=0.0),
        decision=DecisionOutcome(status_text=WAITING_STATUS, spray_active=False),
        prediction=PredictionResult(label=0, confidence=0.0),
        timestamp=timestamp or datetime.now(timezone.utc),
    )


class LatestStateStore:
    """In-process holder of the last ingested reading and its outcome."""

    def __init__(self, initial: Optional[LatestState] = None) -> None:
        self._state = initial or initial_state()
        self._lock = Lock()

    def update(
        self,
        reading: Reading,
        decision: DecisionOutcome,
        prediction: PredictionResult,
        timestamp: datetime,
    ) -> LatestState:
        state = LatestState(
            reading=reading,
            decision=decision,
            prediction=prediction,
            timestamp=timestamp,
        )
        with self._lock:
            self._state = state
        return state

    def read(self) -> LatestState:
        with self._lock:
            return self._state
