"""Ingest orchestration: classify a reading, decide, and publish the latest state."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Optional

from datastore.latest_state import LatestStateStore
from models.records import LatestState, Reading
from services.classifier import KerasTrainer, OdorClassifier, TrainingConfig
from services.decision import decide
from services.predictor import Predictor
from settings import get_settings

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SensorService:
    """Coordinates the predictor, the decision policy, and the latest-state store."""

    def __init__(
        self,
        predictor: Predictor,
        store: LatestStateStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.predictor = predictor
        self.store = store
        self._clock = clock

    def ingest(self, reading: Reading) -> LatestState:
        """Classify a reading and make it the latest observed state."""
        logger.info(
            "Reading received",
            extra={
                "gas_level": reading.gas_level,
                "temperature": reading.temperature,
                "humidity": reading.humidity,
            },
        )
        prediction = self.predictor.predict(*reading.as_features())
        decision = decide(prediction.label, reading.gas_level)
        state = self.store.update(reading, decision, prediction, self._clock())
        logger.info(
            "Reading classified",
            extra={
                "status": decision.status_text,
                "prediction": prediction.label,
                "confidence": prediction.confidence,
                "spray_active": decision.spray_active,
            },
        )
        return state

    def latest(self) -> LatestState:
        return self.store.read()

    def warm_up(self) -> Future[Optional[OdorClassifier]]:
        return self.predictor.warm_up()

    def shutdown(self) -> None:
        self.predictor.shutdown()


@lru_cache
def build_default_service() -> SensorService:
    """Factory that wires the service with the Keras trainer and shared store."""
    settings = get_settings()
    trainer = KerasTrainer(config=TrainingConfig(seed=settings.model_seed))
    return SensorService(predictor=Predictor(trainer), store=LatestStateStore())
