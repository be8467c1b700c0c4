"""Runs the odor classifier with a deterministic rule-based fallback."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Optional, Protocol

from models.records import PredictionResult
from services.classifier import InferenceError, OdorClassifier

logger = logging.getLogger(__name__)

ODOR_CONFIDENCE_THRESHOLD = 0.5

FALLBACK_HIGH_GAS_THRESHOLD = 700.0
FALLBACK_MILD_GAS_THRESHOLD = 400.0


class Trainer(Protocol):
    def train(self) -> OdorClassifier: ...


def fallback_prediction(gas_level: float) -> PredictionResult:
    """Threshold policy used whenever the classifier is unavailable or fails."""
    if gas_level > FALLBACK_HIGH_GAS_THRESHOLD:
        return PredictionResult(label=1, confidence=0.95)
    if gas_level > FALLBACK_MILD_GAS_THRESHOLD:
        return PredictionResult(label=0, confidence=0.85)
    return PredictionResult(label=0, confidence=0.90)


def _round_confidence(confidence: float) -> float:
    # Half-up rounding to two decimals; confidence is already within [0, 1].
    return int(confidence * 100 + 0.5) / 100


class Predictor:
    """Owns the classifier lifecycle: one training run, shared by every caller."""

    def __init__(self, trainer: Trainer) -> None:
        self.trainer = trainer
        self.executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="classifier-training")
        self._training: Optional[Future[Optional[OdorClassifier]]] = None
        self._training_lock = Lock()

    def warm_up(self) -> Future[Optional[OdorClassifier]]:
        """Start training in the background if it has not been started yet."""
        with self._training_lock:
            if self._training is None:
                self._training = self.executor.submit(self._train)
            return self._training

    @property
    def ready(self) -> bool:
        with self._training_lock:
            training = self._training
        return training is not None and training.done() and training.result() is not None

    def predict(self, gas_level: float, temperature: float, humidity: float) -> PredictionResult:
        classifier = self.warm_up().result()
        if classifier is None:
            return fallback_prediction(gas_level)

        try:
            confidence = classifier.predict_confidence(gas_level, temperature, humidity)
        except InferenceError as exc:
            logger.warning(
                "Inference failed; using threshold fallback",
                extra={"gas_level": gas_level, "reason": str(exc)},
            )
            return fallback_prediction(gas_level)

        label = 1 if confidence > ODOR_CONFIDENCE_THRESHOLD else 0
        return PredictionResult(label=label, confidence=_round_confidence(confidence))

    def shutdown(self) -> None:
        self.executor.shutdown(wait=False, cancel_futures=True)

    def _train(self) -> Optional[OdorClassifier]:
        try:
            return self.trainer.train()
        except Exception:  # noqa: BLE001 - any trainer failure disables the classifier
            logger.exception("Classifier unavailable; predictions will use threshold fallback")
            return None
