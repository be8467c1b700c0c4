"""Keras feed-forward odor classifier and the trainer that fits it."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from tensorflow import keras

from models.dataset import TRAINING_EXAMPLES
from models.records import TrainingExample

logger = logging.getLogger(__name__)

FEATURE_COUNT = 3


class TrainingError(RuntimeError):
    """Raised when the classifier could not be fitted to a usable state."""


class InferenceError(RuntimeError):
    """Raised when a forward pass fails or yields an unusable output."""


@dataclass(frozen=True)
class TrainingConfig:
    epochs: int = 100
    batch_size: int = 4
    validation_split: float = 0.2
    seed: Optional[int] = None


class OdorClassifier:
    """Read-only wrapper around a fitted Keras model."""

    def __init__(self, model: keras.Model) -> None:
        self._model = model

    def predict_confidence(self, gas_level: float, temperature: float, humidity: float) -> float:
        """Return the sigmoid output for a single reading."""
        batch = np.array([[gas_level, temperature, humidity]], dtype="float32")
        try:
            output = np.asarray(self._model(batch, training=False))
            confidence = float(output.reshape(-1)[0])
        except Exception as exc:
            raise InferenceError(f"Forward pass failed: {exc}") from exc
        if not math.isfinite(confidence) or not 0.0 <= confidence <= 1.0:
            raise InferenceError(f"Classifier produced an invalid confidence: {confidence!r}")
        return confidence


def build_model() -> keras.Model:
    model = keras.Sequential(
        [
            keras.layers.Input(shape=(FEATURE_COUNT,)),
            keras.layers.Dense(10, activation="relu"),
            keras.layers.Dense(5, activation="relu"),
            keras.layers.Dense(1, activation="sigmoid"),
        ]
    )
    model.compile(
        optimizer="adam",
        loss="binary_crossentropy",
        metrics=["accuracy"],
    )
    return model


class KerasTrainer:
    """Fits a fresh classifier on the fixed dataset every time ``train`` is called.

    Callers are responsible for training only once; see ``Predictor``.
    """

    def __init__(
        self,
        examples: Sequence[TrainingExample] = TRAINING_EXAMPLES,
        config: TrainingConfig | None = None,
    ) -> None:
        self.examples = tuple(examples)
        self.config = config or TrainingConfig()

    def train(self) -> OdorClassifier:
        config = self.config
        features = np.array([example.features for example in self.examples], dtype="float32")
        labels = np.array([example.label for example in self.examples], dtype="float32")

        try:
            if config.seed is not None:
                keras.utils.set_random_seed(config.seed)
            model = build_model()
            history = model.fit(
                features,
                labels,
                epochs=config.epochs,
                batch_size=config.batch_size,
                validation_split=config.validation_split,
                verbose=0,
            )
        except Exception as exc:
            raise TrainingError(f"Classifier training failed: {exc}") from exc

        losses = list(history.history.get("loss") or [])
        if not losses or not math.isfinite(float(losses[-1])):
            raise TrainingError("Classifier training diverged: final loss is not finite.")
        if not all(np.all(np.isfinite(weights)) for weights in model.get_weights()):
            raise TrainingError("Classifier training produced non-finite weights.")

        accuracies = history.history.get("accuracy") or [None]
        logger.info(
            "Classifier trained",
            extra={
                "epochs": len(losses),
                "loss": round(float(losses[-1]), 4),
                "accuracy": accuracies[-1],
            },
        )
        return OdorClassifier(model)
