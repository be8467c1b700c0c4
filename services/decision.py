"""Maps a classifier label and the raw gas level to an actuation decision."""

from __future__ import annotations

from models.records import DecisionOutcome

HIGH_ODOR_STATUS = "high odor — spray active"
MILD_ODOR_STATUS = "mild odor"
CLEAN_STATUS = "clean"

MILD_ODOR_GAS_THRESHOLD = 400.0


def decide(label: int, gas_level: float) -> DecisionOutcome:
    """Pure decision policy; the spray only runs when the classifier says odor."""
    if label == 1:
        return DecisionOutcome(status_text=HIGH_ODOR_STATUS, spray_active=True)
    if gas_level > MILD_ODOR_GAS_THRESHOLD:
        return DecisionOutcome(status_text=MILD_ODOR_STATUS, spray_active=False)
    return DecisionOutcome(status_text=CLEAN_STATUS, spray_active=False)
