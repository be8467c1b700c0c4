"""Unit tests for the spray decision policy."""

from __future__ import annotations

import math

import pytest

from services.decision import CLEAN_STATUS, HIGH_ODOR_STATUS, MILD_ODOR_STATUS, decide


@pytest.mark.parametrize("gas_level", [0.0, 150.0, 400.0, 401.0, 1000.0])
def test_label_one_always_sprays(gas_level: float) -> None:
    outcome = decide(1, gas_level)

    assert outcome.status_text == HIGH_ODOR_STATUS
    assert outcome.spray_active is True


def test_label_zero_above_threshold_is_mild_odor() -> None:
    outcome = decide(0, 400.5)

    assert outcome.status_text == MILD_ODOR_STATUS
    assert outcome.spray_active is False


def test_label_zero_at_threshold_is_clean() -> None:
    outcome = decide(0, 400.0)

    assert outcome.status_text == CLEAN_STATUS
    assert outcome.spray_active is False


def test_label_zero_with_high_gas_does_not_spray() -> None:
    # The classifier has the final word on spraying even when the gas level is high.
    outcome = decide(0, 5000.0)

    assert outcome.status_text == MILD_ODOR_STATUS
    assert outcome.spray_active is False


@pytest.mark.parametrize("label", [0, 1])
@pytest.mark.parametrize("gas_level", [-50.0, 0.0, 399.9, 400.0, 700.0, 700.1, 1e6, math.inf])
def test_spray_follows_label(label: int, gas_level: float) -> None:
    outcome = decide(label, gas_level)

    assert outcome.spray_active == (label == 1)
    assert outcome.status_text in {HIGH_ODOR_STATUS, MILD_ODOR_STATUS, CLEAN_STATUS}


def test_decide_is_deterministic() -> None:
    assert decide(0, 550.0) == decide(0, 550.0)
    assert decide(1, 120.0) == decide(1, 120.0)
