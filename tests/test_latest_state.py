"""Unit tests for the in-process latest-state store."""

from __future__ import annotations

import dataclasses
import threading
from datetime import datetime, timezone

import pytest

from datastore.latest_state import WAITING_STATUS, LatestStateStore, initial_state
from models.records import DecisionOutcome, PredictionResult, Reading


def test_initial_state_is_zeroed_and_waiting() -> None:
    created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    store = LatestStateStore(initial=initial_state(created_at))

    state = store.read()

    assert state.reading == Reading(gas_level=0.0, temperature=0.0, humidity=0.0)
    assert state.decision == DecisionOutcome(status_text=WAITING_STATUS, spray_active=False)
    assert state.prediction == PredictionResult(label=0, confidence=0.0)
    assert state.timestamp == created_at


def test_update_replaces_whole_record() -> None:
    store = LatestStateStore()
    stamp = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)

    store.update(
        Reading(gas_level=1000.0, temperature=32.0, humidity=90.0),
        DecisionOutcome(status_text="first", spray_active=True),
        PredictionResult(label=1, confidence=0.95),
        stamp,
    )
    returned = store.update(
        Reading(gas_level=150.0, temperature=25.0, humidity=60.0),
        DecisionOutcome(status_text="second", spray_active=False),
        PredictionResult(label=0, confidence=0.9),
        stamp,
    )

    state = store.read()
    assert state is returned
    assert state.reading.gas_level == 150.0
    assert state.decision.status_text == "second"
    assert state.decision.spray_active is False
    assert state.prediction.label == 0


def test_snapshots_are_immutable() -> None:
    state = LatestStateStore().read()

    with pytest.raises(dataclasses.FrozenInstanceError):
        state.reading = Reading(gas_level=1.0, temperature=1.0, humidity=1.0)  # type: ignore[misc]


def test_concurrent_readers_never_see_mixed_records() -> None:
    store = LatestStateStore()
    stop = threading.Event()
    mismatches: list[object] = []

    def writer() -> None:
        for value in range(500):
            gas = float(value)
            store.update(
                Reading(gas_level=gas, temperature=gas, humidity=gas),
                DecisionOutcome(status_text=str(value), spray_active=value % 2 == 0),
                PredictionResult(label=value % 2, confidence=0.5),
                datetime.now(timezone.utc),
            )
        stop.set()

    def reader() -> None:
        while not stop.is_set():
            state = store.read()
            reading = state.reading
            if state.decision.status_text == WAITING_STATUS:
                continue
            if not (reading.gas_level == reading.temperature == reading.humidity):
                mismatches.append(state)
            if state.decision.status_text != str(int(reading.gas_level)):
                mismatches.append(state)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    writer()
    for thread in threads:
        thread.join(timeout=5)

    assert mismatches == []
