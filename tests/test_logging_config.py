from __future__ import annotations

import logging

from datastore.latest_state import LatestStateStore
from logging_config import ContextualFormatter
from models.records import Reading
from services.classifier import TrainingError
from services.predictor import Predictor
from services.sensor_service import SensorService


class UnavailableTrainer:
    def train(self):
        raise TrainingError("disabled")


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("services.sensor_service", logging.INFO, __file__, 1, "Reading classified", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_sensor_context() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    line = formatter.format(_record(status="clean", prediction=0, spray_active=False, unrelated="x"))

    assert line == "Reading classified | prediction=0 spray_active=False status=clean"


def test_formatter_leaves_plain_records_untouched() -> None:
    assert ContextualFormatter(fmt="%(message)s").format(_record()) == "Reading classified"


def test_ingest_emits_every_sensor_context_key(caplog) -> None:
    service = SensorService(predictor=Predictor(UnavailableTrainer()), store=LatestStateStore())
    formatter = ContextualFormatter(fmt="%(message)s")
    try:
        with caplog.at_level(logging.INFO, logger="services.sensor_service"):
            service.ingest(Reading(gas_level=1000.0, temperature=32.0, humidity=90.0))
    finally:
        service.shutdown()

    lines = " ".join(
        formatter.format(record)
        for record in caplog.records
        if record.name == "services.sensor_service"
    )
    for key in ("gas_level", "temperature", "humidity", "prediction", "confidence", "spray_active", "status"):
        assert f"{key}=" in lines
