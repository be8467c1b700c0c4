"""Fixed labelled dataset the odor classifier is fitted on at startup.

Row order matters: Keras takes the validation hold-out from the tail of the
arrays, so the last four rows are never used for weight updates.
"""

from __future__ import annotations

from typing import Tuple

from models.records import TrainingExample

_CLEAN = 0
_ODOR = 1

TRAINING_EXAMPLES: Tuple[TrainingExample, ...] = (
    TrainingExample(features=(150.0, 25.0, 60.0), label=_CLEAN),
    TrainingExample(features=(200.0, 26.0, 65.0), label=_CLEAN),
    TrainingExample(features=(300.0, 27.0, 70.0), label=_CLEAN),
    TrainingExample(features=(250.0, 28.0, 55.0), label=_CLEAN),
    TrainingExample(features=(180.0, 24.0, 58.0), label=_CLEAN),
    TrainingExample(features=(220.0, 25.0, 62.0), label=_CLEAN),
    TrainingExample(features=(280.0, 26.0, 68.0), label=_CLEAN),
    TrainingExample(features=(190.0, 27.0, 63.0), label=_CLEAN),
    TrainingExample(features=(500.0, 28.0, 72.0), label=_CLEAN),
    TrainingExample(features=(450.0, 29.0, 75.0), label=_CLEAN),
    TrainingExample(features=(600.0, 30.0, 78.0), label=_CLEAN),
    TrainingExample(features=(550.0, 31.0, 80.0), label=_CLEAN),
    TrainingExample(features=(800.0, 30.0, 80.0), label=_ODOR),
    TrainingExample(features=(900.0, 31.0, 85.0), label=_ODOR),
    TrainingExample(features=(1000.0, 32.0, 90.0), label=_ODOR),
    TrainingExample(features=(1200.0, 33.0, 95.0), label=_ODOR),
    TrainingExample(features=(750.0, 29.0, 82.0), label=_ODOR),
    TrainingExample(features=(850.0, 30.0, 88.0), label=_ODOR),
    TrainingExample(features=(950.0, 31.0, 92.0), label=_ODOR),
    TrainingExample(features=(1100.0, 32.0, 94.0), label=_ODOR),
)
