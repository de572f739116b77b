"""Step-by-step sorting algorithm visualizer."""

from .algorithms import ALGORITHM_KEYS, ALGORITHMS, get_generator
from .driver import RunOutcome, RunResult, SortDriver
from .errors import (
    AlreadyRunning, AttemptCeilingExceeded, RunCancelled, SorterError,
    UnknownAlgorithm,
)
from .steps import CancellationToken, Step, StepEmitter, StepKind

__version__ = "0.1.0"
