"""
SortDriver: owns the display array and runs one algorithm at a time.

A run works on a private copy of the array. Each step the algorithm yields
goes through a StepEmitter to the render callable, which is where the run
pauses. When the run ends, however it ends, the copy becomes the new
display array and the running flag is cleared.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum

from .algorithms import get_generator
from .data import generate_data
from .errors import AlreadyRunning, AttemptCeilingExceeded, RunCancelled
from .settings import BOGO_ATTEMPT_CEILING, DONE_DELAY_MS
from .steps import CancellationToken, StepEmitter, StepKind, make_step

logger = logging.getLogger(__name__)


class RunOutcome(Enum):
    SORTED    = "sorted"
    GAVE_UP   = "gave_up"
    CANCELLED = "cancelled"


@dataclass
class RunResult:
    algorithm: str
    outcome: RunOutcome
    array: list
    steps: int
    attempts: int | None = None


class SortDriver:
    def __init__(self, render=None, sleep=time.sleep, speed=1.0, rng=None,
                 attempt_ceiling=BOGO_ATTEMPT_CEILING):
        self.render          = render
        self.sleep           = sleep
        self.speed           = speed
        self.rng             = rng
        self.attempt_ceiling = attempt_ceiling
        self.data: list      = []
        self._running        = False
        self._token          = None

    def is_running(self) -> bool:
        return self._running

    def generate(self, kind: str, size: int) -> bool:
        """Replace the display array. Refused while a run owns it."""
        if self._running:
            logger.debug("Ignoring %s regenerate request: run active", kind)
            return False
        self.data = generate_data(kind, size, self.rng)
        return True

    def cancel_run(self) -> bool:
        if not self._running:
            return False
        logger.info("Cancelling active run")
        self._token.cancel()
        return True

    def start_run(self, key: str, source=None) -> RunResult:
        """
        Run algorithm `key` over a copy of `source` (the display array when
        omitted) and block until it is sorted, gives up, or is cancelled.

        Raises AlreadyRunning if called while another run is active, and
        UnknownAlgorithm for a key outside the registry. Errors raised by
        the algorithm itself propagate after the running flag is cleared.
        """
        if self._running:
            logger.debug("Rejected start of %s: run already active", key)
            raise AlreadyRunning()

        work = list(self.data if source is None else source)
        gen  = get_generator(key, work, self.rng, self.attempt_ceiling)

        token = CancellationToken()
        emitter = StepEmitter(self.render, self.sleep, token, self.speed)
        outcome, attempts = RunOutcome.SORTED, None
        self._running, self._token = True, token
        logger.info("Starting %s on %d values", key, len(work))
        try:
            try:
                for step in gen:
                    emitter.emit(step)
            except AttemptCeilingExceeded as e:
                outcome, attempts = RunOutcome.GAVE_UP, e.attempts
                logger.warning("%s gave up after %d attempts", key, e.attempts)
            finally:
                gen.close()
            if work:
                emitter.emit(make_step(StepKind.DONE, work, (), DONE_DELAY_MS), final=True)
        except RunCancelled:
            outcome = RunOutcome.CANCELLED
        finally:
            self._running, self._token = False, None

        self.data = work
        logger.info("%s finished: %s after %d steps", key, outcome.value, emitter.emitted)
        return RunResult(key, outcome, list(work), emitter.emitted, attempts)
