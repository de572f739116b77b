"""
Steps and the emitter that paces them.

Every algorithm is a generator that yields Step objects. A Step is a
frozen picture of the array at one observable event plus the positions
that event touched. The generator is the only writer of the array; the
emitter and the renderer only read snapshots.

The emitter is the single suspension point of a run: after handing a step
to the renderer it sleeps for the step's delay, and it is where a pending
cancellation ends the run.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import RunCancelled


class StepKind(Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    OVERWRITE = "overwrite"
    HIGHLIGHT = "highlight"
    DONE      = "done"


@dataclass(frozen=True)
class Step:
    """
    kind     : StepKind
    snapshot : tuple, array contents right after the event
    indices  : tuple, positions of interest, first one drives the audio cue
    delay_ms : int, how long the step stays on screen
    """
    kind: StepKind
    snapshot: tuple
    indices: tuple = ()
    delay_ms: int = 10

    @property
    def delay(self) -> float:
        return self.delay_ms / 1000.0


def make_step(kind, arr, indices=(), delay_ms=10) -> Step:
    return Step(kind, tuple(arr), tuple(indices), delay_ms)


def exchange(arr, i, j, delay_ms, *extra) -> Step:
    """
    Swap arr[i] and arr[j] and describe it.
    Exchanging equal values changes nothing visible, so it is reported as
    a COMPARE rather than a SWAP.
    """
    kind = StepKind.SWAP if arr[i] != arr[j] else StepKind.COMPARE
    arr[i], arr[j] = arr[j], arr[i]
    return make_step(kind, arr, (i, j) + extra, delay_ms)


class CancellationToken:
    __slots__ = ('_cancelled',)

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class StepEmitter:
    """
    Deliver steps one at a time, in order, to a render callable.

    render : callable(step), presentation adapter, may be None
    sleep  : callable(seconds), blocks for the step's delay
    token  : CancellationToken, checked before and after every step
    speed  : float, divides every delay
    """

    def __init__(self, render, sleep, token, speed=1.0):
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.render  = render
        self.sleep   = sleep
        self.token   = token
        self.speed   = speed
        self.emitted = 0

    def _check(self):
        if self.token.cancelled:
            raise RunCancelled()

    def emit(self, step: Step, final=False):
        self._check()
        if self.render is not None:
            self.render(step)
        self.emitted += 1
        self.sleep(step.delay / self.speed)
        if not final:
            self._check()
