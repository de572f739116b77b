"""Errors raised by the sort engine.

AlreadyRunning and UnknownAlgorithm reach the caller of SortDriver.start_run.
RunCancelled and AttemptCeilingExceeded end a run early; the driver turns
them into a RunOutcome instead of letting them escape.
"""


class SorterError(Exception):
    pass


class AlreadyRunning(SorterError):
    def __init__(self):
        super().__init__("a sort run is already active")


class UnknownAlgorithm(SorterError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown key: {key}")


class RunCancelled(SorterError):
    def __init__(self):
        super().__init__("sort run cancelled")


class AttemptCeilingExceeded(SorterError):
    """Bogo sort used up its shuffle budget. The array may be unsorted."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"gave up after {attempts} attempts")
