class SankeyEngineError(Exception):
    """Base class for errors raised inside the flow engine."""


class CycleResolutionError(SankeyEngineError):
    """Cycles remained after the configured number of breaking iterations."""

    def __init__(self, iterations: int, remaining_cycle):
        self.iterations = iterations
        self.remaining_cycle = remaining_cycle
        super().__init__(
            f"Cycles remain after {iterations} breaking iterations "
            f"(next cycle: {' -> '.join(map(str, remaining_cycle))})"
        )
