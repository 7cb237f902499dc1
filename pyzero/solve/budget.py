from pyzero.solve.exception import TooManyEvaluationsError


# Written by Eric J. Whitney, August 2026.

# ======================================================================

class EvaluationBudget:
    """
    Counter of function evaluations with a fixed maximum.  Once the
    maximum is reached the next `increment()` raises
    `TooManyEvaluationsError`.
    """

    def __init__(self, maximum: int):
        if maximum <= 0:
            raise ValueError(f"Evaluation budget must be > 0, got "
                             f"{maximum}.")
        self._maximum = int(maximum)
        self._count = 0

    def __repr__(self):
        return f"EvaluationBudget(count={self._count}, " \
               f"maximum={self._maximum})"

    @property
    def count(self) -> int:
        """Number of evaluations made so far."""
        return self._count

    @property
    def maximum(self) -> int:
        """Maximum number of evaluations permitted."""
        return self._maximum

    @property
    def remaining(self) -> int:
        """Number of evaluations still available."""
        return self._maximum - self._count

    def increment(self, n: int = 1):
        """
        Add `n` evaluations to the count.

        Raises
        ------
        TooManyEvaluationsError
            If the count would exceed the maximum.
        """
        if self._count + n > self._maximum:
            raise TooManyEvaluationsError(self._maximum, count=self._count)
        self._count += n
