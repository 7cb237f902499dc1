from __future__ import annotations

from dataclasses import dataclass, replace

# Written by Eric J. Whitney, September 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class Accuracy:
    """
    Dataclass that holds the convergence tolerances used by a solver.
    See `set_default_accuracy` for full details of each value.
    """
    absolute: float
    relative: float
    function_value: float

    def __post_init__(self):
        """Check certain values"""
        for name in ('absolute', 'relative', 'function_value'):
            if getattr(self, name) < 0:
                raise ValueError(f"Require '{name}' accuracy >= 0.")


# Create single instance and set defaults.
_default_accuracy = Accuracy(
    absolute=1e-6,
    relative=1e-14,
    function_value=0.0
)


# ----------------------------------------------------------------------

def get_default_accuracy() -> Accuracy:
    """
    Returns
    -------
    accuracy : Accuracy
        Returns a copy of the `Accuracy` object used by solvers when no
        accuracy is given at construction.  For a full description of
        each value, see `set_default_accuracy`.
    """
    return replace(_default_accuracy)


# noinspection PyIncorrectDocstring
def set_default_accuracy(**kwargs):
    """
    Set the default accuracies used by solvers constructed after this
    call.  Existing solvers are unaffected.

    Parameters
    ----------
    absolute : float, default = 1e-6
        Absolute accuracy.  Iteration stops once the bracket width (or
        step size) falls below this value.
    relative : float, default = 1e-14
        Relative accuracy, bounding the error in proportion to the
        magnitude of the current estimate.
    function_value : float, default = 0.0
        Iteration may stop as soon as ``abs(f(x))`` is no greater than
        this value, regardless of the bracket width.

    Raises
    ------
    ValueError
        If any accuracy is negative.
    """
    global _default_accuracy
    _default_accuracy = replace(_default_accuracy, **kwargs)


def reset_default_accuracy():
    """Restore the package default accuracies."""
    set_default_accuracy(absolute=1e-6, relative=1e-14, function_value=0.0)
