# Written by Eric J. Whitney, September 2026.

# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to converge or find a
    root.  Additional information (optional) is included to allow the
    reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class NoBracketingError(SolverError):
    """
    Raised when the function values at the ends of an interval do not
    have opposite signs (and neither is zero), so that the interval is
    not known to contain a root.  Attributes `x_lo`, `x_hi`, `f_lo` and
    `f_hi` give the interval and function values that were checked.
    """

    def __init__(self, x_lo, x_hi, f_lo, f_hi, *args, **kwargs):
        if not args:
            args = (f"Function values at endpoints do not have different "
                    f"signs, endpoints: [{x_lo}, {x_hi}], values: "
                    f"[{f_lo}, {f_hi}].",)
        kwargs.setdefault('flag', 1)
        super().__init__(*args, x_lo=x_lo, x_hi=x_hi, f_lo=f_lo, f_hi=f_hi,
                         **kwargs)


class TooManyEvaluationsError(SolverError):
    """
    Raised as soon as a solver attempts to evaluate the function more
    often than its evaluation budget (`max_eval`) allows.
    """

    def __init__(self, max_eval: int, **kwargs):
        kwargs.setdefault('flag', 2)
        kwargs.setdefault('details', "Reached max_eval.")
        super().__init__(f"Maximal count ({max_eval}) exceeded.",
                         max_eval=max_eval, **kwargs)


class ConvergenceError(SolverError):
    """
    Raised when an algorithm stops making progress, e.g. when the
    Regula Falsi bracket fails to shrink.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 3)
        super().__init__(*args, **kwargs)
