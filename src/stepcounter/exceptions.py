__all__ = ['StepCounterError', 'UninitializedError', 'DegenerateInputError', 'MissingColumnError']


class StepCounterError(Exception):
    """ Base class for all errors raised by stepcounter. """


class UninitializedError(StepCounterError, RuntimeError):
    """ Raised when steps are requested before any data was loaded, or when
    the magnitude series is requested before any counting pass. """


class DegenerateInputError(StepCounterError, ValueError):
    """ Raised when there are too few samples (fewer than 2) to compute the
    mean and sample standard deviation of the magnitude series. """


class MissingColumnError(StepCounterError, KeyError):
    """ Raised when the data lacks one of the requested axis columns. """

    def __init__(self, missing, available=None):
        self.missing = list(missing)
        self.available = list(available) if available is not None else None
        super().__init__(self.missing)

    def __str__(self):
        msg = f"Missing column(s) {self.missing}"
        if self.available is not None:
            msg += f". Available columns: {self.available}"
        return msg
