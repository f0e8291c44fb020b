import numpy as np
import pandas as pd

from stepcounter import processing as P
from stepcounter.exceptions import UninitializedError
from stepcounter.reader import DEFAULT_COLUMNS, Timer, get_data_for_columns


__all__ = ['StepCounter']


class StepCounter:
    """
    Naive peak-detection step counter.

    A step is an interior sample of the acceleration magnitude series that is
    strictly greater than both neighbours and strictly greater than
    `mean + num_std * std` of the series.

    The counter holds the loaded data and the result of its last pass. Use
    :meth:`analyze` to get the step count, step indexes and magnitude series
    of one pass together. An instance is not meant to be shared between
    threads without external locking.

    :param data: Sensor readings. Either a pandas.DataFrame, an object with a
        `get_data_for_columns(columns)` method, or None to load later with
        :meth:`load`. Defaults to None.
    :param columns: Labels of the x, y and z acceleration columns, in this
        order. Defaults to ['x acc', 'y acc', 'z acc'].
    :type columns: list of str, optional
    :param num_std: Number of standard deviations above the mean a peak must
        reach. Defaults to 2.
    :type num_std: int or float, optional
    :param verbose: Verbosity, defaults to False.
    :type verbose: bool, optional

    Examples
    --------
    >>> counter = StepCounter(data)
    >>> result = counter.analyze()
    >>> result.count, result.step_indexes
    """

    def __init__(self, data=None, columns=None, num_std=2, verbose=False):
        columns = list(columns or DEFAULT_COLUMNS)
        if len(columns) != 3:
            raise ValueError(f"Expected 3 acceleration columns (x, y, z), got {columns}")
        if num_std < 0:
            raise ValueError(f"num_std must be non-negative, got {num_std}")

        self.columns = columns
        self.num_std = num_std
        self.verbose = verbose
        self.data = data
        self.result = None

    def load(self, data):
        """ Replace the loaded data. The result of any previous pass is discarded. """
        self.data = data
        self.result = None

    def analyze(self):
        """
        Run one counting pass over the loaded data.

        :return: Step count, step indexes and magnitude series of this pass.
        :rtype: stepcounter.processing.StepResult
        """

        if self.data is None:
            raise UninitializedError("No data loaded. Use .load(data) first")

        timer = Timer(self.verbose)

        timer.start("Counting steps...")
        xyz = self._get_xyz()
        result = P.detect_steps(xyz, num_std=self.num_std)
        timer.stop()

        self.result = result

        return result

    def count_steps(self):
        """ Number of steps in the loaded data. """
        return self.analyze().count

    def get_step_indexes(self):
        """ Indexes into the magnitude series where steps occur. This runs a
        fresh pass, so it always matches count_steps() on the same data. """
        return self.analyze().step_indexes

    def get_data_for_graphing(self):
        """ Magnitude series of the most recent pass. """
        if self.result is None:
            raise UninitializedError("No steps counted yet. Use .count_steps() or .analyze() first")
        return self.result.magnitudes

    @property
    def info(self):
        """ Summary of the most recent pass, empty if none has run since the last load. """
        if self.result is None:
            return {}
        return self.result.info

    def _get_xyz(self):
        if isinstance(self.data, pd.DataFrame):
            return get_data_for_columns(self.data, self.columns)
        if hasattr(self.data, 'get_data_for_columns'):
            return np.asarray(self.data.get_data_for_columns(self.columns), dtype=float)
        return np.asarray(self.data, dtype=float)
