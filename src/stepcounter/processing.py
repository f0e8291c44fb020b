import warnings
from dataclasses import dataclass

import numpy as np
import scipy.signal as signal

from stepcounter.exceptions import DegenerateInputError


__all__ = ['StepResult', 'detect_steps', 'calculate_magnitude', 'calculate_magnitudes',
           'get_threshold', 'find_step_indexes']


@dataclass(frozen=True, eq=False)
class StepResult:
    """
    Everything derived from one step counting pass. All fields come from the
    same magnitude series, so they are always consistent with each other.

    :ivar count: Number of detected steps.
    :ivar step_indexes: Ascending indexes into `magnitudes` where steps were detected.
    :ivar magnitudes: Acceleration magnitude of every sample, for plotting.
    :ivar threshold: Magnitude a peak must exceed to count as a step.
    :ivar mean: Mean of the magnitude series.
    :ivar std: Sample standard deviation (ddof=1) of the magnitude series.
    """

    count: int
    step_indexes: np.ndarray
    magnitudes: np.ndarray
    threshold: float
    mean: float
    std: float

    @property
    def info(self):
        return {
            'NumSamples': len(self.magnitudes),
            'Mean': self.mean,
            'StdDev': self.std,
            'Threshold': self.threshold,
            'NumSteps': self.count,
        }


def detect_steps(xyz, num_std=2):
    """
    Count steps in a 3-axis acceleration time-series. Computes the magnitude
    of each sample, derives the threshold `mean + num_std * std` and counts
    the interior local maxima strictly above it.

    :param xyz: Acceleration array of shape (n, 3), rows in temporal order,
        columns x, y, z.
    :type xyz: numpy.ndarray or array-like
    :param num_std: Number of standard deviations above the mean a peak must
        reach. Defaults to 2.
    :type num_std: int or float, optional
    :return: Step count, step indexes and magnitude series of this pass.
    :rtype: StepResult
    """

    mags = calculate_magnitudes(xyz)
    threshold, info = get_threshold(mags, num_std=num_std)
    step_indexes = find_step_indexes(mags, threshold)

    # Freeze arrays so a shared result can't be modified in place
    mags.flags.writeable = False
    step_indexes.flags.writeable = False

    return StepResult(
        count=len(step_indexes),
        step_indexes=step_indexes,
        magnitudes=mags,
        threshold=threshold,
        mean=info['Mean'],
        std=info['StdDev'],
    )


def calculate_magnitude(x, y, z):
    """ Magnitude of the vector with components x, y and z. """
    return float(np.sqrt(x * x + y * y + z * z))


def calculate_magnitudes(xyz):
    """
    Row-wise magnitude of a 3-axis array.

    :param xyz: Array of shape (n, 3). Column 0 is x, column 1 is y, column 2 is z.
    :type xyz: numpy.ndarray or array-like
    :return: Array of shape (n,) with the magnitude of each row.
    :rtype: numpy.ndarray
    """

    xyz = np.asarray(xyz, dtype=float)
    if xyz.ndim != 2 or xyz.shape[1] != 3:
        raise ValueError(f"Expected an array of shape (n, 3), got {xyz.shape}")

    return np.linalg.norm(xyz, axis=1)


def get_threshold(mags, num_std=2):
    """
    Dynamic step threshold: mean plus `num_std` sample standard deviations
    (Bessel's correction) of the magnitude series. Non-finite values are left
    out of the statistics.

    :param mags: Magnitude series.
    :type mags: numpy.ndarray
    :param num_std: Number of standard deviations above the mean. Defaults to 2.
    :type num_std: int or float, optional
    :return: Threshold and info.
    :rtype: (float, dict)
    """

    if num_std < 0:
        raise ValueError(f"num_std must be non-negative, got {num_std}")

    mags = np.asarray(mags, dtype=float)
    finite = np.isfinite(mags)
    n = int(finite.sum())

    if n < len(mags):
        warnings.warn(f"Ignoring {len(mags) - n} non-finite magnitude value(s) when computing the threshold")

    # mean is undefined for n == 0 and the sample std for n == 1
    if n < 2:
        raise DegenerateInputError(f"Need at least 2 valid samples to compute the threshold, got {n}")

    mean = float(np.mean(mags[finite]))
    std = float(np.std(mags[finite], ddof=1))
    threshold = mean + num_std * std

    info = {
        'Mean': mean,
        'StdDev': std,
        'Threshold': threshold,
    }

    return threshold, info


def find_step_indexes(mags, threshold):
    """
    Indexes of the strict interior local maxima of `mags` that are strictly
    greater than `threshold`. The first and last samples never qualify, and
    neither does a plateau of equal values or a non-finite sample.

    :param mags: Magnitude series.
    :type mags: numpy.ndarray
    :param threshold: Value a peak must exceed.
    :type threshold: float
    :return: Ascending array of indexes.
    :rtype: numpy.ndarray
    """

    mags = np.asarray(mags, dtype=float)

    # mode='clip' compares each edge sample against itself, so edges are never maxima
    peaks = signal.argrelmax(mags, order=1, mode='clip')[0]
    peaks = peaks[np.isfinite(mags[peaks]) & (mags[peaks] > threshold)]

    return peaks.astype(int, copy=False)
