"""
Stepcounter: Count footsteps in accelerometer recordings.

This package estimates the number of steps taken from a pre-recorded 3-axis
accelerometer time-series, by counting the peaks of the acceleration
magnitude that rise above a dynamic threshold (mean + 2 standard deviations).

Main Functions
--------------
StepCounter : Load sensor data, count steps and expose the data for plotting
detect_steps : Count steps in an (n, 3) acceleration array
read_csv : Read a CSV file of sensor readings into a pandas.DataFrame

Modules
-------
counter : The StepCounter class
processing : Magnitude, threshold and peak detection functions
reader : CSV reading and column lookup
exceptions : Errors raised by the package

Examples
--------
>>> import stepcounter
>>> data, info = stepcounter.read_csv("walk.csv")
>>> counter = stepcounter.StepCounter(data)
>>> result = counter.analyze()
>>> result.count
"""

name = "stepcounter"
__version__ = "0.1.0"
__author__ = "Stepcounter developers"
__maintainer__ = "Stepcounter developers"
__maintainer_email__ = "stepcounter@example.org"
__license__ = "MIT"

from stepcounter.counter import StepCounter
from stepcounter.processing import StepResult, detect_steps
from stepcounter.reader import read_csv, get_data_for_columns
from stepcounter.exceptions import (
    StepCounterError,
    UninitializedError,
    DegenerateInputError,
    MissingColumnError,
)
