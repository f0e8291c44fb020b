import os
import time
import zipfile
import numpy as np
import pandas as pd

from stepcounter.exceptions import MissingColumnError


__all__ = ['read_csv', 'get_data_for_columns', 'DEFAULT_COLUMNS']


DEFAULT_COLUMNS = ['x acc', 'y acc', 'z acc']


def read_csv(input_file, columns=None, verbose=True):
    """
    Read a CSV file of sensor readings into a pandas.DataFrame, one row per
    sample in recorded order. Gzip (.gz) and zip (.zip) compressed files are
    supported.

    :param input_file: Path to CSV file.
    :type input_file: str
    :param columns: Columns that must be present in the file, e.g. the three
        acceleration axes. If None, no check is done. Defaults to None.
    :type columns: list of str, optional
    :param verbose: Verbosity, defaults to True.
    :type verbose: bool, optional
    :return: Data and reading info.
    :rtype: (pandas.DataFrame, dict)
    """

    input_file = str(input_file)

    if not input_file.lower().endswith((".csv", ".csv.gz", ".zip")):
        raise ValueError(f"Unknown file extension: {input_file}")

    timer = Timer(verbose)

    info = {}
    info['Filename'] = input_file
    info['Filesize(MB)'] = round(os.path.getsize(input_file) / (1024 * 1024), 1)

    if input_file.lower().endswith(".zip"):
        check_zip(input_file)

    # Compression is inferred from the extension
    timer.start("Reading file...")
    data = pd.read_csv(input_file, skipinitialspace=True)
    # Some recordings pad their header names with spaces
    data.columns = data.columns.str.strip()
    timer.stop()

    if columns is not None:
        check_columns(data, columns)

    info['NumTicks'] = len(data)

    return data, info


def get_data_for_columns(data, columns=None):
    """
    Return the values of the requested columns as a 2D float array. Row order
    follows `data`, column order follows `columns`.

    :param data: A pandas.DataFrame of sensor readings.
    :type data: pandas.DataFrame
    :param columns: Column labels to extract. Defaults to DEFAULT_COLUMNS.
    :type columns: list of str, optional
    :return: Array of shape (len(data), len(columns)).
    :rtype: numpy.ndarray
    """

    columns = list(columns or DEFAULT_COLUMNS)
    check_columns(data, columns)
    return data[columns].to_numpy(dtype=np.float64)


def check_columns(data, columns):
    """ Raise MissingColumnError if any of `columns` is not in `data` """
    missing = [c for c in columns if c not in data.columns]
    if missing:
        raise MissingColumnError(missing, available=data.columns)


def check_zip(input_file):
    """ A zip file must hold exactly one .csv file """
    with zipfile.ZipFile(input_file, 'r') as f:
        csv_names = [n for n in f.namelist() if n.lower().endswith(".csv")]
        if len(csv_names) != 1 or len(f.namelist()) != 1:
            raise ValueError(f"Expected exactly one .csv file in {input_file}, found {f.namelist()}")


class Timer:
    def __init__(self, verbose=True):
        self.verbose = verbose
        self.start_time = None
        self.msg = None

    def start(self, msg="Starting timer..."):
        assert self.start_time is None, "Timer is running. Use .stop() to stop it"
        self.start_time = time.perf_counter()
        self.msg = msg
        if self.verbose:
            print(msg, end="\r")

    def stop(self):
        assert self.start_time is not None, "Timer is not running. Use .start() to start it"
        elapsed_time = time.perf_counter() - self.start_time
        if self.verbose:
            print(f"{self.msg} Done! ({elapsed_time:0.2f}s)")
        self.start_time = None
        self.msg = None
