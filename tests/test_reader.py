import json
import zipfile

import numpy as np
import pandas as pd
import pytest

import stepcounter
from stepcounter import count_steps


MAGS = [1, 1, 5, 1, 1, 5] + [1] * 14


def test_read_csv(tmp_path):
    """ Test reading a plain CSV file. """

    fpath = write_csv(tmp_path / 'walk.csv')
    data, info = stepcounter.read_csv(str(fpath), verbose=False)

    assert info['Filename'] == str(fpath)
    assert info['NumTicks'] == len(MAGS)
    assert list(data.columns) == ['time', 'x acc', 'y acc', 'z acc']
    assert stepcounter.StepCounter(data).count_steps() == 2


def test_read_csv_gz(tmp_path):
    """ Test reading a gzipped CSV file. """

    fpath = write_csv(tmp_path / 'walk.csv.gz')
    data, info = stepcounter.read_csv(fpath, verbose=False)

    assert info['NumTicks'] == len(MAGS)
    assert stepcounter.StepCounter(data).count_steps() == 2


def test_read_csv_zip(tmp_path):
    """ Test reading a zipped CSV file. """

    csv_path = write_csv(tmp_path / 'walk.csv')
    zip_path = tmp_path / 'walk.zip'
    with zipfile.ZipFile(zip_path, 'w') as z:
        z.write(csv_path, arcname='walk.csv')

    data, info = stepcounter.read_csv(zip_path, verbose=False)
    assert info['NumTicks'] == len(MAGS)

    # More than one file in the archive is ambiguous
    bad_zip_path = tmp_path / 'bad.zip'
    with zipfile.ZipFile(bad_zip_path, 'w') as z:
        z.write(csv_path, arcname='walk.csv')
        z.write(csv_path, arcname='walk2.csv')
    with pytest.raises(ValueError):
        stepcounter.read_csv(bad_zip_path, verbose=False)


def test_read_csv_padded_header(tmp_path):
    """ Header names padded with spaces are stripped. """

    fpath = tmp_path / 'walk.csv'
    fpath.write_text("time, x acc, y acc, z acc\n0, 0.1, 0.2, 0.3\n10, 0.4, 0.5, 0.6\n")

    data, _ = stepcounter.read_csv(fpath, columns=['x acc', 'y acc', 'z acc'], verbose=False)
    xyz = stepcounter.get_data_for_columns(data)
    np.testing.assert_allclose(xyz, [[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]])


def test_read_csv_errors(tmp_path):
    """ Unknown extensions and missing columns are errors. """

    fpath = tmp_path / 'walk.txt'
    fpath.write_text("x acc,y acc,z acc\n1,2,3\n")
    with pytest.raises(ValueError):
        stepcounter.read_csv(fpath, verbose=False)

    fpath = write_csv(tmp_path / 'walk.csv')
    with pytest.raises(stepcounter.MissingColumnError) as excinfo:
        stepcounter.read_csv(fpath, columns=['x', 'y', 'z'], verbose=False)
    assert excinfo.value.missing == ['x', 'y', 'z']


def test_get_data_for_columns():
    """ Columns come back in the requested order, rows in recorded order. """

    data = pd.DataFrame({'z': [3.0, 6.0], 'x': [1.0, 4.0], 'y': [2.0, 5.0]})
    xyz = stepcounter.get_data_for_columns(data, ['x', 'y', 'z'])

    assert xyz.dtype == np.float64
    np.testing.assert_array_equal(xyz, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    with pytest.raises(stepcounter.MissingColumnError):
        stepcounter.get_data_for_columns(data, ['x', 'y', 'w'])


def test_cli(tmp_path, capsys):
    """ Test the stepcount command line tool. """

    fpath = write_csv(tmp_path / 'walk.csv.gz')
    outdir = tmp_path / 'outputs'

    count_steps.main([str(fpath), '-o', str(outdir), '-q'])

    assert "Steps: 2" in capsys.readouterr().out

    graph = pd.read_csv(outdir / 'walk' / 'walk-Magnitudes.csv.gz', index_col='sample')
    np.testing.assert_allclose(graph['magnitude'], MAGS)
    assert list(graph.index[graph['is_step']]) == [2, 5]

    with open(outdir / 'walk' / 'walk-Info.json') as f:
        info = json.load(f)
    assert info['NumSteps'] == 2
    assert info['NumTicks'] == len(MAGS)


def test_cli_dotted_filenames(tmp_path):
    """ Dots inside file names are kept, so outputs don't overwrite each other. """

    outdir = tmp_path / 'outputs'
    for name in ('s1.day1.csv', 's1.day2.csv.gz'):
        fpath = write_csv(tmp_path / name)
        count_steps.main([str(fpath), '-o', str(outdir), '-q'])

    assert sorted(p.name for p in outdir.iterdir()) == ['s1.day1', 's1.day2']
    assert (outdir / 's1.day1' / 's1.day1-Info.json').exists()
    assert (outdir / 's1.day2' / 's1.day2-Magnitudes.csv.gz').exists()


def test_resolve_path():
    """ Only the known trailing extension is stripped. """

    assert count_steps.resolve_path('data/s1.day1.csv')[1:] == ('s1.day1', '.csv')
    assert count_steps.resolve_path('data/walk.CSV.GZ')[1:] == ('walk', '.csv.gz')
    assert count_steps.resolve_path('walk.zip')[1:] == ('walk', '.zip')


def test_cli_custom_columns(tmp_path, capsys):
    """ Test the command line tool with other column names and threshold. """

    fpath = write_csv(tmp_path / 'walk.csv', columns=['ax', 'ay', 'az'])

    count_steps.main([str(fpath), '-c', 'ax', 'ay', 'az', '-k', '0', '-q'])

    assert "Steps: 2" in capsys.readouterr().out


def write_csv(fpath, columns=('x acc', 'y acc', 'z acc')):
    """ Write a recording with two clear steps, at samples 2 and 5. """
    mags = np.asarray(MAGS, dtype=float)
    xyz = np.zeros((len(mags), 3))
    xyz[:, 1] = mags
    data = pd.DataFrame(xyz, columns=list(columns))
    data.insert(0, 'time', np.arange(len(mags)) * 20)
    data.to_csv(fpath, index=False)
    return fpath
