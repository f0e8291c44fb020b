import time
from pathlib import Path
import argparse
import pandas as pd
import numpy as np
import os
import json

from stepcounter.counter import StepCounter
from stepcounter.reader import read_csv, DEFAULT_COLUMNS

KNOWN_EXTENSIONS = (".csv.gz", ".csv", ".zip")

"""
How to run the script:

```bash
stepcount data/walk.csv

stepcount data/walk.csv.gz -o outputs/ -c x y z -k 2.5 -q
```
"""


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="A tool to count steps in a CSV file of accelerometer readings",
        add_help=True,
    )
    parser.add_argument("filepath", help="Enter file to be processed")
    parser.add_argument("--outdir", "-o", help="Enter folder location to save the magnitude series and info. Nothing is saved if not given.", default=None)
    parser.add_argument("--columns", "-c", help="Names of the x, y and z acceleration columns.", type=str, nargs=3, default=DEFAULT_COLUMNS)
    parser.add_argument("--num-std", "-k", help="Standard deviations above the mean a peak must reach to count as a step.", type=float, default=2)
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output.")

    args = parser.parse_args(argv)

    verbose = not args.quiet

    data, info = read_csv(args.filepath, columns=args.columns, verbose=verbose)

    counter = StepCounter(data, columns=args.columns, num_std=args.num_std, verbose=verbose)
    result = counter.analyze()
    info.update(result.info)

    print(f"Steps: {result.count}")
    if verbose:
        # Pretty print info
        for k, v in info.items():
            print(f"{k:25s}: {v}")

    if args.outdir is None:
        return

    # Output paths
    basename = resolve_path(args.filepath)[1]
    outdir = Path(args.outdir) / basename
    outdir.mkdir(parents=True, exist_ok=True)

    graph = pd.DataFrame({
        'magnitude': result.magnitudes,
        'is_step': np.isin(np.arange(len(result.magnitudes)), result.step_indexes),
    })

    csv_file = outdir / f"{basename}-Magnitudes.csv.gz"
    if verbose:
        print("Saving magnitudes to disk...", end="\r")
    before = time.perf_counter()
    graph.to_csv(csv_file, index=True, index_label='sample')
    elapsed_time = time.perf_counter() - before
    if verbose:
        print(f"Saving magnitudes to disk... Done! ({elapsed_time:0.2f}s)")
        print(f"Magnitudes saved to: {os.path.abspath(csv_file)}")

    info_file = outdir / f"{basename}-Info.json"
    with open(info_file, "w") as f:
        json.dump(info, f, ensure_ascii=False, indent=4, cls=NpEncoder)
    if verbose:
        print(f"Info file saved to: {os.path.abspath(info_file)}")


def resolve_path(path):
    """ Return parent folder, file name and file extension """
    p = Path(path)
    # Only strip known extensions, dots elsewhere belong to the file name
    extension = next((e for e in KNOWN_EXTENSIONS if p.name.lower().endswith(e)), p.suffix)
    filename = p.name[:len(p.name) - len(extension)]
    dirname = p.parent
    return dirname, filename, extension


class NpEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if pd.isnull(obj):  # handles pandas NAType
            return np.nan
        return json.JSONEncoder.default(self, obj)


if __name__ == "__main__":
    main()
