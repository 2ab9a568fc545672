from pathlib import Path
import json
import numpy as np


def _manifest_default(o):
    """Convert numpy scalars/arrays and paths found in render manifests."""
    if isinstance(o, np.integer):
        return int(o)
    if isinstance(o, np.floating):
        return float(o)
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, Path):
        return str(o)
    raise TypeError(f"{type(o).__name__} is not JSON serializable")


def dump_json(path: Path, obj, *, indent: int = 2):
    with open(path, "w") as f:
        json.dump(obj, f, indent=indent, default=_manifest_default)
