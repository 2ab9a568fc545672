from pathlib import Path
import re

DEFAULT_OUTPUT_DIR = "img"


def get_output_dir(output_dir=None) -> Path:
    """Resolve output directory.

    - If output_dir is None: use img/ under the current directory
    - If output_dir is provided: use it directly
    The directory is created if missing.
    """
    run_dir = Path(output_dir) if output_dir else Path(DEFAULT_OUTPUT_DIR)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def safe_label_from_path(p: Path) -> str:
    label = p.stem if p.suffix else p.name
    return re.sub(r'[^A-Za-z0-9_.-]', '_', label)
