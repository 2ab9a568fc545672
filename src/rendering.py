from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from utils.io_paths import safe_label_from_path


def montage_shape(n: int) -> Tuple[int, int]:
    """Return (rows, cols) for a grid holding n images, at most 5 columns."""
    if n <= 0:
        return (0, 0)
    cols = min(5, max(1, int(np.ceil(np.sqrt(n)))))
    rows = int(np.ceil(n / cols))
    return rows, cols


def render_montage(image_paths: Sequence, out_path, dpi: int = 150) -> Path:
    """Compose the given PNG files into one titled grid image."""
    paths: List[Path] = [Path(p) for p in image_paths]
    if not paths:
        raise ValueError("No images to compose")
    rows, cols = montage_shape(len(paths))
    fig = plt.figure(figsize=(cols * 3.0, rows * 3.0))
    try:
        for i, ipath in enumerate(paths, start=1):
            ax = fig.add_subplot(rows, cols, i)
            try:
                img = plt.imread(str(ipath))
                ax.imshow(img)
                ax.set_title(safe_label_from_path(ipath), fontsize=9)
            except (OSError, ValueError) as e:
                print(f"[Warning] Failed to read {ipath.name} for montage: {e}")
                ax.text(0.5, 0.5, f"Failed: {ipath.name}", ha='center', va='center')
            ax.axis('off')
        plt.tight_layout()
        out = Path(out_path)
        plt.savefig(str(out), dpi=dpi)
    finally:
        plt.close(fig)
    return out
