from __future__ import annotations
"""
PNG encode/decode for Canvas. PNG is lossless, so decode(encode(c)) reproduces
every RGBA value of c exactly.
"""
from io import BytesIO
from pathlib import Path

from PIL import Image

from canvas import Canvas


class ImageWriteError(OSError):
    pass


def encode_png(canvas: Canvas) -> bytes:
    buf = BytesIO()
    try:
        canvas.to_image().save(buf, format='PNG')
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def decode_png(data: bytes) -> Canvas:
    with Image.open(BytesIO(data)) as img:
        return Canvas.from_image(img)


def read_png(path) -> Canvas:
    with Image.open(str(path)) as img:
        return Canvas.from_image(img)


def write_png(canvas: Canvas, path) -> Path:
    """Encode `canvas` and write it to `path`. The parent directory must exist.

    Raises ImageWriteError on any filesystem or encoder failure; a partially
    written file is removed.
    """
    out = Path(path)
    data = encode_png(canvas)
    try:
        with open(out, 'wb') as f:
            f.write(data)
    except OSError as e:
        if out.is_file():
            try:
                out.unlink()
            except OSError:
                pass
        raise ImageWriteError(f"cannot write {out}: {e}") from e
    return out
