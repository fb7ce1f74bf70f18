# renderer/image_formats.py
import io
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np
from PIL import Image

from renderer.canvas import Canvas
from renderer.tone_mapping import clamp_to_rgba8

logger = logging.getLogger(__name__)

ToneMapper = Callable[[np.ndarray], np.ndarray]


def _rgba8(canvas: Canvas, tone_map: Optional[ToneMapper]) -> np.ndarray:
    if tone_map is None:
        tone_map = clamp_to_rgba8
    return tone_map(canvas.pixels)


def encode_png(canvas: Canvas, tone_map: Optional[ToneMapper] = None) -> bytes:
    """8-bit RGBA PNG."""
    buffer = io.BytesIO()
    Image.fromarray(_rgba8(canvas, tone_map)).save(buffer, format="PNG")
    return buffer.getvalue()


def encode_ppm_p3(canvas: Canvas, tone_map: Optional[ToneMapper] = None) -> bytes:
    """ASCII PPM. Alpha is dropped; one "r g b" triple per line."""
    data = _rgba8(canvas, tone_map)
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    lines.extend(f"{r} {g} {b}" for r, g, b, _ in data.reshape(-1, 4))
    return ("\n".join(lines) + "\n").encode("ascii")


def encode_pam(canvas: Canvas, tone_map: Optional[ToneMapper] = None) -> bytes:
    """Binary P7 (PAM) with TUPLTYPE RGB_ALPHA."""
    header = (
        "P7\n"
        f"WIDTH {canvas.width}\n"
        f"HEIGHT {canvas.height}\n"
        "DEPTH 4\n"
        "MAXVAL 255\n"
        "TUPLTYPE RGB_ALPHA\n"
        "ENDHDR\n"
    )
    return header.encode("ascii") + _rgba8(canvas, tone_map).tobytes()


ENCODERS = {
    ".png": encode_png,
    ".ppm": encode_ppm_p3,
    ".pam": encode_pam,
}


def save_image(canvas: Canvas, path: Union[str, Path], tone_map: Optional[ToneMapper] = None) -> Path:
    """Writes the canvas in the format named by the file extension."""
    path = Path(path)
    encoder = ENCODERS.get(path.suffix.lower())
    if encoder is None:
        raise ValueError(f"Unsupported image format {path.suffix!r}; expected one of {sorted(ENCODERS)}")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encoder(canvas, tone_map))
    logger.info("Saved %dx%d image to %s", canvas.width, canvas.height, path)
    return path
