# renderer/tone_mapping.py
import numpy as np


def clamp_to_rgba8(pixels: np.ndarray) -> np.ndarray:
    """Plain clamp to [0, 1] and truncation to 8 bits; this matches ColorRGBA.as_bytes."""
    return (np.clip(pixels, 0.0, 1.0) * 255.0).astype(np.uint8)


def reinhard_tone_mapping(pixels, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to the RGB channels of a linear RGBA image.
    Alpha is only clamped.
    """
    rgb = np.maximum(pixels[..., :3], 0.0) * exposure
    mapped = rgb / (1.0 + rgb / white_point)
    mapped = mapped ** (1.0 / gamma)

    output = np.empty(pixels.shape, dtype=np.uint8)
    output[..., :3] = (mapped * 255).clip(0, 255).astype(np.uint8)
    output[..., 3] = (np.clip(pixels[..., 3], 0.0, 1.0) * 255).astype(np.uint8)
    return output


def auto_exposure_tone_mapping(pixels, gamma=2.2, target_midgray=0.18):
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    luminance = 0.2126 * pixels[..., 0] + 0.7152 * pixels[..., 1] + 0.0722 * pixels[..., 2]
    avg_lum = luminance.mean() + 1e-5  # avoid division by zero
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(pixels, exposure=exposure, white_point=1.0, gamma=gamma)


TONE_MAPPERS = {
    "clamp": clamp_to_rgba8,
    "reinhard": reinhard_tone_mapping,
    "auto": auto_exposure_tone_mapping,
}
