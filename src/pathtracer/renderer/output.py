# renderer/output.py
import logging
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def to_rgb8(pixels: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Convert accumulated sample sums to 8-bit RGB: average over the samples,
    gamma-correct for gamma 2, clamp to [0, 0.999] and scale to [0, 255].
    """
    if samples_per_pixel <= 0:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    scaled = np.sqrt(np.maximum(pixels / samples_per_pixel, 0.0))
    return (256.0 * np.clip(scaled, 0.0, 0.999)).astype(np.uint8)

def reinhard_tone_mapping(pixels, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image (already averaged
    over samples).
    """
    scaled = pixels * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = np.maximum(mapped, 0.0) ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype(np.uint8)

def write_image(path, pixels: np.ndarray, samples_per_pixel: int, tone_map: bool = False):
    """Encode an accumulated pixel buffer and save it; format follows the extension."""
    if tone_map:
        rgb = reinhard_tone_mapping(pixels / samples_per_pixel)
    else:
        rgb = to_rgb8(pixels, samples_per_pixel)
    Image.fromarray(rgb).save(path)
    logger.info("Wrote %dx%d image to %s", rgb.shape[1], rgb.shape[0], path)
