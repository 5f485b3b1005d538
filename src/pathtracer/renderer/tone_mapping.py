# renderer/tone_mapping.py
import numpy as np

def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Gamma 2 correction of a linear image (square root per channel).
    Negative values are treated as black.
    """
    return np.sqrt(np.maximum(image, 0.0))

def quantize(image: np.ndarray) -> np.ndarray:
    """
    Map [0, 1) floats to 0..255 bytes: clamp to [0, 0.999], scale by 256
    and truncate.
    """
    return (np.clip(image, 0.0, 0.999) * 256).astype(np.uint8)

def to_display(image: np.ndarray) -> np.ndarray:
    """Linear radiance image to displayable 8-bit RGB."""
    return quantize(gamma_correct(image))
