# renderer/image_writer.py
import logging
import os
import numpy as np
from PIL import Image
from pathtracer.renderer.tone_mapping import to_display

logger = logging.getLogger(__name__)

def write_ppm(path: str, pixels: np.ndarray) -> None:
    """
    Write 8-bit RGB pixels (height, width, 3) as a plain-text P3 image,
    top row first, one pixel per line.
    """
    height, width = pixels.shape[:2]
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            for r, g, b in row:
                f.write(f"{int(r)} {int(g)} {int(b)}\n")

def write_image(path: str, image: np.ndarray) -> None:
    """
    Tone map a linear radiance image and save it. ``.ppm`` is written as
    text; other extensions go through Pillow.
    """
    pixels = to_display(image)
    ext = os.path.splitext(path)[1].lower()
    if ext == ".ppm":
        write_ppm(path, pixels)
    else:
        Image.fromarray(pixels).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
