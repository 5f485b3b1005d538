# config.py
from dataclasses import dataclass, replace
from typing import Optional

# Named quality levels. None keeps the scene's own default.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8, "scale": 0.25},
    "balanced": {"samples": 32, "bounces": 16, "scale": 0.5},
    "high_quality": {"samples": None, "bounces": None, "scale": 1.0},
}

@dataclass
class RenderSettings:
    """Everything the driver needs besides the scene itself."""
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: int = 1
    seed: int = 0
    output: str = "output.ppm"

    def validate(self) -> "RenderSettings":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"width and height must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        return self

def settings_for(scene, quality: Optional[str] = None, width: Optional[int] = None,
                 samples_per_pixel: Optional[int] = None, max_depth: Optional[int] = None,
                 **overrides) -> RenderSettings:
    """
    Build settings for ``scene``: scene defaults, then the quality level,
    then explicit values. Height always follows the scene's aspect ratio.
    """
    image_width = scene.image_width
    samples = scene.samples_per_pixel
    depth = scene.max_depth

    if quality is not None:
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {quality!r}; "
                             f"choose from {', '.join(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        image_width = max(1, int(image_width * level["scale"]))
        if level["samples"] is not None:
            samples = level["samples"]
        if level["bounces"] is not None:
            depth = level["bounces"]

    if width is not None:
        image_width = width
    if samples_per_pixel is not None:
        samples = samples_per_pixel
    if max_depth is not None:
        depth = max_depth

    settings = RenderSettings(
        width=image_width,
        height=max(1, int(image_width / scene.aspect_ratio)),
        samples_per_pixel=samples,
        max_depth=depth,
    )
    return replace(settings, **overrides)
