# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from pathtracer.core.vector import Color, Point3
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Color at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

def as_texture(color_or_texture: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidColor; pass textures through."""
    if isinstance(color_or_texture, Texture):
        return color_or_texture
    return SolidColor(color_or_texture)

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    3D checker pattern: the sign of sin(10x)·sin(10y)·sin(10z) picks
    between the even and odd sub-textures.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture]):
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like grey pattern: a sine along one axis phase-shifted by turbulence."""
    def __init__(self, scale: float = 1.0, axis: str = 'z', perlin: Optional[Perlin] = None):
        if axis not in ('x', 'y', 'z'):
            raise ValueError(f"Unknown noise axis: {axis!r}")
        self.scale = scale
        self.axis = axis
        self.noise = perlin if perlin is not None else Perlin()

    def value(self, u: float, v: float, p: Point3) -> Color:
        s = p * self.scale
        level = 0.5 * (1 + math.sin(s.axis(self.axis) + 10 * self.noise.turb(s, 7)))
        return Color(level, level, level)

class ImageTexture(Texture):
    """
    Placeholder for image-mapped textures. Without pixel data it renders
    a flat cyan so missing textures are obvious; sampling real pixel data
    is not supported.
    """
    def __init__(self, data: Optional[np.ndarray] = None):
        self.data = data

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self.data is None or self.data.size == 0:
            return Color(0.0, 1.0, 1.0)
        raise NotImplementedError("Image texture sampling is not implemented.")
