# materials/presets.py
from typing import Optional
from pathtracer.core.vector import Color
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.textures import CheckerTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def bronze() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_steel() -> Metal:
        return Metal(Color(0.8, 0.8, 0.9), fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class LightPresets:
    """Predefined light sources; intensity scales a white emitter."""

    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

    @staticmethod
    def warm(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 0.95, 0.9) * intensity)

class ColorPresets:
    """Colors shared by the demo scenes."""

    CORNELL_RED = Color(0.65, 0.05, 0.05)
    CORNELL_WHITE = Color(0.73, 0.73, 0.73)
    CORNELL_GREEN = Color(0.12, 0.45, 0.15)
    CHECKER_GREEN = Color(0.2, 0.3, 0.1)
    CHECKER_WHITE = Color(0.9, 0.9, 0.9)
    GROUND = Color(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Optional[Color] = None, odd: Optional[Color] = None) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if even is None:
            even = ColorPresets.CHECKER_GREEN
        if odd is None:
            odd = ColorPresets.CHECKER_WHITE
        return CheckerTexture(even, odd)

    @staticmethod
    def marble(scale: float = 4.0, axis: str = 'z', seed: Optional[int] = None) -> NoiseTexture:
        """Create a turbulent marble texture."""
        return NoiseTexture(scale, axis, Perlin(seed))
