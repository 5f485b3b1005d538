from pathtracer.camera.camera import Camera

__all__ = ["Camera"]
