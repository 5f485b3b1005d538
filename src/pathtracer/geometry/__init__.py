"""
Scene geometry: intersectable primitives, structural wrappers and the
bounding volume hierarchy.

Submodules are imported directly (``from pathtracer.geometry.sphere import
Sphere``); materials depend on ``geometry.hittable``, so nothing is
re-exported here.
"""
