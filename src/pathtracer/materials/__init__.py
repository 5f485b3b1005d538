"""Scattering models, textures and procedural noise."""
