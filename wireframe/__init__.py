"""Height maps drawn as wireframe meshes: parsing, projection, rasterising and a viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]