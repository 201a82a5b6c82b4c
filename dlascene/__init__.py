"""dla-scene: render-ready scenes for 3D diffusion limited aggregates."""

__version__ = "0.1.0"
