"""charnet: 3D character co-occurrence network viewer."""

__version__ = "0.1.0"
