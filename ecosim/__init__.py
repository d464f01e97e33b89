"""Turn-based predator and prey ecosystem simulation on a grid of linked nodes."""

__version__ = "0.1.0"
__all__ = ["mapa", "criatura", "especies", "simulacion"]