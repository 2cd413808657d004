"""Other Worlds' Starsets — deterministic planet-sky scenes from blockchain blocks."""

__version__ = "0.1.0"
