"""Travel statistics for Träwelling check-in exports."""

__version__ = "0.1.0"
