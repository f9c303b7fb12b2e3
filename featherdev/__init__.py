"""Development build loop for Feather Wiki: bundle, localize, serve, rebuild."""

__version__ = "0.1.0"
