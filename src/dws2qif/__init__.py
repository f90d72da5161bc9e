"""Convert DWS fund transaction exports into QIF investment ledgers."""

__version__ = "0.95"
