"""Backend for the anatokismos compound interest calculator."""

__version__ = "0.1.0"
