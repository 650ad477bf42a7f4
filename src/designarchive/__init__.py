"""Design Archive: a browsable catalog of design artifacts."""

__version__ = "0.3.0"
