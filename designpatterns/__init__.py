"""Classic design patterns: creational, structural, behavioral and concurrent."""

__version__ = "0.1.0"
__all__ = ["behavioral", "creational", "parallel", "structural"]