"""String manipulation utilities for numerical-optimization tooling."""

__version__ = "0.1.0"
