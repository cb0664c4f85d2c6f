"""Boolean gadgets and allocation helpers for rank-1 constraint systems."""

__version__ = "0.1.0"

__all__ = ["r1cs", "alloc", "gadgets", "allocated", "logic", "boolean", "kary", "bits"]