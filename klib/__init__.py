"""Small containers: a growable array, a chained hash map with its buckets, and a minimal test runner."""

__version__ = "0.1.0"
__all__ = ["dynarr", "bucket", "hash_map", "runner"]