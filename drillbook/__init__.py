"""Classic algorithm exercises on integers, strings, lists and subarrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "hashing", "integers", "majority", "subarrays", "text"]