from .chip import Chip

__all__ = ["Chip"]
