from .sampling import unit_positions

__all__ = ["unit_positions"]
