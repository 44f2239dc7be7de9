from .visualization import visualize

__all__ = ["visualize"]
