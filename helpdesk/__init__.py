"""Customer-support ticket desk: ticket queue, agents, resolution log and reports."""

__version__ = "1.0.0"
__all__ = ["__version__"]