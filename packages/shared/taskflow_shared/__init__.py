"""Wire schemas shared between the TaskFlow API and its clients."""

__version__ = "0.1.0"
