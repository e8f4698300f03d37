class JacobiPoissonError(Exception):
    """Base class for errors raised by jacobipoisson."""


class GridAllocationError(JacobiPoissonError, MemoryError):
    """Raised when the storage for a grid cannot be obtained."""


class OutputFileError(JacobiPoissonError, OSError):
    """Raised when a report or matrix file cannot be opened."""
