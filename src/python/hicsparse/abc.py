# hicsparse/abc.py
"""Abstract Base Classes for the hicsparse library."""

import abc


class HicFileBase(abc.ABC):
    """Abstract base class for .hic archive handlers."""

    @abc.abstractmethod
    def close(self) -> None:
        """
        Closes the read-only archive handle. Nothing is flushed, since
        archives are never written. Subsequent reads will raise an error.
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def closed(self) -> bool:
        """Returns True if the file handle is closed."""
        raise NotImplementedError

    def __enter__(self) -> "HicFileBase":
        if self.closed:
            raise ValueError("Cannot enter context with a closed file handle.")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
