"""Abstract base class for installed-software data sources.

This module defines the NameSource interface that every collaborator
queried while building the installed-software index implements.
"""

from abc import ABC, abstractmethod


class DataSourceUnavailable(Exception):
    """Raised when a data source cannot be queried.

    Covers an absent package manager or platform, a failing query and a
    missing directory. Callers degrade the source to an empty collection.
    """


class NameSource(ABC):
    """Abstract base class for all name sources.

    A source queries one collaborator (package manager, application
    platform, launcher directory) and returns the raw names it reports.

    Example:
        >>> source = FlatpakSource()
        >>> if source.is_available():
        ...     for app_id in source.list_names():
        ...         print(app_id)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in log messages."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this source can be queried on the system.

        Returns:
            True if the source can be used, False otherwise.
        """

    @abstractmethod
    def list_names(self) -> list[str]:
        """Return the raw names reported by this source.

        Returns:
            List of names in the order the collaborator reported them.

        Raises:
            DataSourceUnavailable: If the source cannot be queried.
        """

    def list_names_or_empty(self) -> list[str]:
        """Return the names, or an empty list if the source is unavailable."""
        try:
            return self.list_names()
        except DataSourceUnavailable:
            return []
