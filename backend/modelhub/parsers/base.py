"""Base classes and interfaces for parsers."""

from abc import ABC, abstractmethod

import pandas as pd


class UnsupportedFormatError(ValueError):
    """Raised when no parser handles the uploaded file type."""


class BaseParser(ABC):
    """Abstract base class for dataset parsers."""

    extensions: tuple = ()

    @abstractmethod
    def parse(self, content: bytes) -> pd.DataFrame:
        """Parse the raw file content and return it as a data frame."""
        raise NotImplementedError
