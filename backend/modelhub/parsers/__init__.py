"""Parser utilities for turning uploaded dataset files into data frames."""

from .base import BaseParser, UnsupportedFormatError
from .dataset_parsers import CSVParser, ExcelParser, JSONParser, LegacyExcelParser, get_parser

__all__ = ["BaseParser", "CSVParser", "ExcelParser", "JSONParser", "LegacyExcelParser", "UnsupportedFormatError", "get_parser"]
