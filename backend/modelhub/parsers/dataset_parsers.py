"""CSV, Excel and JSON parsers for uploaded datasets."""

import json
from io import BytesIO
from pathlib import Path
from zipfile import BadZipFile

import pandas as pd
from xlrd import XLRDError

from .base import BaseParser, UnsupportedFormatError


class CSVParser(BaseParser):
    """Parse comma separated files with a header row."""

    extensions = (".csv",)

    def parse(self, content: bytes) -> pd.DataFrame:
        if not content.strip():
            return pd.DataFrame()
        return pd.read_csv(BytesIO(content))


class ExcelParser(BaseParser):
    """Parse the first sheet of an ``.xlsx`` workbook."""

    extensions = (".xlsx",)
    engine = "openpyxl"

    def parse(self, content: bytes) -> pd.DataFrame:
        try:
            return pd.read_excel(BytesIO(content), sheet_name=0, engine=self.engine)
        except (BadZipFile, XLRDError, KeyError, OSError) as exc:
            raise ValueError(f"Not a readable workbook: {exc}") from exc


class LegacyExcelParser(ExcelParser):
    """Parse the first sheet of an Excel 97-2003 ``.xls`` workbook."""

    extensions = (".xls",)
    engine = "xlrd"


class JSONParser(BaseParser):
    """Parse a JSON array of row objects."""

    extensions = (".json",)

    def parse(self, content: bytes) -> pd.DataFrame:
        data = json.loads(content.decode("utf-8"))
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise ValueError("JSON datasets must be an array of objects.")
        return pd.DataFrame.from_records(data)


_PARSERS = (CSVParser, ExcelParser, LegacyExcelParser, JSONParser)


def get_parser(filename: str) -> BaseParser:
    """Pick the parser for ``filename`` by its extension."""
    suffix = Path(filename or "").suffix.lower()
    for parser_cls in _PARSERS:
        if suffix in parser_cls.extensions:
            return parser_cls()
    raise UnsupportedFormatError(f"Unsupported file format: {suffix or filename!r}")
