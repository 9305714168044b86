import logging
from typing import List

from models.csv_model import CSVData

logger = logging.getLogger(__name__)


class CSVServiceError(Exception):
    pass


class CSVParseError(CSVServiceError):
    def __init__(self, message: str = "CSV could not be parsed"):
        super().__init__(message)


class CSVLoadError(CSVServiceError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Error reading the file '{path}': {reason}")
        self.path = path
        self.reason = reason


class CSVService:
    """
    Tokenizer/parser for plain CSV text.
    - Only ',' and '\\n' are structural; there is no quoting.
    - Every field is cleaned down to its alphanumeric characters.
    - A single trailing newline does not produce an extra row.
    """

    FIELD_SEPARATOR = ","
    LINE_SEPARATOR = "\n"

    @staticmethod
    def clean_field(field: str) -> str:
        return "".join(c for c in field if c.isalnum())

    @staticmethod
    def parse_record(line: str) -> List[str]:
        return [CSVService.clean_field(f) for f in line.split(CSVService.FIELD_SEPARATOR)]

    @staticmethod
    def parse(text: str) -> CSVData:
        if not isinstance(text, str) or not text:
            raise CSVParseError()

        lines = text.split(CSVService.LINE_SEPARATOR)
        if lines[-1] == "":
            lines.pop()
        if not lines:
            raise CSVParseError()

        rows = [CSVService.parse_record(line) for line in lines]
        logger.debug("Parsed %d rows", len(rows))
        return CSVData(rows=rows)

    @staticmethod
    def _read(path: str, encoding: str) -> str:
        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                return f.read()
        except OSError as e:
            raise CSVLoadError(path, e.strerror or str(e)) from e

    @staticmethod
    def read_text(path: str) -> str:
        # BOM-aware utf-8 first; latin-1 decodes any byte sequence
        try:
            return CSVService._read(path, "utf-8-sig")
        except UnicodeDecodeError:
            return CSVService._read(path, "latin-1")

    @staticmethod
    def read_csv(path: str) -> CSVData:
        return CSVService.parse(CSVService.read_text(path))
