import os


# Input file for the reference program
CSV_FILE_PATH: str = os.environ.get("CSV_FILE_PATH", "biostats1.csv")

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = os.environ.get("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")

# Console rendering
COLUMN_WIDTH: int = int(os.environ.get("COLUMN_WIDTH", "15"))
LINE_SEPARATOR: str = ", "

# Excel report
REPORT_SHEET_DATA: str = "Data"
REPORT_SHEET_SUMS: str = "Column Sums"
