import logging
from typing import List, Tuple

import pandas as pd

import config
from models.csv_model import CSVData
from services.csv_service import CSVService, CSVServiceError
from services.query_service import NumericParseError, QueryService

logger = logging.getLogger(__name__)


class CSVContext:
    def __init__(self):
        self.path: str | None = None
        self.data: CSVData | None = None


class CSVController:
    def __init__(self):
        self.context = CSVContext()

    # --- LOADING ---
    def load_csv(self, path: str) -> CSVData:
        try:
            text = CSVService.read_text(path)
        except CSVServiceError:
            logger.error("Could not load %s", path)
            raise
        data = self.load_text(text)
        self.context.path = path
        return data

    def load_text(self, text: str) -> CSVData:
        data = CSVService.parse(text)
        self.context.path = None
        self.context.data = data
        logger.info("Loaded CSV with %d rows", data.row_count)
        return data

    def _require_data(self) -> CSVData:
        if self.context.data is None:
            raise CSVServiceError("No CSV loaded.")
        return self.context.data

    # --- QUERIES ---
    def get_line(self, line_number: int) -> str:
        return QueryService.get_line(self._require_data(), line_number)

    def get_col(self, col_number: int) -> List[str]:
        return QueryService.get_col(self._require_data(), col_number)

    def sum_col(self, col_number: int) -> int:
        return QueryService.sum_col(self._require_data(), col_number)

    def get_column_sums(self) -> List[Tuple[int, str, int]]:
        """(index, header, sum) for every column that sums cleanly."""
        data = self._require_data()
        sums = []
        for i, name in enumerate(data.header):
            try:
                sums.append((i, name, QueryService.sum_col(data, i)))
            except (NumericParseError, IndexError) as e:
                logger.debug("Column %d (%s) skipped: %s", i, name, e)
        return sums

    # ========================================================
    #  EXCEL EXPORT
    # ========================================================
    def export_report(self, filename: str):
        data = self._require_data()
        df_data = data.to_dataframe()
        sums = self.get_column_sums()
        df_sums = pd.DataFrame(sums, columns=["Index", "Column", "Sum"])

        try:
            with pd.ExcelWriter(filename, engine='openpyxl') as writer:
                df_data.to_excel(writer, sheet_name=config.REPORT_SHEET_DATA, index=False)
                df_sums.to_excel(writer, sheet_name=config.REPORT_SHEET_SUMS, index=False)

                for sheet_name in writer.sheets:
                    sheet = writer.sheets[sheet_name]
                    for column in sheet.columns:
                        max_length = 0
                        column = [cell for cell in column]
                        for cell in column:
                            if cell.value is not None and len(str(cell.value)) > max_length:
                                max_length = len(str(cell.value))
                        sheet.column_dimensions[column[0].column_letter].width = max_length + 2
        except Exception as e:
            logger.error("Could not write report %s: %s", filename, e)
            raise CSVServiceError(f"Error writing Excel report: {e}") from e
        return filename
