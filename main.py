import logging
import sys

import config
from controllers.csv_controller import CSVController
from services.csv_service import CSVServiceError
from ui.console_view import ConsoleView


def main(path: str | None = None, view: ConsoleView | None = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    controller = CSVController()
    view = view or ConsoleView()

    try:
        data = controller.load_csv(path or config.CSV_FILE_PATH)
    except CSVServiceError as e:
        view.show_error(e)
        return 1

    view.pretty_print(data)

    # Third line of the file
    line_number = 2
    try:
        view.show_line(line_number, controller.get_line(line_number))
    except CSVServiceError as e:
        view.show_error(e)

    col_number = 0
    try:
        view.show_column(col_number, controller.get_col(col_number))
    except CSVServiceError as e:
        view.show_error(e)

    # Weight column
    col_to_sum = 4
    try:
        view.show_sum(col_to_sum, controller.sum_col(col_to_sum))
    except CSVServiceError as e:
        view.show_error(e)

    return 0


if __name__ == "__main__":
    sys.exit(main())
