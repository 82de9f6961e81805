# src/cycleviz/__main__.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from cyclekinetics.config import LOG_CONFIG
from .ui.main_window import MainWindow


def main() -> int:
    logging.basicConfig(level=LOG_CONFIG['level'], format=LOG_CONFIG['format'])
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
