import logging
import sys

from PyQt6.QtWidgets import QApplication

from maskedit.app import MaskEditApp
from maskedit.config import config


def main():
    """
    The main entry point for the MaskEdit demo.

    Configures logging from config.ini, creates the QApplication and the
    MaskEditApp window, and runs the Qt event loop.
    """
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = QApplication(sys.argv)

    mask_edit_app = MaskEditApp(app)
    mask_edit_app.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
