import sys

from PyQt6.QtWidgets import QApplication

from font_booklet.core.app import CoreApp
from font_booklet.apps.booklet.controllers.main_controller import MainController
from font_booklet.utils.logging import setup_logging

def main():
    setup_logging()
    app = QApplication(sys.argv)

    # The one CoreApp instance, injected into the controller
    app_core = CoreApp()
    setup_logging(app_core.settings.log_level)

    controller = MainController(app_core)
    controller.show()

    exit_code = app.exec()
    controller.shutdown()
    sys.exit(exit_code)

if __name__ == "__main__":
    main()
