"""Main Window - Application shell with menus."""

from PySide6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget
from PySide6.QtCore import Signal
from PySide6.QtGui import QAction


class MainWindow(QMainWindow):
    """Provides the application shell and menu actions."""

    # Signal emitted when user picks File > Clear Manuscript
    clear_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Author's Linguist")
        self.setGeometry(100, 100, 1200, 800)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        clear_action = QAction("&Clear Manuscript", self)
        clear_action.setShortcut("Ctrl+Shift+X")
        clear_action.triggered.connect(self.clear_requested.emit)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_panel(self, panel):
        """Set the translation panel widget in the main layout."""
        self.main_layout.addWidget(panel)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)
