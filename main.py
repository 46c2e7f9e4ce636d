import sys
import os
import logging
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QPushButton, QLabel, QFrame, QComboBox,
                               QLineEdit, QFileDialog)
from PySide6.QtCore import Qt, QTimer

from styles import STYLESHEET
from color_logic import InvalidFormat
from config import (DEFAULT_SETTINGS, load_settings, geometry_from_settings,
                    contrast_threshold_from_settings, configure_logging)
from palette_logic import (PALETTE_TYPES, PALETTE_LABELS,
                           generate_palette_entries, render_palette_image)
from icon_gen import create_app_icon
from wheel_logic import PickerSession
from widgets import ColorWheelWidget, LightnessSlider, PaletteItem

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle("Palette Wheel")
        self.setWindowIcon(create_app_icon())

        self.app_settings = settings or load_settings()
        geometry = geometry_from_settings(self.app_settings)
        self.contrast_threshold = contrast_threshold_from_settings(self.app_settings)
        try:
            self.session = PickerSession(self.app_settings["base_color"], geometry)
        except InvalidFormat as e:
            logger.warning("Bad base_color in settings (%s); using %s", e, DEFAULT_SETTINGS["base_color"])
            self.session = PickerSession(DEFAULT_SETTINGS["base_color"], geometry)

        self.palette_type = self.app_settings["palette_type"]
        if self.palette_type not in PALETTE_TYPES:
            logger.warning("Unknown palette type %r in settings; using %s",
                           self.palette_type, DEFAULT_SETTINGS["palette_type"])
            self.palette_type = DEFAULT_SETTINGS["palette_type"]
        self.palette = []

        self.setup_ui()
        self.update_ui_with_color(self.session.hex)

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Top Bar: wheel | slider + hex + type
        top_bar = QHBoxLayout()
        top_bar.setSpacing(12)

        self.wheel = ColorWheelWidget(self.session)
        self.wheel.colorPicked.connect(self.update_ui_with_color)
        top_bar.addWidget(self.wheel)

        controls = QVBoxLayout()
        controls.setSpacing(12)
        controls.setAlignment(Qt.AlignVCenter)

        self.slider = LightnessSlider(self.session)
        self.slider.colorPicked.connect(self.update_ui_with_color)
        controls.addWidget(self.slider)

        hex_row = QHBoxLayout()
        self.selected_preview = QFrame()
        self.selected_preview.setObjectName("PreviewFrame")
        self.selected_preview.setFixedSize(32, 32)
        hex_row.addWidget(self.selected_preview)

        self.hex_input = QLineEdit()
        self.hex_input.setObjectName("HexInput")
        self.hex_input.setMaxLength(7)
        self.hex_input.editingFinished.connect(self.on_hex_entered)
        hex_row.addWidget(self.hex_input)
        controls.addLayout(hex_row)

        self.type_combo = QComboBox()
        for key in PALETTE_TYPES:
            self.type_combo.addItem(PALETTE_LABELS[key], key)
        self.type_combo.setCurrentIndex(PALETTE_TYPES.index(self.palette_type))
        self.type_combo.currentIndexChanged.connect(self.on_type_changed)
        controls.addWidget(self.type_combo)

        self.export_btn = QPushButton(" Export PNG")
        self.export_btn.setObjectName("ExportButton")
        self.export_btn.setCursor(Qt.PointingHandCursor)
        self.export_btn.clicked.connect(self.export_palette)
        controls.addWidget(self.export_btn)

        top_bar.addLayout(controls)
        top_bar.addStretch()
        main_layout.addLayout(top_bar)

        palette_label = QLabel("Palette")
        palette_label.setObjectName("SectionTitle")
        main_layout.addWidget(palette_label)

        self.palette_container = QHBoxLayout()
        self.palette_container.setAlignment(Qt.AlignCenter)
        self.palette_container.setSpacing(10)
        main_layout.addLayout(self.palette_container)
        main_layout.addStretch()

    # --- Input handlers ---

    def on_hex_entered(self):
        text = self.hex_input.text()
        try:
            changed = self.session.set_color(text)
        except InvalidFormat as e:
            logger.warning("Rejected color input: %s", e)
            self.hex_input.setText(self.session.hex)
            return
        if changed:
            self.update_ui_with_color(self.session.hex)

    def on_type_changed(self, index):
        self.palette_type = self.type_combo.itemData(index)
        self.update_palette_ui()

    def export_palette(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export Palette", "palette.png", "PNG Images (*.png)")
        if not path:
            return
        img = render_palette_image(self.palette, int(self.app_settings["swatch_export_size"]),
                                   self.contrast_threshold)
        try:
            img.save(path)
        except OSError as e:
            logger.error("Could not export palette to %s: %s", path, e)
            return
        logger.info("Exported %s palette to %s", self.palette_type, path)

    # --- Redraw ---

    def update_ui_with_color(self, hex_val):
        self.selected_preview.setStyleSheet(
            f"background-color: {hex_val}; border: 1px solid #333; border-radius: 6px;")
        if self.hex_input.text().upper() != hex_val:
            self.hex_input.setText(hex_val)

        self.wheel.refresh()
        self.slider.refresh()
        self.update_palette_ui()

    def update_palette_ui(self):
        while self.palette_container.count():
            child = self.palette_container.takeAt(0)
            if child.widget():
                child.widget().deleteLater()

        entries = generate_palette_entries(self.session.hex, self.palette_type,
                                           self.contrast_threshold)
        self.palette = [e["hex"] for e in entries]

        for i, entry in enumerate(entries):
            if i > 0:
                vline = QFrame()
                vline.setFrameShape(QFrame.VLine)
                vline.setFixedWidth(1)
                vline.setFixedHeight(40)
                vline.setStyleSheet("background-color: #333333;")
                self.palette_container.addWidget(vline)
            self.palette_container.addWidget(PaletteItem(entry))

        QTimer.singleShot(10, self.adjustSize)


def main(argv=None):
    settings = load_settings()
    configure_logging(settings)

    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
    app = QApplication(sys.argv if argv is None else argv)
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(settings)
    window.show()
    logger.info("Started with base %s (%s): %s", window.session.hex, window.palette_type,
                window.palette)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
