
STYLESHEET = """
QMainWindow {
    background-color: #1a1a1a;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

/* Labels */
QLabel {
    color: #e0e0e0;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

/* Buttons */
QPushButton {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 6px 12px;
    font-weight: bold;
    color: #e0e0e0;
}

QPushButton:hover {
    background-color: #2c2c2c;
    border-color: #444444;
}

QPushButton:pressed {
    background-color: #383838;
}

QPushButton#ExportButton {
    background-color: #ffffff;
    color: #000000;
    border-radius: 10px;
    padding: 8px;
}

QPushButton#ExportButton:hover {
    background-color: #dddddd;
}

/* Palette Swatches */
QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QLabel#SwatchCaption {
    font-family: monospace;
    font-size: 11px;
    font-weight: bold;
    background-color: transparent;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 11px;
    color: #aaaaaa;
}
QLabel#CodeLabel:hover {
    color: #ffffff;
}
QLabel#CodeLabel[flashing="true"] {
    color: #4CAF50;
}

/* Selected Preview + Hex Entry */
QFrame#PreviewFrame {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
}

QLineEdit#HexInput {
    background-color: rgba(255, 255, 255, 0.05);
    border: 1px solid rgba(255, 255, 255, 0.1);
    border-radius: 8px;
    padding: 6px 10px;
    font-family: monospace;
    font-size: 13px;
    color: #ffffff;
}
QLineEdit#HexInput:focus {
    border-color: rgba(255, 255, 255, 0.3);
}

/* ComboBox */
QComboBox {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 5px;
    color: #e0e0e0;
    min-width: 6em;
}

QComboBox:hover {
    border-color: #555555;
}

QComboBox::drop-down {
    subcontrol-origin: padding;
    subcontrol-position: top right;
    width: 20px;
    border-left-width: 0px;
    border-top-right-radius: 3px;
    border-bottom-right-radius: 3px;
}

QComboBox QAbstractItemView {
    background-color: #1e1e1e;
    color: #e0e0e0;
    selection-background-color: #333333;
    selection-color: #ffffff;
    border: 1px solid #333333;
    outline: none;
}
"""
