"""QSS stylesheet constants for the trainer GUI."""

APP_STYLESHEET = """
QMainWindow {
    background: #f8fafc;
}

QGroupBox {
    font-weight: bold;
    font-size: 12px;
    color: #1f2937;
    border: 1px solid #e5e7eb;
    border-radius: 8px;
    margin-top: 12px;
    padding-top: 14px;
}

QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 6px;
    color: #4b5563;
}

QLabel {
    font-size: 12px;
    color: #1f2937;
}

QLabel#cards {
    font-size: 28px;
    font-weight: bold;
}

QPushButton {
    padding: 8px 14px;
    border: 1px solid #d1d5db;
    border-radius: 6px;
    background: white;
    font-size: 13px;
}

QPushButton:hover {
    border-color: #2563eb;
}
"""

# Verdict tier → (background color, text color)
VERDICT_COLORS = {
    "CORRECT": ("#22c55e", "#fff"),
    "PARTIAL": ("#f59e0b", "#fff"),
    "INCORRECT": ("#ef4444", "#fff"),
}

# Suit → card text color
SUIT_COLORS = {
    "h": "#dc2626",
    "d": "#2563eb",
    "c": "#15803d",
    "s": "#111827",
}
