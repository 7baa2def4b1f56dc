from __future__ import annotations

from typing import Literal

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication

from unix_emulator.entities.styled_line import LineCategory

ThemeName = Literal["dark", "light"]

_CATEGORY_COLORS: dict[str, dict[LineCategory, str]] = {
    "dark": {
        LineCategory.PROMPT: "#56d4dd",
        LineCategory.OUTPUT: "#ebeef6",
        LineCategory.ERROR: "#ff6b6b",
        LineCategory.ECHO: "#f5d76e",
    },
    "light": {
        LineCategory.PROMPT: "#0b7285",
        LineCategory.OUTPUT: "#181c25",
        LineCategory.ERROR: "#d84444",
        LineCategory.ECHO: "#a66a00",
    },
}


def available_themes() -> list[ThemeName]:
    return ["dark", "light"]


def category_color(theme: ThemeName, category: LineCategory) -> str:
    return _CATEGORY_COLORS.get(theme, _CATEGORY_COLORS["dark"])[category]


def monospace_font(point_size: int = 11) -> QFont:
    font = QFont("Monospace")
    font.setStyleHint(QFont.StyleHint.TypeWriter)
    font.setPointSize(point_size)
    return font


def _apply_palette(app: QApplication, theme: ThemeName) -> None:
    # Start from Fusion for consistent cross‑platform rendering
    app.setStyle("Fusion")
    pal = QPalette()

    if theme == "dark":
        bg = QColor(17, 18, 23)
        base = QColor(12, 12, 12)
        text = QColor(235, 238, 246)
        sub = QColor(170, 178, 207)
        btn = QColor(39, 43, 56)
        hi = QColor(108, 156, 255)
        hi_text = QColor(0, 0, 0)
    else:
        bg = QColor(248, 249, 251)
        base = QColor(255, 255, 255)
        text = QColor(24, 28, 37)
        sub = QColor(102, 112, 133)
        btn = QColor(255, 255, 255)
        hi = QColor(62, 121, 247)
        hi_text = QColor(255, 255, 255)

    cr = QPalette.ColorRole
    cg = QPalette.ColorGroup
    pal.setColor(cr.Window, bg)
    pal.setColor(cr.WindowText, text)
    pal.setColor(cr.Base, base)
    pal.setColor(cr.Text, text)
    pal.setColor(cr.Button, btn)
    pal.setColor(cr.ButtonText, text)
    pal.setColor(cr.Highlight, hi)
    pal.setColor(cr.HighlightedText, hi_text)
    pal.setColor(cg.Disabled, cr.Text, sub)
    pal.setColor(cg.Disabled, cr.ButtonText, sub)

    app.setPalette(pal)


def apply_theme(app: QApplication, theme: str | None = None) -> ThemeName:
    """Apply light/dark theme and return the active theme."""
    name = (theme or "dark").lower()
    if name not in available_themes():
        name = "dark"

    _apply_palette(app, name)  # type: ignore[arg-type]
    app.setProperty("activeTheme", name)
    return name  # type: ignore[return-value]


def toggle_theme(app: QApplication, current: ThemeName) -> ThemeName:
    nxt: ThemeName = "light" if current == "dark" else "dark"
    return apply_theme(app, nxt)
