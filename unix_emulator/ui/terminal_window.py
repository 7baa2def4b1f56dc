from __future__ import annotations

import html as _html
from typing import Sequence, cast

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QAction, QCloseEvent, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QTextBrowser,
    QToolBar,
    QVBoxLayout,
    QWidget,
)
from typing_extensions import override

from unix_emulator.entities.styled_line import StyledLine
from unix_emulator.ports.display_port import DisplayPort
from unix_emulator.use_cases.session.session_loop import SessionLoop

from .theme import ThemeName, category_color, monospace_font, toggle_theme


class TerminalInput(QLineEdit):
    escapePressed = Signal()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self.escapePressed.emit()
            return
        return super().keyPressEvent(event)


class TerminalWindow(QMainWindow):
    """Single window hosting one session: scrollable log, prompt and input line."""

    def __init__(
        self,
        session: SessionLoop,
        theme: ThemeName = "dark",
    ) -> None:
        super().__init__()
        self._session = session
        self._theme: ThemeName = theme
        self.setWindowTitle("Unix Emulator")
        self.setMinimumSize(800, 500)

        self._build_actions()
        self._build_toolbar()
        self._build_layout()

    # UI building
    def _build_actions(self) -> None:
        self.action_clear = QAction("Clear view", self)
        self.action_clear.triggered.connect(self.clear_log)

        self.action_scrollback = QAction("Show scrollback", self)
        self.action_scrollback.triggered.connect(self._on_show_scrollback)

        self.action_toggle_theme = QAction("Toggle Theme", self)
        self.action_toggle_theme.triggered.connect(self._on_toggle_theme)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.action_clear)
        tb.addAction(self.action_scrollback)
        tb.addSeparator()
        tb.addAction(self.action_toggle_theme)
        self.addToolBar(tb)

    def _build_layout(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        font = monospace_font()

        self.log_view = QTextBrowser(central)
        self.log_view.setReadOnly(True)
        self.log_view.setFont(font)

        self.prompt_label = QLabel("> ", central)
        self.prompt_label.setFont(font)

        self.input_edit = TerminalInput(central)
        self.input_edit.setFont(font)
        self.input_edit.returnPressed.connect(self._on_submit)
        self.input_edit.escapePressed.connect(self._on_escape)

        input_row = QHBoxLayout()
        input_row.addWidget(self.prompt_label)
        input_row.addWidget(self.input_edit, 1)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self.log_view)
        layout.addLayout(input_row)
        self.input_edit.setFocus()

    # Rendering
    def _line_html(self, line: StyledLine) -> str:
        color = category_color(self._theme, line.category)
        text = _html.escape(line.text) or "&nbsp;"
        return f'<span style="color:{color}; white-space:pre-wrap;">{text}</span>'

    def append_lines(self, lines: Sequence[StyledLine]) -> None:
        for line in lines:
            self.log_view.append(self._line_html(line))
        self.log_view.moveCursor(QTextCursor.MoveOperation.End)

    def set_prompt(self, prompt: str) -> None:
        self.prompt_label.setText(prompt.rstrip())

    @Slot()
    def clear_log(self) -> None:
        self.log_view.clear()

    # Slots
    @Slot()
    def _on_submit(self) -> None:
        text = self.input_edit.text()
        self.input_edit.clear()
        self._session.submit(text)

    @Slot()
    def _on_escape(self) -> None:
        self._session.interrupt()

    @Slot()
    def _on_show_scrollback(self) -> None:
        self.clear_log()
        self.append_lines(self._session.scrollback())

    @Slot()
    def _on_toggle_theme(self) -> None:
        app = QApplication.instance()
        if app is None:
            return
        self._theme = toggle_theme(cast(QApplication, app), self._theme)
        self.clear_log()
        self.append_lines(self._session.state.visible_lines())

    @override
    def closeEvent(self, event: QCloseEvent) -> None:
        # Closing the window is an interrupt like Esc.
        self._session.interrupt()
        event.accept()


class QtDisplayAdapter(DisplayPort):
    """Display port forwarding session output to a TerminalWindow."""

    def __init__(self, window: TerminalWindow) -> None:
        self._window = window

    @override
    def show(self, lines: Sequence[StyledLine]) -> None:
        self._window.append_lines(lines)

    @override
    def set_prompt(self, prompt: str) -> None:
        self._window.set_prompt(prompt)

    @override
    def reset_view(self) -> None:
        self._window.clear_log()

    @override
    def close(self) -> None:
        self._window.close()
