from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from unix_emulator.container import DependencyContainer

from .terminal_window import QtDisplayAdapter, TerminalWindow
from .theme import apply_theme


def main(
    argv: Optional[list[str]] = None,
    deps: Optional[DependencyContainer] = None,
) -> int:
    argv = argv if argv is not None else sys.argv
    if deps is None:
        from unix_emulator.container import container

        deps = container

    app = QApplication(argv)
    theme = apply_theme(app, deps.get_settings().theme)

    session = deps.create_session_loop()
    win = TerminalWindow(session, theme=theme)
    session.attach_display(QtDisplayAdapter(win))
    session.start()
    win.show()
    app.exec()
    return 0


if __name__ == "__main__":  # pragma: no cover
    from unix_emulator.cli import gui

    raise SystemExit(gui())
