"""unix_emulator package: an interactive interpreter for a small fixed set of
Unix-like commands, rendered in a terminal or a single Qt window.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
