"""
pyqt-celledit: in-place cell editors for PyQt6 grids.

A pluggable editor framework that lets a host grid open a small control
over a cell, track whether the user changed the value, validate it, and
commit or discard the result.

Architecture:
- Protocols: Editor ABC, value types, widget ABCs and adapters, configuration
- Core: edit lock, edit session, geometry and parsing helpers
- Editors: text, integer, date, yes/no, checkbox, percent-complete,
  long-text and the composite editor
- Theming: editor color scheme and stylesheet generation
"""

__version__ = "0.1.0"

from .exceptions import CellEditError, EditorStateError, EditLockError

__all__ = [
    "__version__",
    "CellEditError",
    "EditorStateError",
    "EditLockError",
]
