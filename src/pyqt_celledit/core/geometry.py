"""Widget geometry helpers."""

from PyQt6.QtWidgets import QWidget

from pyqt_celledit.protocols import NodeBox


def widget_box(widget: QWidget) -> NodeBox:
    """
    Layout box of ``widget`` relative to its parent.

    Boxes are always reported visible; callers that care about visibility
    check the widget itself.
    """
    geometry = widget.geometry()
    return NodeBox.from_rect(
        top=geometry.y(),
        left=geometry.x(),
        width=geometry.width(),
        height=geometry.height(),
        visible=True,
    )
