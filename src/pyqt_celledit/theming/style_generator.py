"""
QStyleSheet generator for cell editors.

Generates stylesheet strings from EditorColorScheme objects so editors
never hardcode colors.
"""

from .color_scheme import EditorColorScheme


class EditorStyleGenerator:
    """
    Generates QStyleSheet strings from EditorColorScheme objects.
    """

    def __init__(self, color_scheme: EditorColorScheme):
        """
        Initialize the style generator with a color scheme.

        Args:
            color_scheme: EditorColorScheme instance to use for styling
        """
        self.color_scheme = color_scheme

    def generate_inline_input_style(self) -> str:
        """
        Generate QStyleSheet for controls rendered inside a cell.

        Returns:
            str: QStyleSheet for line edits and combo boxes
        """
        cs = self.color_scheme
        return f"""
            QLineEdit, QComboBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 0;
                margin: 0;
                padding: 0;
            }}
            QLineEdit:focus, QComboBox:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
        """

    def generate_percent_picker_style(self) -> str:
        """
        Generate QStyleSheet for the percent-complete quick-pick buttons.

        Returns:
            str: QStyleSheet for the picker frame and its buttons
        """
        cs = self.color_scheme
        return f"""
            QFrame {{
                background-color: {cs.to_hex(cs.picker_bg)};
            }}
            QPushButton {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: none;
                padding: 2px 6px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
        """

    def generate_popup_style(self) -> str:
        """
        Generate QStyleSheet for detached editor popups.

        Returns:
            str: QStyleSheet for the popup frame and its text area
        """
        cs = self.color_scheme
        return f"""
            QFrame#cellEditorPopup {{
                background-color: {cs.to_hex(cs.popup_bg)};
                border: 3px solid {cs.to_hex(cs.popup_border)};
                border-radius: 10px;
                padding: 5px;
            }}
            QPlainTextEdit {{
                background-color: {cs.to_hex(cs.popup_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 0;
            }}
        """
