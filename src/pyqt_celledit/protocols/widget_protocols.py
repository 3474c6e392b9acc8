"""
Widget ABC contracts for the controls that cell editors wrap.

Editors talk to their Qt controls only through these contracts, so each
editor reads the same regardless of whether its control is a line edit,
a combo box, a check box or a text area.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """
    ABC for controls that can return their live value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the control.

        Returns:
            The control's live value, without any parsing.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for controls that can display a value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the control's value.

        Args:
            value: The value to display. None clears the control.
        """
        pass


class TextSelectable(ABC):
    """
    ABC for controls whose content can be selected for quick overwrite.
    """

    @abstractmethod
    def select_all(self) -> None:
        """Select the whole content so the next keystroke replaces it."""
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for controls that emit change signals.

    Eliminates duck typing of signal names (textChanged vs
    currentIndexChanged vs stateChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the control's change signal.

        Args:
            callback: Called with the new value whenever it changes.
        """
        pass
