"""
Editor registry with metaclass auto-registration.

Concrete editors register themselves when their classes are defined, so a
host grid can resolve editors by id ("text", "integer", ...) instead of
importing each class.

Design:
- EditorMeta metaclass handles auto-registration
- EDITOR_IMPLEMENTATIONS: Global registry of all editor types
- EDITOR_CAPABILITIES: Tracks which optional hooks each editor overrides
- Fail-loud on unknown editor ids
"""

from abc import ABCMeta
from typing import Dict, Type, Set
import logging

from pyqt_celledit.exceptions import EditorStateError

logger = logging.getLogger(__name__)

# Maps editor_id -> editor class
EDITOR_IMPLEMENTATIONS: Dict[str, Type] = {}

# Maps editor class -> names of optional hooks it overrides
EDITOR_CAPABILITIES: Dict[Type, Set[str]] = {}

OPTIONAL_HOOKS = ("show", "hide", "position")


class EditorMeta(ABCMeta):
    """
    Metaclass for automatic editor registration.

    1. Only registers concrete implementations (no abstract methods)
    2. Requires _editor_id attribute for identification
    3. Records which optional hooks (show/hide/position) the class overrides

    Example:
        class TextEditor(Editor):
            _editor_id = "text"
            ...

    TextEditor lands in EDITOR_IMPLEMENTATIONS["text"] when the class is defined.
    """

    def __new__(mcs, name, bases, attrs):
        new_class = super().__new__(mcs, name, bases, attrs)

        if getattr(new_class, '__abstractmethods__', None):
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{set(new_class.__abstractmethods__)}"
            )
            return new_class

        editor_id = attrs.get('_editor_id')
        if editor_id is None:
            logger.debug(f"Skipping registration for {name} - no _editor_id attribute")
            return new_class

        if editor_id in EDITOR_IMPLEMENTATIONS:
            existing = EDITOR_IMPLEMENTATIONS[editor_id]
            logger.warning(
                f"Editor ID '{editor_id}' already registered to {existing.__name__}. "
                f"Overwriting with {name}."
            )

        EDITOR_IMPLEMENTATIONS[editor_id] = new_class
        EDITOR_CAPABILITIES[new_class] = _overridden_hooks(new_class)

        logger.debug(
            f"Auto-registered {name} as '{editor_id}' with hooks: "
            f"{sorted(EDITOR_CAPABILITIES[new_class])}"
        )
        return new_class


def _overridden_hooks(editor_class: Type) -> Set[str]:
    """Names of optional hooks defined below the root Editor class."""
    hooks = set()
    for hook in OPTIONAL_HOOKS:
        owner = next(klass for klass in editor_class.__mro__ if hook in vars(klass))
        # The root contract only provides the no-op defaults
        if not vars(owner).get('_is_editor_root', False):
            hooks.add(hook)
    return hooks


def get_editor_class(editor_id: str) -> Type:
    """
    Get editor class by ID.

    Raises:
        EditorStateError: If editor_id is not registered
    """
    if editor_id not in EDITOR_IMPLEMENTATIONS:
        raise EditorStateError(
            f"No editor registered with ID '{editor_id}'. "
            f"Available editors: {list(EDITOR_IMPLEMENTATIONS.keys())}"
        )
    return EDITOR_IMPLEMENTATIONS[editor_id]


def create_editor_prototype(editor_id: str):
    """Build an unbound editor prototype suitable for Column.editor."""
    return get_editor_class(editor_id)()


def get_editor_capabilities(editor_class: Type) -> Set[str]:
    """Optional hooks (show/hide/position) the editor class overrides."""
    return EDITOR_CAPABILITIES.get(editor_class, set())


def list_editors_with_capability(hook: str) -> list[Type]:
    """
    Find all editors that override a given optional hook.

    Example:
        >>> [e.__name__ for e in list_editors_with_capability("position")]
        ['DateEditor', 'LongTextEditor']
    """
    return [
        editor_class
        for editor_class, hooks in EDITOR_CAPABILITIES.items()
        if hook in hooks
    ]
