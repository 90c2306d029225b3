"""Render utility classes in the requested output mode."""

from typing import List, Optional, Sequence
from typing_extensions import Literal

from ..utils.config import COMPONENT_SELECTOR

OutputMode = Literal['classes', 'inline', 'component']

OUTPUT_MODES: List[str] = ['classes', 'inline', 'component']


def format_classes(classes: Sequence[str], mode: Optional[str] = 'classes',
                   selector: str = COMPONENT_SELECTOR) -> str:
    """Format utility classes.

    Args:
        classes: Utility classes in output order
        mode: ``classes`` (space separated), ``inline`` (a ``class`` attribute)
            or ``component`` (an ``@apply`` block); anything else is
            treated as ``classes``
        selector: Selector of the ``component`` block

    Returns:
        Formatted string
    """
    joined = ' '.join(classes)

    if mode == 'inline':
        return f'class="{joined}"'

    if mode == 'component':
        return '\n'.join([f"{selector} {{", f"  @apply {joined};", "}"])

    return joined

# Exported names
__all__ = ['OutputMode', 'OUTPUT_MODES', 'format_classes']
