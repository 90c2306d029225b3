"""Convert parsed CSS declarations into Tailwind utility classes."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .parser import Declaration
from .resolver import ArbitraryClass, ResolvedClass, ValueResolver

logger = logging.getLogger(__name__)


@dataclass
class ConversionOutcome:
    """Result buckets of one conversion.

    ``matched_classes`` follows declaration order. Every declaration ends up
    either there or in ``unsupported``; arbitrary-value classes also add a
    line to ``suggestions``.
    """
    matched_classes: List[str] = field(default_factory=list)
    unsupported: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


class DeclarationConverter:
    """Bucket declarations into matched, suggested and unsupported."""

    def __init__(self, resolver: ValueResolver):
        self.resolver = resolver

    def convert(self, declarations: Iterable[Declaration]) -> ConversionOutcome:
        """Convert declarations in order.

        Duplicates are kept; each declaration produces its own entry.

        Args:
            declarations: Parsed declarations

        Returns:
            ConversionOutcome for this call only
        """
        outcome = ConversionOutcome()
        for declaration in declarations:
            resolution = self.resolver.resolve(declaration.property, declaration.value)

            if isinstance(resolution, ResolvedClass):
                outcome.matched_classes.append(self._apply_important(resolution.class_name, declaration))
            elif isinstance(resolution, ArbitraryClass):
                class_name = self._apply_important(resolution.class_name, declaration)
                outcome.matched_classes.append(class_name)
                outcome.suggestions.append(
                    f"Consider using {class_name} for {declaration.property}: {declaration.value}"
                )
            else:
                outcome.unsupported.append(f"{declaration.property}: {declaration.value}")

        logger.debug(
            f"Converted declarations: {len(outcome.matched_classes)} matched, "
            f"{len(outcome.unsupported)} unsupported"
        )
        return outcome

    @staticmethod
    def _apply_important(class_name: str, declaration: Declaration) -> str:
        return f"!{class_name}" if declaration.important else class_name

# Exported names
__all__ = ['ConversionOutcome', 'DeclarationConverter']
