"""List marker resolution with per-render counter state."""

import logging
from typing import Optional

from ..processing.models import NumberingDefinitions


logger = logging.getLogger(__name__)

BULLET_MARKER = "-"


class ListCounterState:
    """Running counts of ordinal list items keyed by (list id, level).

    Owned by a single render. Counters are never reset, so every item that
    shares a (list id, level) pair continues the same sequence, even across
    lists separated by other content.
    """

    def __init__(self):
        self._counters: dict[tuple[int, int], int] = {}

    def increment(self, list_id: int, level: int) -> int:
        key = (list_id, level)
        self._counters[key] = self._counters.get(key, 0) + 1
        return self._counters[key]


class ListNumberingResolver:
    """Produces bullet or ordinal markers for list items.

    All ordinal formats (decimal, roman, letter) render as Arabic numerals
    followed by a period.
    """

    def __init__(
        self,
        definitions: NumberingDefinitions,
        state: Optional[ListCounterState] = None
    ):
        """Initialize the resolver.

        Args:
            definitions: Numbering definitions of the document.
            state: Counter state; a fresh one is created when omitted.
        """
        self.definitions = definitions
        self.state = state if state is not None else ListCounterState()

    def resolve_marker(self, list_id: int, level: int) -> str:
        """Return the marker for the next item of a list level.

        Args:
            list_id: Numbering instance id of the paragraph.
            level: Indent level, starting at 0.

        Returns:
            ``-`` for bullets and unresolvable definitions, ``N.`` for ordinals.
        """
        number_format = self.definitions.format_for(list_id, level)
        if number_format is None:
            logger.debug(f"No numbering format for list {list_id} level {level}")
            return BULLET_MARKER

        if not number_format.is_ordinal:
            return BULLET_MARKER

        return f"{self.state.increment(list_id, level)}."
