import logging

from .models import ListingKey, Problem

logger = logging.getLogger(__name__)


class ProblemCache:
    """Extracted listings by key. Only ``clear`` ever drops entries."""

    def __init__(self) -> None:
        self._entries: dict[ListingKey, list[Problem]] = {}

    def get(self, key: ListingKey) -> list[Problem] | None:
        return self._entries.get(key)

    def put(self, key: ListingKey, problems: list[Problem]) -> None:
        logger.debug(
            "caching %d problems for %s:%s", len(problems), key.kind.value, key.value
        )
        self._entries[key] = list(problems)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: ListingKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
