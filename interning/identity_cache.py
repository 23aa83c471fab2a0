"""Identity cache that hands out one canonical alias per key."""
import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Alias:
    """Shared value object; equality and hash follow the wrapped id."""
    id: uuid.UUID


def new_alias() -> Alias:
    """Create an alias around a freshly generated identifier."""
    return Alias(id=uuid.uuid4())


class IdentityCache:
    """
    Unbounded interning cache.

    Every lookup of an equal key yields the very same Alias instance.
    Entries are never evicted.
    """

    def __init__(self, factory: Optional[Callable[[], Alias]] = None):
        """
        Initialize an empty cache.

        Args:
            factory: Zero-argument callable building the value for a new key
                (default: new_alias)
        """
        self._factory = factory or new_alias
        self._aliases: Dict[str, Alias] = {}
        self._lock = threading.Lock()

    def get_or_create(self, key: str) -> Alias:
        """
        Return the canonical alias for a key, creating it on first use.

        Args:
            key: Lookup key; any string, including the empty string

        Returns:
            The Alias stored under key

        Raises:
            InvalidArgumentError: If key is not a string
        """
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"Cache key must be a string, got {type(key).__name__}"
            )

        # Check and insert under one lock so racing callers agree on the value
        with self._lock:
            alias = self._aliases.get(key)
            if alias is None:
                alias = self._factory()
                self._aliases[key] = alias
                logger.debug(f"Created alias for key '{key}'")
            return alias

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return isinstance(key, str) and key in self._aliases

    def __len__(self) -> int:
        with self._lock:
            return len(self._aliases)
