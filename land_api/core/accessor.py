"""
Process-wide holder for a lazily built external-resource handle.
"""
import logging
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import NotInitializedError

logger = logging.getLogger(__name__)

HandleT = TypeVar("HandleT")


class ResourceAccessor(Generic[HandleT]):
    """
    Owns a single handle built by `factory(config)`.

    Requests call `acquire()`: if no handle is live it initializes once and
    retries `get()` once. Anything that fails after that propagates.
    """

    def __init__(self, factory: Callable[[Any], HandleT], config: Any = None, name: str = "resource"):
        self.factory = factory
        self.config = config
        self.name = name
        self._handle: Optional[HandleT] = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._handle is not None

    def initialize(self, config: Any = None) -> HandleT:
        """Build a new handle and make it the live one, replacing any previous handle."""
        handle = self.factory(config if config is not None else self.config)
        # Only the swap is locked; the factory may block on the network
        with self._lock:
            self._handle = handle
        logger.debug(f"Initialized {self.name} handle")
        return handle

    def get(self) -> HandleT:
        handle = self._handle
        if handle is None:
            raise NotInitializedError(f"{self.name} has not been initialized")
        return handle

    def invalidate(self) -> None:
        """Drop the live handle so the next `acquire()` rebuilds it."""
        with self._lock:
            self._handle = None
        logger.debug(f"Invalidated {self.name} handle")

    def acquire(self) -> HandleT:
        try:
            return self.get()
        except NotInitializedError:
            self.initialize()
            return self.get()
