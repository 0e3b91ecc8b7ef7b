"""Dependency injection container.

Explicit registration and resolution without external frameworks.
Singletons are process-scoped: the default container hands every
collaborator the same BoundaryDataCache and the same VisitedLedger.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(FootprintService)

        # Testing
        container = Container.create_default(config)
        container.register(KeyValueStorePort, lambda: InMemoryStore())
        service = container.resolve(FootprintService)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a type.

        Re-registering a type drops its cached singleton.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.boundary import HttpBoundarySource
        from .adapters.cache import InMemoryCache
        from .adapters.storage import JsonFileStore, LedgerRepository
        from .ports.boundary import BoundarySourcePort
        from .ports.storage import KeyValueStorePort
        from .services import (
            BoundaryDataCache,
            FootprintService,
            LocationResolver,
            VisitedLedger,
        )

        config = config or get_config()
        container = cls(config=config)

        # Storage
        container.register(
            KeyValueStorePort,
            lambda: JsonFileStore(config.storage),
        )
        container.register(
            LedgerRepository,
            lambda: LedgerRepository(
                store=container.resolve(KeyValueStorePort),
                key=config.storage.ledger_key,
            ),
        )

        # Resolution and ledger
        container.register(LocationResolver, lambda: LocationResolver())
        container.register(
            VisitedLedger,
            lambda: VisitedLedger(repository=container.resolve(LedgerRepository)),
        )

        # Boundary data (one shared cache per process)
        container.register(
            BoundarySourcePort,
            lambda: HttpBoundarySource(config.boundary),
        )
        container.register(
            BoundaryDataCache,
            lambda: BoundaryDataCache(
                source=container.resolve(BoundarySourcePort),
                cache=InMemoryCache(name="boundary"),
            ),
        )

        # Main service
        def create_footprint_service() -> FootprintService:
            return FootprintService(
                resolver=container.resolve(LocationResolver),
                ledger=container.resolve(VisitedLedger),
                error_display_seconds=config.feedback.error_display_seconds,
            )

        container.register(FootprintService, create_footprint_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
