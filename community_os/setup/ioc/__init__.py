from community_os.setup.ioc.container import (
    CoreProvider,
    MemoryPersistenceProvider,
    create_container,
    persistence_provider,
)

__all__ = [
    "CoreProvider",
    "MemoryPersistenceProvider",
    "create_container",
    "persistence_provider",
]
