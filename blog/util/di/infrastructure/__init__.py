"""Infrastructure DI providers."""

from blog.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
