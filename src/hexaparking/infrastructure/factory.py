"""
Infrastructure factory for provider selection.

Selects storage implementations based on configuration:
- memory: Process-local dictionaries (default, tests)
- local: JSON files under a base directory

Usage:
    from hexaparking.infrastructure import InfrastructureFactory
    from hexaparking.config import get_settings

    # Option 1: From settings
    factory = InfrastructureFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="local", base_dir="/tmp/parking")

    # Get repositories
    parking_lot_repo = factory.get_parking_lot_repository()
    car_repo = factory.get_car_repository()

Repositories are created once per factory, so every caller of the same
factory shares one store.
"""

from typing import TYPE_CHECKING, Literal

from loguru import logger

from hexaparking.infrastructure.repositories import (
    CarRepository,
    ParkingLotRepository,
)

if TYPE_CHECKING:
    from hexaparking.config import Settings

InfrastructureProvider = Literal["memory", "local"]


class InfrastructureFactory:
    """
    Factory for creating infrastructure repository instances.

    Provides dependency injection for storage operations.
    """

    def __init__(self, provider: InfrastructureProvider | None = None, **config):
        """
        Initialize infrastructure factory.

        Args:
            provider: Infrastructure provider ("memory", "local").
                     If None, uses "memory" as default.
            **config: Provider-specific configuration options (base_dir)

        Raises:
            ValueError: If provider is not supported
        """
        if provider is None:
            provider = "memory"

        if provider not in ("memory", "local"):
            raise ValueError(f"Unsupported provider: {provider}")

        self.provider = provider
        self.config = config
        self._parking_lot_repository: ParkingLotRepository | None = None
        self._car_repository: CarRepository | None = None

        logger.info(f"Initialized InfrastructureFactory with provider: {provider}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "base_dir": settings.infrastructure_base_dir,
        }

        return cls(provider=settings.infrastructure_provider, **config)

    def get_parking_lot_repository(self) -> ParkingLotRepository:
        """
        Get parking lot repository (load and save ports) for configured provider.

        Returns:
            ParkingLotRepository implementation
        """
        if self._parking_lot_repository is not None:
            return self._parking_lot_repository

        if self.provider == "local":
            from hexaparking.infrastructure.implementations.local import (
                LocalParkingLotRepository,
            )

            base_dir = self.config.get("base_dir", "./.parking_data")
            self._parking_lot_repository = LocalParkingLotRepository(base_dir=base_dir)

        else:
            from hexaparking.infrastructure.implementations.memory import (
                MemoryParkingLotRepository,
            )

            self._parking_lot_repository = MemoryParkingLotRepository()

        return self._parking_lot_repository

    def get_car_repository(self) -> CarRepository:
        """
        Get car repository (load and save ports) for configured provider.

        Returns:
            CarRepository implementation
        """
        if self._car_repository is not None:
            return self._car_repository

        if self.provider == "local":
            from hexaparking.infrastructure.implementations.local import (
                LocalCarRepository,
            )

            base_dir = self.config.get("base_dir", "./.parking_data")
            self._car_repository = LocalCarRepository(base_dir=base_dir)

        else:
            from hexaparking.infrastructure.implementations.memory import (
                MemoryCarRepository,
            )

            self._car_repository = MemoryCarRepository()

        return self._car_repository
