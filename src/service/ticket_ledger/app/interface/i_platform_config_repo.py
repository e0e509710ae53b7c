from abc import ABC, abstractmethod

from src.service.ticket_ledger.domain.entity.platform_config_entity import PlatformConfig


class IPlatformConfigRepo(ABC):
    @abstractmethod
    async def get(self) -> PlatformConfig:
        pass

    @abstractmethod
    async def save(self, *, config: PlatformConfig) -> PlatformConfig:
        pass
