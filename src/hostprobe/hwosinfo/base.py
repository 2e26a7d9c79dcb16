from abc import ABC, abstractmethod

from hostprobe.hwosinfo.models import SystemInfo


class PlatformAdapter(ABC):
    name = "unknown"

    @abstractmethod
    def collect(self) -> SystemInfo:
        """
        Take one snapshot of the host.
        Raises CollectionError only when the platform's critical query fails.
        """
        pass
