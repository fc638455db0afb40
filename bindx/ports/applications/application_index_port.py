from abc import ABC, abstractmethod

from bindx.entities.ApplicationBundle import ApplicationBundle


class ApplicationIndexPort(ABC):
    @abstractmethod
    def scan_installed_applications(self) -> list[ApplicationBundle]:
        """
        Enumerate installed application bundles and the extensions they declare.

        Blocks until the scan is complete. Bundles whose manifest cannot be used
        are left out rather than failing the scan.

        Returns:
            Application bundles, in no particular order

        Raises:
            ScanTimeoutError: If the scan does not finish before its deadline
            ApplicationIndexError: If the scan cannot be run
        """
        raise NotImplementedError
