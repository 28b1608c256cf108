"""Dependency container wiring for the catalog."""

from dataclasses import dataclass

from photo_catalog.adapters.file_snapshot_store import FileSnapshotStore
from photo_catalog.app_logging import configure_logging
from photo_catalog.config import Settings
from photo_catalog.services.accounts import AccountService
from photo_catalog.services.catalog import CatalogService
from photo_catalog.services.datastore import DataStore, SnapshotStore, StockConfig


@dataclass
class AppContainer:
    """Holds process-wide dependencies for the presentation layer."""

    settings: Settings
    datastore: DataStore
    catalog_service: CatalogService
    account_service: AccountService

    def close(self) -> None:
        """Write the final snapshot."""
        self.datastore.close()


def build_container(
    settings: Settings | None = None, store: SnapshotStore | None = None
) -> AppContainer:
    """Create the default container with an initialized DataStore."""
    configure_logging()
    resolved_settings = settings or Settings()
    datastore = DataStore(
        store=store or FileSnapshotStore(resolved_settings.snapshot_path),
        stock=StockConfig(
            directory=resolved_settings.stock_dir,
            password=resolved_settings.stock_password,
            min_photos=resolved_settings.stock_min_photos,
            max_photos=resolved_settings.stock_max_photos,
        ),
    )
    datastore.initialize()
    return AppContainer(
        settings=resolved_settings,
        datastore=datastore,
        catalog_service=CatalogService(datastore),
        account_service=AccountService(datastore),
    )
