"""Sound list orchestration.

Keeps the section-grouped sound list current as sounds are imported and
deleted, and routes list interactions to the playback, file-picker and
clipboard collaborators.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, assert_never

from .models.catalog import AddEntry, AssetItem, CatalogSnapshot, SoundListItem
from .models.sound import AudioHandle
from .processors.catalog import SoundCatalog
from .services.storage import DeleteResult, SaveResult, SoundAssetStore
from .utils.events import ReplaySignal, Signal, Subscription

logger = logging.getLogger(__name__)


class CoordinatorState(Enum):
    UNSTARTED = "unstarted"
    LOADING = "loading"
    READY = "ready"


class SoundListCoordinator:
    """Orchestrates the sound list.

    Every catalog change (the initial load, each import request and each
    delete request) rebuilds the catalog exactly once and publishes the
    snapshot on ``catalog``. ``catalog`` replays the latest snapshot to late
    subscribers without rebuilding.

    Outputs:
        catalog: snapshots, for display.
        play_requests: handle of a selected sound.
        picker_requests: fired when the "add sound" row is selected.
        copy_name_requests: display names of sounds whose copy action was
            used, drawn from the assets of the latest snapshot only.

    Triggers are serialized: one raised while a snapshot is still being
    delivered (for example an import from inside a catalog listener) is
    queued and rebuilt only after every listener has seen the current
    snapshot. Import and delete requests perform the initial load first if
    it has not happened yet.

    Store failures are logged and otherwise ignored; the rebuilt list simply
    reflects whatever is on disk.
    """

    def __init__(self, store: SoundAssetStore, catalog: SoundCatalog) -> None:
        self._store = store
        self._catalog = catalog
        self._state = CoordinatorState.UNSTARTED

        self.catalog: ReplaySignal[CatalogSnapshot] = ReplaySignal()
        self.play_requests: Signal[AudioHandle] = Signal()
        self.picker_requests: Signal[None] = Signal()
        self.copy_name_requests: Signal[str] = Signal()

        self._copy_subscriptions: list[Subscription] = []
        self._pending_triggers = 0
        self._dispatching = False

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def snapshot(self) -> CatalogSnapshot | None:
        """Latest published snapshot, or None before the first load."""
        return self.catalog.latest

    def start(self) -> None:
        """Perform the initial load. Later calls do nothing."""
        if self._state is not CoordinatorState.UNSTARTED:
            return
        self._state = CoordinatorState.LOADING
        self._catalog_changed()

    def subscribe_catalog(
        self, listener: Callable[[CatalogSnapshot], None]
    ) -> Subscription:
        """Listen for snapshots, starting the coordinator if needed.

        Once a snapshot exists it is delivered immediately.
        """
        subscription = self.catalog.subscribe(listener)
        self.start()
        return subscription

    def select(self, item: SoundListItem) -> None:
        """Route a tapped list row to playback or the file picker."""
        if isinstance(item, AssetItem):
            self.play_requests.emit(item.asset.handle)
        elif isinstance(item, AddEntry):
            self.picker_requests.emit(None)
        else:
            assert_never(item)

    def import_sound(self, source: Path) -> SaveResult:
        """Import a sound file picked by the user."""
        self.start()
        result = self._store.save(source)
        if not result.succeeded:
            logger.info(f"Import of {source.name} failed, list unchanged: {result.error}")
        elif result.mirror_error is not None:
            # The primary copy is authoritative; a stale mirror is accepted
            logger.info(f"Imported {source.name} without mirror: {result.mirror_error}")

        self._catalog_changed()
        return result

    def delete_sound(self, item: SoundListItem) -> DeleteResult | None:
        """Delete a custom sound.

        The "add sound" row and default sounds are not deletable; the request
        still refreshes the list. Returns None when nothing was deleted.
        """
        self.start()
        result = None
        if isinstance(item, AssetItem):
            if item.asset.is_default:
                logger.warning(f"Refusing to delete default sound {item.asset.name}")
            else:
                result = self._store.delete(item.asset.path)
                if not result.succeeded:
                    logger.info(f"Delete of {item.asset.name} failed: {result.error}")
                elif result.mirror_error is not None:
                    logger.info(
                        f"Deleted {item.asset.name}, mirror kept: {result.mirror_error}"
                    )
        elif isinstance(item, AddEntry):
            pass
        else:
            assert_never(item)

        self._catalog_changed()
        return result

    def close(self) -> None:
        """Detach from the assets of the latest snapshot."""
        self._cancel_copy_subscriptions()

    def _catalog_changed(self) -> None:
        """Rebuild and publish once per trigger, in arrival order."""
        self._pending_triggers += 1
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending_triggers:
                self._pending_triggers -= 1
                snapshot = self._catalog.build()
                self._switch_copy_sources(snapshot)
                self._state = CoordinatorState.READY
                self.catalog.emit(snapshot)
        finally:
            self._dispatching = False

    def _switch_copy_sources(self, snapshot: CatalogSnapshot) -> None:
        """Listen to the copy action of each asset in ``snapshot`` only."""
        self._cancel_copy_subscriptions()
        self._copy_subscriptions = [
            asset.copy_requested.subscribe(self.copy_name_requests.emit)
            for asset in snapshot.assets()
        ]

    def _cancel_copy_subscriptions(self) -> None:
        for subscription in self._copy_subscriptions:
            subscription.cancel()
        self._copy_subscriptions = []
