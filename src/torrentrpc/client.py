"""Transmission RPC client with one method per RPC call."""

from threading import Event
from typing import Any

from .models import (
    Session,
    SessionStats,
    TorrentAddResponse,
    TorrentGetResponse,
)
from .request import (
    BlocklistUpdateRequest,
    FreeSpaceRequest,
    PortTestRequest,
    QueueMoveBottomRequest,
    QueueMoveDownRequest,
    QueueMoveTopRequest,
    QueueMoveUpRequest,
    SessionCloseRequest,
    SessionGetRequest,
    SessionSetRequest,
    SessionStatsRequest,
    TorrentAddRequest,
    TorrentGetRequest,
    TorrentReannounceRequest,
    TorrentRemoveRequest,
    TorrentRenamePathRequest,
    TorrentSetLocationRequest,
    TorrentSetRequest,
    TorrentStartNowRequest,
    TorrentStartRequest,
    TorrentStopRequest,
    TorrentVerifyRequest,
)
from .transport import Transport


class Client(Transport):
    """Transmission RPC client.

    Each method builds the matching request object and runs it; see
    torrentrpc.request for the arguments. Torrent identifiers can be ints,
    hash strings or "recently-active"; no identifiers means all torrents.
    """

    # ========================================================================
    # Torrent Actions
    # ========================================================================

    def torrent_start(self, *ids: Any, cancel: Event | None = None) -> None:
        TorrentStartRequest(*ids).do(self, cancel=cancel)

    def torrent_start_now(
        self, *ids: Any, cancel: Event | None = None
    ) -> None:
        TorrentStartNowRequest(*ids).do(self, cancel=cancel)

    def torrent_stop(self, *ids: Any, cancel: Event | None = None) -> None:
        TorrentStopRequest(*ids).do(self, cancel=cancel)

    def torrent_verify(self, *ids: Any, cancel: Event | None = None) -> None:
        TorrentVerifyRequest(*ids).do(self, cancel=cancel)

    def torrent_reannounce(
        self, *ids: Any, cancel: Event | None = None
    ) -> None:
        TorrentReannounceRequest(*ids).do(self, cancel=cancel)

    # ========================================================================
    # Torrent Accessors & Mutators
    # ========================================================================

    def torrent_set(
        self, request: TorrentSetRequest, *, cancel: Event | None = None
    ) -> None:
        """Apply a torrent-set request; an empty one is not sent."""
        request.do(self, cancel=cancel)

    def torrent_get(
        self,
        *ids: Any,
        fields: list[str] | None = None,
        cancel: Event | None = None,
    ) -> TorrentGetResponse:
        """Fetch torrents, with all known fields unless fields is given."""
        return TorrentGetRequest(*ids, fields=fields).do(self, cancel=cancel)

    def torrent_add(
        self, request: TorrentAddRequest, *, cancel: Event | None = None
    ) -> TorrentAddResponse:
        return request.do(self, cancel=cancel)

    def torrent_remove(
        self,
        *ids: Any,
        delete_local_data: bool = False,
        cancel: Event | None = None,
    ) -> None:
        TorrentRemoveRequest(*ids, delete_local_data=delete_local_data).do(
            self, cancel=cancel
        )

    def torrent_set_location(
        self,
        location: str,
        *ids: Any,
        move: bool = False,
        cancel: Event | None = None,
    ) -> None:
        TorrentSetLocationRequest(location, *ids, move=move).do(
            self, cancel=cancel
        )

    def torrent_rename_path(
        self, path: str, name: str, *ids: Any, cancel: Event | None = None
    ) -> None:
        """Rename a file or directory; exactly one torrent id is allowed."""
        TorrentRenamePathRequest(path, name, *ids).do(self, cancel=cancel)

    # ========================================================================
    # Session
    # ========================================================================

    def session_set(
        self, request: SessionSetRequest, *, cancel: Event | None = None
    ) -> None:
        """Apply a session-set request; an empty one is not sent."""
        request.do(self, cancel=cancel)

    def session_get(self, *, cancel: Event | None = None) -> Session:
        return SessionGetRequest().do(self, cancel=cancel)

    def session_stats(self, *, cancel: Event | None = None) -> SessionStats:
        return SessionStatsRequest().do(self, cancel=cancel)

    def session_close(self, *, cancel: Event | None = None) -> None:
        """Ask the daemon to shut down."""
        SessionCloseRequest().do(self, cancel=cancel)

    session_shutdown = session_close

    def blocklist_update(self, *, cancel: Event | None = None) -> int:
        """Reload the blocklist and return its size."""
        return BlocklistUpdateRequest().do(self, cancel=cancel)

    def port_test(self, *, cancel: Event | None = None) -> bool:
        """Check whether the peer port is open."""
        return PortTestRequest().do(self, cancel=cancel)

    def free_space(self, path: str, *, cancel: Event | None = None) -> int:
        """Free space in bytes of a directory on the daemon host."""
        return FreeSpaceRequest(path).do(self, cancel=cancel)

    # ========================================================================
    # Queue
    # ========================================================================

    def queue_move_top(self, *ids: Any, cancel: Event | None = None) -> None:
        QueueMoveTopRequest(*ids).do(self, cancel=cancel)

    def queue_move_up(self, *ids: Any, cancel: Event | None = None) -> None:
        QueueMoveUpRequest(*ids).do(self, cancel=cancel)

    def queue_move_down(self, *ids: Any, cancel: Event | None = None) -> None:
        QueueMoveDownRequest(*ids).do(self, cancel=cancel)

    def queue_move_bottom(
        self, *ids: Any, cancel: Event | None = None
    ) -> None:
        QueueMoveBottomRequest(*ids).do(self, cancel=cancel)
