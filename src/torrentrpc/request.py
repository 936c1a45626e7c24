"""Request objects, one per Transmission RPC method.

Requests are short-lived values: build one, configure it with the fluent
``with_*`` setters, then run it with ``do(client)``. Setters never modify
the request they are called on; they return an updated copy, so a
configured request can be reused as a template.

Methods that support partial updates (torrent-set, session-set) and
torrent-add only send the arguments that were explicitly set. Every
settable field starts as None, meaning "leave unchanged on the server".
"""

import copy
import os
from dataclasses import dataclass, field, fields
from threading import Event
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from .errors import ClientError, InvalidResponseError, SingleTorrentError
from .ids import check_identifier_list
from .models import (
    DEFAULT_TORRENT_GET_FIELDS,
    Session,
    SessionStats,
    TorrentAddResponse,
    TorrentGetResponse,
    Units,
    wire_names,
)
from .types import Encryption, Mode, encode_value
from .util.misc import is_torrent_link

if TYPE_CHECKING:
    from .transport import Transport


def _arg(name: str) -> Any:
    """Declare an optional request argument with its wire name."""
    return field(default=None, metadata={"wire": name})


class Request:
    """Base class of all RPC requests."""

    method: str = ""

    def arguments(self) -> dict[str, Any] | None:
        """Build the "arguments" object of the request envelope."""
        return {}

    def decode(self, arguments: Any) -> Any:
        """Convert the response "arguments" object into the result."""
        return None

    def do(self, client: "Transport", *, cancel: Event | None = None) -> Any:
        """Execute the request with the given client.

        Args:
            client: Client used to send the request
            cancel: Optional event; once set, no further attempt is made

        Returns:
            The decoded response, or None for methods without a result
        """
        return client.do(
            self.method, self.arguments(), self.decode, cancel=cancel
        )


# ============================================================================
# Identifier-list Requests
# ============================================================================


class IdsRequest(Request):
    """Request whose only argument is a torrent identifier list.

    Identifiers can be ints, 40-character hash strings (or bytes), or
    "recently-active". No identifiers means all torrents.
    """

    def __init__(self, *ids: Any) -> None:
        self.ids = ids

    def arguments(self) -> dict[str, Any]:
        args = {}
        ids = check_identifier_list(*self.ids)
        if ids is not None:
            args["ids"] = ids
        return args

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.ids!r}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.ids == other.ids


class TorrentStartRequest(IdsRequest):
    method = "torrent-start"


class TorrentStartNowRequest(IdsRequest):
    """Start torrents, bypassing the download queue."""

    method = "torrent-start-now"


class TorrentStopRequest(IdsRequest):
    method = "torrent-stop"


class TorrentVerifyRequest(IdsRequest):
    method = "torrent-verify"


class TorrentReannounceRequest(IdsRequest):
    method = "torrent-reannounce"


class QueueMoveTopRequest(IdsRequest):
    method = "queue-move-top"


class QueueMoveUpRequest(IdsRequest):
    method = "queue-move-up"


class QueueMoveDownRequest(IdsRequest):
    method = "queue-move-down"


class QueueMoveBottomRequest(IdsRequest):
    method = "queue-move-bottom"


# ============================================================================
# Change-set Requests
# ============================================================================


class ChangeSetRequest(Request):
    """Request that transmits only the arguments the caller has set.

    Subclasses are dataclasses whose settable fields default to None.
    The change set is the set of field names holding a value; only those
    fields are projected into the request arguments, under their wire
    names.
    """

    def __init__(self, *ids: Any, **values: Any) -> None:
        self.ids = ids
        names = self.wire_names()
        for name in names:
            setattr(self, name, values.pop(name, None))
        if values:
            raise TypeError(
                f"{type(self).__name__} got unexpected arguments: "
                f"{', '.join(sorted(values))}"
            )

    def wire_names(self) -> dict[str, str]:
        """Map settable field names to wire names."""
        return {
            f.name: f.metadata["wire"]
            for f in fields(self)
            if "wire" in f.metadata
        }

    @property
    def changed(self) -> frozenset[str]:
        """Names of the fields that will be transmitted."""
        return frozenset(
            name
            for name in self.wire_names()
            if getattr(self, name) is not None
        )

    def changes(self) -> dict[str, Any]:
        """Project the changed fields into wire-named arguments."""
        return {
            wire: encode_value(getattr(self, name))
            for name, wire in self.wire_names().items()
            if getattr(self, name) is not None
        }

    def with_ids(self, *ids: Any):
        """Set the torrent identifier list."""
        clone = copy.copy(self)
        clone.ids = ids
        return clone

    def _with(self, **values: Any):
        clone = copy.copy(self)
        for name, value in values.items():
            setattr(clone, name, value)
        return clone


def _file_indices(values: Iterable[int]) -> list[int]:
    """Check that every value is a file index (an int, 0 or more)."""
    indices = list(values)
    for index in indices:
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise ValueError(f"Invalid file index: {index!r}")
    return indices


@dataclass(init=False, eq=True, repr=True)
class TorrentSetRequest(ChangeSetRequest):
    """torrent-set: change settings of one or more torrents.

    Note: speed limits are in KBps. A request with no changed fields is
    a no-op and makes no network call.
    """

    method = "torrent-set"

    ids: tuple[Any, ...] = ()
    bandwidth_priority: int | None = _arg("bandwidthPriority")
    download_limit: int | None = _arg("downloadLimit")
    download_limited: bool | None = _arg("downloadLimited")
    files_wanted: list[int] | None = _arg("files-wanted")
    files_unwanted: list[int] | None = _arg("files-unwanted")
    honors_session_limits: bool | None = _arg("honorsSessionLimits")
    labels: list[str] | None = _arg("labels")
    location: str | None = _arg("location")
    peer_limit: int | None = _arg("peer-limit")
    priority_high: list[int] | None = _arg("priority-high")
    priority_low: list[int] | None = _arg("priority-low")
    priority_normal: list[int] | None = _arg("priority-normal")
    queue_position: int | None = _arg("queuePosition")
    seed_idle_limit: int | None = _arg("seedIdleLimit")
    seed_idle_mode: Mode | None = _arg("seedIdleMode")
    seed_ratio_limit: float | None = _arg("seedRatioLimit")
    seed_ratio_mode: Mode | None = _arg("seedRatioMode")
    tracker_add: list[str] | None = _arg("trackerAdd")
    tracker_remove: list[int] | None = _arg("trackerRemove")
    tracker_replace: list[Any] | None = _arg("trackerReplace")
    upload_limit: int | None = _arg("uploadLimit")
    upload_limited: bool | None = _arg("uploadLimited")

    def arguments(self) -> dict[str, Any]:
        args = self.changes()
        ids = check_identifier_list(*self.ids)
        if ids is not None:
            args["ids"] = ids
        return args

    def do(self, client: "Transport", *, cancel: Event | None = None) -> None:
        if not self.changed:
            return None
        return super().do(client, cancel=cancel)

    def with_bandwidth_priority(self, bandwidth_priority: int):
        """Set the torrent's bandwidth priority (-1, 0 or 1)."""
        return self._with(bandwidth_priority=bandwidth_priority)

    def with_download_limit(self, download_limit: int):
        """Set the maximum download speed (KBps)."""
        return self._with(download_limit=download_limit)

    def with_download_limited(self, download_limited: bool):
        """Set whether the download limit is honored."""
        return self._with(download_limited=download_limited)

    def with_files_wanted(self, files_wanted: Iterable[int]):
        """Set the indices of files to download."""
        return self._with(files_wanted=_file_indices(files_wanted))

    def with_files_unwanted(self, files_unwanted: Iterable[int]):
        """Set the indices of files not to download."""
        return self._with(files_unwanted=_file_indices(files_unwanted))

    def with_honors_session_limits(self, honors_session_limits: bool):
        """Set whether session upload limits are honored."""
        return self._with(honors_session_limits=honors_session_limits)

    def with_labels(self, labels: Iterable[str]):
        return self._with(labels=list(labels))

    def with_location(self, location: str):
        """Set the new location of the torrent's content."""
        return self._with(location=location)

    def with_peer_limit(self, peer_limit: int):
        """Set the maximum number of peers."""
        return self._with(peer_limit=peer_limit)

    def with_priority_high(self, priority_high: Iterable[int]):
        """Set the indices of high-priority files."""
        return self._with(priority_high=_file_indices(priority_high))

    def with_priority_low(self, priority_low: Iterable[int]):
        """Set the indices of low-priority files."""
        return self._with(priority_low=_file_indices(priority_low))

    def with_priority_normal(self, priority_normal: Iterable[int]):
        """Set the indices of normal-priority files."""
        return self._with(priority_normal=_file_indices(priority_normal))

    def with_queue_position(self, queue_position: int):
        """Set the position of the torrent in its queue [0...n)."""
        return self._with(queue_position=queue_position)

    def with_seed_idle_limit(self, seed_idle_limit: int):
        """Set the minutes of seeding inactivity before stopping."""
        return self._with(seed_idle_limit=seed_idle_limit)

    def with_seed_idle_mode(self, seed_idle_mode: Mode):
        return self._with(seed_idle_mode=Mode(seed_idle_mode))

    def with_seed_ratio_limit(self, seed_ratio_limit: float):
        """Set the torrent-level seeding ratio."""
        return self._with(seed_ratio_limit=seed_ratio_limit)

    def with_seed_ratio_mode(self, seed_ratio_mode: Mode):
        return self._with(seed_ratio_mode=Mode(seed_ratio_mode))

    def with_tracker_add(self, *tracker_add: str):
        """Set the announce URLs to add."""
        return self._with(tracker_add=list(tracker_add))

    def with_tracker_remove(self, *tracker_remove: int):
        """Set the ids of trackers to remove."""
        return self._with(tracker_remove=list(tracker_remove))

    def with_tracker_replace(self, *tracker_replace: Any):
        """Set pairs of <tracker id, new announce URL>."""
        return self._with(tracker_replace=list(tracker_replace))

    def with_upload_limit(self, upload_limit: int):
        """Set the maximum upload speed (KBps)."""
        return self._with(upload_limit=upload_limit)

    def with_upload_limited(self, upload_limited: bool):
        """Set whether the upload limit is honored."""
        return self._with(upload_limited=upload_limited)


# Settable session-set fields share their wire names with session-get
SESSION_WIRE_NAMES = wire_names(Session)


@dataclass(init=False, eq=True, repr=True)
class SessionSetRequest(ChangeSetRequest):
    """session-set: change global daemon settings.

    A request with no changed fields is a no-op and makes no network
    call.
    """

    method = "session-set"

    alt_speed_down: int | None = None
    alt_speed_enabled: bool | None = None
    alt_speed_time_begin: int | None = None
    alt_speed_time_enabled: bool | None = None
    alt_speed_time_end: int | None = None
    alt_speed_time_day: int | None = None
    alt_speed_up: int | None = None
    blocklist_url: str | None = None
    blocklist_enabled: bool | None = None
    cache_size_mb: int | None = None
    download_dir: str | None = None
    download_queue_size: int | None = None
    download_queue_enabled: bool | None = None
    dht_enabled: bool | None = None
    encryption: Encryption | None = None
    idle_seeding_limit: int | None = None
    idle_seeding_limit_enabled: bool | None = None
    incomplete_dir: str | None = None
    incomplete_dir_enabled: bool | None = None
    lpd_enabled: bool | None = None
    peer_limit_global: int | None = None
    peer_limit_per_torrent: int | None = None
    pex_enabled: bool | None = None
    peer_port: int | None = None
    peer_port_random_on_start: bool | None = None
    port_forwarding_enabled: bool | None = None
    queue_stalled_enabled: bool | None = None
    queue_stalled_minutes: int | None = None
    rename_partial_files: bool | None = None
    script_torrent_done_filename: str | None = None
    script_torrent_done_enabled: bool | None = None
    seed_ratio_limit: float | None = None
    seed_ratio_limited: bool | None = None
    seed_queue_size: int | None = None
    seed_queue_enabled: bool | None = None
    speed_limit_down: int | None = None
    speed_limit_down_enabled: bool | None = None
    speed_limit_up: int | None = None
    speed_limit_up_enabled: bool | None = None
    start_added_torrents: bool | None = None
    trash_original_torrent_files: bool | None = None
    units: Units | None = None
    utp_enabled: bool | None = None

    def __init__(self, **values: Any) -> None:
        super().__init__(**values)

    def wire_names(self) -> dict[str, str]:
        return {f.name: SESSION_WIRE_NAMES[f.name] for f in fields(self)}

    def arguments(self) -> dict[str, Any]:
        return self.changes()

    def do(self, client: "Transport", *, cancel: Event | None = None) -> None:
        if not self.changed:
            return None
        return super().do(client, cancel=cancel)

    def with_ids(self, *ids: Any):
        raise TypeError("session-set does not take torrent identifiers")

    def with_alt_speed_down(self, alt_speed_down: int):
        """Set the alternative global download speed limit (KBps)."""
        return self._with(alt_speed_down=alt_speed_down)

    def with_alt_speed_enabled(self, alt_speed_enabled: bool):
        """Set whether the alternative speed limits are used."""
        return self._with(alt_speed_enabled=alt_speed_enabled)

    def with_alt_speed_time_begin(self, alt_speed_time_begin: int):
        """Set when to turn on alt speeds (minutes after midnight)."""
        return self._with(alt_speed_time_begin=alt_speed_time_begin)

    def with_alt_speed_time_enabled(self, alt_speed_time_enabled: bool):
        """Set whether the scheduled on/off times are used."""
        return self._with(alt_speed_time_enabled=alt_speed_time_enabled)

    def with_alt_speed_time_end(self, alt_speed_time_end: int):
        """Set when to turn off alt speeds (minutes after midnight)."""
        return self._with(alt_speed_time_end=alt_speed_time_end)

    def with_alt_speed_time_day(self, alt_speed_time_day: int):
        """Set the day(s) to turn on alt speeds (tr_sched_day bitmask)."""
        return self._with(alt_speed_time_day=alt_speed_time_day)

    def with_alt_speed_up(self, alt_speed_up: int):
        """Set the alternative global upload speed limit (KBps)."""
        return self._with(alt_speed_up=alt_speed_up)

    def with_blocklist_url(self, blocklist_url: str):
        """Set the blocklist location used by blocklist-update."""
        return self._with(blocklist_url=blocklist_url)

    def with_blocklist_enabled(self, blocklist_enabled: bool):
        return self._with(blocklist_enabled=blocklist_enabled)

    def with_cache_size_mb(self, cache_size_mb: int):
        """Set the maximum size of the disk cache (MB)."""
        return self._with(cache_size_mb=cache_size_mb)

    def with_download_dir(self, download_dir: str):
        """Set the default path to download torrents to."""
        return self._with(download_dir=download_dir)

    def with_download_queue_size(self, download_queue_size: int):
        """Set the maximum number of torrents downloading at once."""
        return self._with(download_queue_size=download_queue_size)

    def with_download_queue_enabled(self, download_queue_enabled: bool):
        return self._with(download_queue_enabled=download_queue_enabled)

    def with_dht_enabled(self, dht_enabled: bool):
        """Set whether DHT is allowed in public torrents."""
        return self._with(dht_enabled=dht_enabled)

    def with_encryption(self, encryption: Encryption | str):
        """Set the encryption preference ("required", "preferred" or
        "tolerated")."""
        return self._with(encryption=Encryption(encryption))

    def with_idle_seeding_limit(self, idle_seeding_limit: int):
        """Set the minutes of seeding inactivity before stopping."""
        return self._with(idle_seeding_limit=idle_seeding_limit)

    def with_idle_seeding_limit_enabled(
        self, idle_seeding_limit_enabled: bool
    ):
        return self._with(
            idle_seeding_limit_enabled=idle_seeding_limit_enabled
        )

    def with_incomplete_dir(self, incomplete_dir: str):
        """Set the path for incomplete torrents, when enabled."""
        return self._with(incomplete_dir=incomplete_dir)

    def with_incomplete_dir_enabled(self, incomplete_dir_enabled: bool):
        return self._with(incomplete_dir_enabled=incomplete_dir_enabled)

    def with_lpd_enabled(self, lpd_enabled: bool):
        """Set whether Local Peer Discovery is allowed in public torrents."""
        return self._with(lpd_enabled=lpd_enabled)

    def with_peer_limit_global(self, peer_limit_global: int):
        return self._with(peer_limit_global=peer_limit_global)

    def with_peer_limit_per_torrent(self, peer_limit_per_torrent: int):
        return self._with(peer_limit_per_torrent=peer_limit_per_torrent)

    def with_pex_enabled(self, pex_enabled: bool):
        """Set whether PEX is allowed in public torrents."""
        return self._with(pex_enabled=pex_enabled)

    def with_peer_port(self, peer_port: int):
        return self._with(peer_port=peer_port)

    def with_peer_port_random_on_start(self, peer_port_random_on_start: bool):
        """Set whether a random peer port is picked on launch."""
        return self._with(peer_port_random_on_start=peer_port_random_on_start)

    def with_port_forwarding_enabled(self, port_forwarding_enabled: bool):
        return self._with(port_forwarding_enabled=port_forwarding_enabled)

    def with_queue_stalled_enabled(self, queue_stalled_enabled: bool):
        """Set whether idle torrents are considered stalled."""
        return self._with(queue_stalled_enabled=queue_stalled_enabled)

    def with_queue_stalled_minutes(self, queue_stalled_minutes: int):
        """Set the idle minutes after which a torrent stops counting
        toward the queue sizes."""
        return self._with(queue_stalled_minutes=queue_stalled_minutes)

    def with_rename_partial_files(self, rename_partial_files: bool):
        """Set whether ".part" is appended to incomplete files."""
        return self._with(rename_partial_files=rename_partial_files)

    def with_script_torrent_done_filename(
        self, script_torrent_done_filename: str
    ):
        return self._with(
            script_torrent_done_filename=script_torrent_done_filename
        )

    def with_script_torrent_done_enabled(
        self, script_torrent_done_enabled: bool
    ):
        return self._with(
            script_torrent_done_enabled=script_torrent_done_enabled
        )

    def with_seed_ratio_limit(self, seed_ratio_limit: float):
        """Set the default seed ratio for torrents."""
        return self._with(seed_ratio_limit=seed_ratio_limit)

    def with_seed_ratio_limited(self, seed_ratio_limited: bool):
        return self._with(seed_ratio_limited=seed_ratio_limited)

    def with_seed_queue_size(self, seed_queue_size: int):
        """Set the maximum number of torrents seeding at once."""
        return self._with(seed_queue_size=seed_queue_size)

    def with_seed_queue_enabled(self, seed_queue_enabled: bool):
        return self._with(seed_queue_enabled=seed_queue_enabled)

    def with_speed_limit_down(self, speed_limit_down: int):
        """Set the global download speed limit (KBps)."""
        return self._with(speed_limit_down=speed_limit_down)

    def with_speed_limit_down_enabled(self, speed_limit_down_enabled: bool):
        return self._with(speed_limit_down_enabled=speed_limit_down_enabled)

    def with_speed_limit_up(self, speed_limit_up: int):
        """Set the global upload speed limit (KBps)."""
        return self._with(speed_limit_up=speed_limit_up)

    def with_speed_limit_up_enabled(self, speed_limit_up_enabled: bool):
        return self._with(speed_limit_up_enabled=speed_limit_up_enabled)

    def with_start_added_torrents(self, start_added_torrents: bool):
        """Set whether added torrents are started right away."""
        return self._with(start_added_torrents=start_added_torrents)

    def with_trash_original_torrent_files(
        self, trash_original_torrent_files: bool
    ):
        """Set whether .torrent files of added torrents are deleted."""
        return self._with(
            trash_original_torrent_files=trash_original_torrent_files
        )

    def with_units(self, units: Units):
        return self._with(units=units)

    def with_utp_enabled(self, utp_enabled: bool):
        """Set whether uTP is allowed."""
        return self._with(utp_enabled=utp_enabled)


@dataclass(init=False, eq=True, repr=True)
class TorrentAddRequest(ChangeSetRequest):
    """torrent-add: add a torrent by filename/URL or by metainfo.

    Either filename (a path on the daemon host, a URL or a magnet link)
    or metainfo (the raw .torrent content, sent base64-encoded) must be
    set.
    """

    method = "torrent-add"

    cookies: str | None = _arg("cookies")
    download_dir: str | None = _arg("download-dir")
    filename: str | None = _arg("filename")
    labels: list[str] | None = _arg("labels")
    metainfo: bytes | None = _arg("metainfo")
    paused: bool | None = _arg("paused")
    peer_limit: int | None = _arg("peer-limit")
    bandwidth_priority: int | None = _arg("bandwidthPriority")
    files_wanted: list[int] | None = _arg("files-wanted")
    files_unwanted: list[int] | None = _arg("files-unwanted")
    priority_high: list[int] | None = _arg("priority-high")
    priority_low: list[int] | None = _arg("priority-low")
    priority_normal: list[int] | None = _arg("priority-normal")

    def __init__(self, **values: Any) -> None:
        super().__init__(**values)

    @classmethod
    def from_source(cls, value: str) -> "TorrentAddRequest":
        """Create a request from a magnet/HTTP link or a local file path.

        Links are passed to the daemon as filename; local .torrent files
        are read and sent as metainfo.

        Raises:
            ClientError: If the local file does not exist
        """
        if is_torrent_link(value):
            return cls(filename=value.strip())

        file = os.path.expanduser(value)
        if not os.path.exists(file):
            raise ClientError(f"Torrent file not found: {file}")
        with open(file, "rb") as f:
            return cls(metainfo=f.read())

    def arguments(self) -> dict[str, Any]:
        return self.changes()

    def decode(self, arguments: Any) -> TorrentAddResponse:
        return TorrentAddResponse.from_wire(arguments)

    def with_ids(self, *ids: Any):
        raise TypeError("torrent-add does not take torrent identifiers")

    def with_cookies(self, cookies: str):
        """Set the cookie header value, e.g. "a=1; b=2"."""
        return self._with(cookies=cookies)

    def with_cookies_list(self, *cookies: str):
        """Set cookies from alternating name and value strings.

        Raises:
            ValueError: If an odd number of strings is given
        """
        if len(cookies) % 2 != 0:
            raise ValueError("cookies length must be even")
        pairs = zip(cookies[::2], cookies[1::2])
        return self._with(cookies="; ".join(f"{k}={v}" for k, v in pairs))

    def with_cookies_map(self, cookies: Mapping[str, str]):
        """Set cookies from a name to value mapping."""
        return self._with(
            cookies="; ".join(f"{k}={v}" for k, v in cookies.items())
        )

    def with_download_dir(self, download_dir: str):
        """Set the path to download the torrent to."""
        return self._with(download_dir=download_dir)

    def with_filename(self, filename: str):
        """Set the filename or URL of the .torrent file, or a magnet."""
        return self._with(filename=filename)

    def with_labels(self, labels: Iterable[str]):
        return self._with(labels=list(labels))

    def with_metainfo(self, metainfo: bytes):
        """Set the raw .torrent content."""
        return self._with(metainfo=bytes(metainfo))

    def with_paused(self, paused: bool):
        """If true, don't start the torrent."""
        return self._with(paused=paused)

    def with_peer_limit(self, peer_limit: int):
        return self._with(peer_limit=peer_limit)

    def with_bandwidth_priority(self, bandwidth_priority: int):
        return self._with(bandwidth_priority=bandwidth_priority)

    def with_files_wanted(self, files_wanted: Iterable[int]):
        return self._with(files_wanted=_file_indices(files_wanted))

    def with_files_unwanted(self, files_unwanted: Iterable[int]):
        return self._with(files_unwanted=_file_indices(files_unwanted))

    def with_priority_high(self, priority_high: Iterable[int]):
        return self._with(priority_high=_file_indices(priority_high))

    def with_priority_low(self, priority_low: Iterable[int]):
        return self._with(priority_low=_file_indices(priority_low))

    def with_priority_normal(self, priority_normal: Iterable[int]):
        return self._with(priority_normal=_file_indices(priority_normal))


# ============================================================================
# Other Torrent Requests
# ============================================================================


class TorrentGetRequest(IdsRequest):
    """torrent-get: fetch torrent fields.

    Without explicit fields, all fields in DEFAULT_TORRENT_GET_FIELDS are
    requested.
    """

    method = "torrent-get"

    def __init__(self, *ids: Any, fields: Iterable[str] | None = None):
        super().__init__(*ids)
        self.fields = list(fields) if fields is not None else None

    def with_fields(self, *fields: str) -> "TorrentGetRequest":
        """Append fields for the daemon to return."""
        clone = copy.copy(self)
        clone.fields = (self.fields or []) + list(fields)
        return clone

    def arguments(self) -> dict[str, Any]:
        args = super().arguments()
        args["fields"] = (
            self.fields
            if self.fields is not None
            else list(DEFAULT_TORRENT_GET_FIELDS)
        )
        return args

    def decode(self, arguments: Any) -> TorrentGetResponse:
        return TorrentGetResponse.from_wire(arguments)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.ids == other.ids and self.fields == other.fields


class TorrentRemoveRequest(IdsRequest):
    """torrent-remove: remove torrents, optionally deleting their data."""

    method = "torrent-remove"

    def __init__(self, *ids: Any, delete_local_data: bool = False) -> None:
        super().__init__(*ids)
        self.delete_local_data = delete_local_data

    def with_delete_local_data(
        self, delete_local_data: bool
    ) -> "TorrentRemoveRequest":
        clone = copy.copy(self)
        clone.delete_local_data = delete_local_data
        return clone

    def arguments(self) -> dict[str, Any]:
        args = super().arguments()
        args["delete-local-data"] = self.delete_local_data
        return args


class TorrentSetLocationRequest(IdsRequest):
    """torrent-set-location: move torrent data or point at a new location.

    With move=False the daemon looks for the files in the new location
    instead of moving them there.
    """

    method = "torrent-set-location"

    def __init__(self, location: str, *ids: Any, move: bool = False) -> None:
        super().__init__(*ids)
        self.location = location
        self.move = move

    def arguments(self) -> dict[str, Any]:
        args = super().arguments()
        args["location"] = self.location
        args["move"] = self.move
        return args


class TorrentRenamePathRequest(IdsRequest):
    """torrent-rename-path: rename a file or folder of a single torrent."""

    method = "torrent-rename-path"

    def __init__(self, path: str, name: str, *ids: Any) -> None:
        super().__init__(*ids)
        self.path = path
        self.name = name

    def arguments(self) -> dict[str, Any]:
        if len(self.ids) != 1:
            raise SingleTorrentError(len(self.ids))
        args = super().arguments()
        args["path"] = self.path
        args["name"] = self.name
        return args


# ============================================================================
# Session Requests
# ============================================================================


def _response_value(arguments: Any, key: str) -> Any:
    if not isinstance(arguments, dict) or key not in arguments:
        raise InvalidResponseError(f"Missing response argument: {key}")
    return arguments[key]


class SessionGetRequest(Request):
    method = "session-get"

    def decode(self, arguments: Any) -> Session:
        return Session.from_wire(arguments)


class SessionStatsRequest(Request):
    method = "session-stats"

    def decode(self, arguments: Any) -> SessionStats:
        return SessionStats.from_wire(arguments)


class SessionCloseRequest(Request):
    """session-close: shut the daemon down."""

    method = "session-close"


SessionShutdownRequest = SessionCloseRequest


class BlocklistUpdateRequest(Request):
    """blocklist-update: reload the blocklist; returns the rule count."""

    method = "blocklist-update"

    def decode(self, arguments: Any) -> int:
        return int(_response_value(arguments, "blocklist-size"))


class PortTestRequest(Request):
    """port-test: check whether the peer port is reachable."""

    method = "port-test"

    def decode(self, arguments: Any) -> bool:
        return bool(_response_value(arguments, "port-is-open"))


class FreeSpaceRequest(Request):
    """free-space: get the free space (bytes) in a directory."""

    method = "free-space"

    def __init__(self, path: str) -> None:
        self.path = path

    def arguments(self) -> dict[str, Any]:
        return {"path": self.path}

    def decode(self, arguments: Any) -> int:
        return int(_response_value(arguments, "size-bytes"))
