"""Typed objects decoded from Transmission RPC responses.

Every model is a frozen dataclass whose fields carry their wire name in
the field metadata. Fields missing from a response (for instance torrent
fields that were not requested) stay None. Unknown keys are ignored so
newer daemons can add fields without breaking older clients.
"""

import base64
import binascii
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta
from typing import Any, Callable

from .errors import InvalidResponseError
from .types import (
    Encryption,
    Mode,
    Priority,
    State,
    Status,
    decode_bool,
    decode_duration,
    decode_encryption,
    decode_mode,
    decode_priority,
    decode_state,
    decode_status,
    decode_time,
    encode_value,
)

Decoder = Callable[[Any], Any]


def _wire(name: str, decode: Decoder | None = None) -> Any:
    """Declare a model field with its wire name and value decoder."""
    return field(default=None, metadata={"wire": name, "decode": decode})


def _int(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidResponseError(f"Expected integer, got {value!r}")
    return value


def _float(value: Any) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidResponseError(f"Expected number, got {value!r}")
    return float(value)


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidResponseError(f"Expected string, got {value!r}")
    return value


def _bytes(value: Any) -> bytes:
    """Decode base64 content such as the torrent "pieces" bitfield."""
    try:
        return base64.b64decode(_str(value), validate=True)
    except binascii.Error as e:
        raise InvalidResponseError(f"Invalid base64 value: {e}") from e


def _list_of(decode: Decoder) -> Decoder:
    def decode_list(value: Any) -> list[Any]:
        if not isinstance(value, list):
            raise InvalidResponseError(f"Expected array, got {value!r}")
        return [decode(v) for v in value]

    return decode_list


def _model(cls: type["WireModel"]) -> Decoder:
    return cls.from_wire


class WireModel:
    """Mixin converting dataclasses from and to their JSON wire form."""

    @classmethod
    def from_wire(cls, data: Any):
        """Build an instance from a decoded JSON object.

        Raises:
            InvalidResponseError: If data or one of its values has the
                wrong JSON type
            InvalidEnumError: If an enumerated value is out of range
            InvalidScalarError: If a time, duration or bool is invalid
        """
        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"Expected object for {cls.__name__}, got {data!r}"
            )

        kwargs = {}
        for f in fields(cls):
            name = f.metadata.get("wire")
            if name is None or name not in data:
                continue

            value = data[name]
            decode = f.metadata.get("decode")
            if decode is not None and value is not None:
                value = decode(value)
            kwargs[f.name] = value

        return cls(**kwargs)

    def to_wire(self) -> dict[str, Any]:
        """Encode the fields that hold a value, keyed by wire name."""
        return {
            f.metadata["wire"]: encode_value(getattr(self, f.name))
            for f in fields(self)
            if "wire" in f.metadata and getattr(self, f.name) is not None
        }


# ============================================================================
# Torrent
# ============================================================================


@dataclass(frozen=True)
class TorrentFile(WireModel):
    """Static information about a file inside a torrent."""

    bytes_completed: int | None = _wire("bytesCompleted", _int)
    length: int | None = _wire("length", _int)
    name: str | None = _wire("name", _str)


@dataclass(frozen=True)
class FileStat(WireModel):
    """Per-file download state."""

    bytes_completed: int | None = _wire("bytesCompleted", _int)
    wanted: bool | None = _wire("wanted", decode_bool)
    priority: Priority | None = _wire("priority", decode_priority)


@dataclass(frozen=True)
class Peer(WireModel):
    """A connected peer (tr_peer_stat).

    Note: rate fields are in bytes/second.
    """

    address: str | None = _wire("address", _str)
    client_name: str | None = _wire("clientName", _str)
    client_is_choked: bool | None = _wire("clientIsChoked", decode_bool)
    client_is_interested: bool | None = _wire(
        "clientIsInterested", decode_bool
    )
    flag_str: str | None = _wire("flagStr", _str)
    is_downloading_from: bool | None = _wire("isDownloadingFrom", decode_bool)
    is_encrypted: bool | None = _wire("isEncrypted", decode_bool)
    is_incoming: bool | None = _wire("isIncoming", decode_bool)
    is_uploading_to: bool | None = _wire("isUploadingTo", decode_bool)
    is_utp: bool | None = _wire("isUTP", decode_bool)
    peer_is_choked: bool | None = _wire("peerIsChoked", decode_bool)
    peer_is_interested: bool | None = _wire("peerIsInterested", decode_bool)
    port: int | None = _wire("port", _int)
    progress: float | None = _wire("progress", _float)
    rate_to_client: int | None = _wire("rateToClient", _int)
    rate_to_peer: int | None = _wire("rateToPeer", _int)


@dataclass(frozen=True)
class PeersFrom(WireModel):
    """Number of connected peers by discovery source."""

    from_cache: int | None = _wire("fromCache", _int)
    from_dht: int | None = _wire("fromDht", _int)
    from_incoming: int | None = _wire("fromIncoming", _int)
    from_lpd: int | None = _wire("fromLpd", _int)
    from_ltep: int | None = _wire("fromLtep", _int)
    from_pex: int | None = _wire("fromPex", _int)
    from_tracker: int | None = _wire("fromTracker", _int)


@dataclass(frozen=True)
class Tracker(WireModel):
    """Tracker as listed in the torrent metainfo."""

    announce: str | None = _wire("announce", _str)
    id: int | None = _wire("id", _int)
    scrape: str | None = _wire("scrape", _str)
    tier: int | None = _wire("tier", _int)


@dataclass(frozen=True)
class TrackerStat(WireModel):
    """Announce and scrape statistics of a tracker."""

    announce: str | None = _wire("announce", _str)
    announce_state: State | None = _wire("announceState", decode_state)
    download_count: int | None = _wire("downloadCount", _int)
    has_announced: bool | None = _wire("hasAnnounced", decode_bool)
    has_scraped: bool | None = _wire("hasScraped", decode_bool)
    host: str | None = _wire("host", _str)
    id: int | None = _wire("id", _int)
    is_backup: bool | None = _wire("isBackup", decode_bool)
    last_announce_peer_count: int | None = _wire(
        "lastAnnouncePeerCount", _int
    )
    last_announce_result: str | None = _wire("lastAnnounceResult", _str)
    last_announce_start_time: datetime | None = _wire(
        "lastAnnounceStartTime", decode_time
    )
    last_announce_succeeded: bool | None = _wire(
        "lastAnnounceSucceeded", decode_bool
    )
    last_announce_time: datetime | None = _wire(
        "lastAnnounceTime", decode_time
    )
    last_announce_timed_out: bool | None = _wire(
        "lastAnnounceTimedOut", decode_bool
    )
    last_scrape_result: str | None = _wire("lastScrapeResult", _str)
    last_scrape_start_time: datetime | None = _wire(
        "lastScrapeStartTime", decode_time
    )
    last_scrape_succeeded: bool | None = _wire(
        "lastScrapeSucceeded", decode_bool
    )
    last_scrape_time: datetime | None = _wire("lastScrapeTime", decode_time)
    last_scrape_timed_out: bool | None = _wire(
        "lastScrapeTimedOut", decode_bool
    )
    leecher_count: int | None = _wire("leecherCount", _int)
    next_announce_time: datetime | None = _wire(
        "nextAnnounceTime", decode_time
    )
    next_scrape_time: datetime | None = _wire("nextScrapeTime", decode_time)
    scrape: str | None = _wire("scrape", _str)
    scrape_state: State | None = _wire("scrapeState", decode_state)
    seeder_count: int | None = _wire("seederCount", _int)
    tier: int | None = _wire("tier", _int)


@dataclass(frozen=True)
class Torrent(WireModel):
    """A torrent as returned by torrent-get.

    Note: All size fields are in bytes, all rate fields in bytes/second,
    limits in KBps. Only requested fields are populated.
    """

    activity_date: datetime | None = _wire("activityDate", decode_time)
    added_date: datetime | None = _wire("addedDate", decode_time)
    bandwidth_priority: int | None = _wire("bandwidthPriority", _int)
    comment: str | None = _wire("comment", _str)
    corrupt_ever: int | None = _wire("corruptEver", _int)
    creator: str | None = _wire("creator", _str)
    date_created: datetime | None = _wire("dateCreated", decode_time)
    desired_available: int | None = _wire("desiredAvailable", _int)
    done_date: datetime | None = _wire("doneDate", decode_time)
    download_dir: str | None = _wire("downloadDir", _str)
    downloaded_ever: int | None = _wire("downloadedEver", _int)
    download_limit: int | None = _wire("downloadLimit", _int)
    download_limited: bool | None = _wire("downloadLimited", decode_bool)
    error: int | None = _wire("error", _int)
    error_string: str | None = _wire("errorString", _str)
    eta: timedelta | None = _wire("eta", decode_duration)
    eta_idle: timedelta | None = _wire("etaIdle", decode_duration)
    files: list[TorrentFile] | None = _wire(
        "files", _list_of(_model(TorrentFile))
    )
    file_stats: list[FileStat] | None = _wire(
        "fileStats", _list_of(_model(FileStat))
    )
    hash_string: str | None = _wire("hashString", _str)
    have_unchecked: int | None = _wire("haveUnchecked", _int)
    have_valid: int | None = _wire("haveValid", _int)
    honors_session_limits: bool | None = _wire(
        "honorsSessionLimits", decode_bool
    )
    id: int | None = _wire("id", _int)
    is_finished: bool | None = _wire("isFinished", decode_bool)
    is_private: bool | None = _wire("isPrivate", decode_bool)
    is_stalled: bool | None = _wire("isStalled", decode_bool)
    labels: list[str] | None = _wire("labels", _list_of(_str))
    left_until_done: int | None = _wire("leftUntilDone", _int)
    magnet_link: str | None = _wire("magnetLink", _str)
    manual_announce_time: timedelta | None = _wire(
        "manualAnnounceTime", decode_duration
    )
    max_connected_peers: int | None = _wire("maxConnectedPeers", _int)
    metadata_percent_complete: float | None = _wire(
        "metadataPercentComplete", _float
    )
    name: str | None = _wire("name", _str)
    peer_limit: int | None = _wire("peer-limit", _int)
    peers: list[Peer] | None = _wire("peers", _list_of(_model(Peer)))
    peers_connected: int | None = _wire("peersConnected", _int)
    peers_from: PeersFrom | None = _wire("peersFrom", _model(PeersFrom))
    peers_getting_from_us: int | None = _wire("peersGettingFromUs", _int)
    peers_sending_to_us: int | None = _wire("peersSendingToUs", _int)
    percent_done: float | None = _wire("percentDone", _float)
    pieces: bytes | None = _wire("pieces", _bytes)
    piece_count: int | None = _wire("pieceCount", _int)
    piece_size: int | None = _wire("pieceSize", _int)
    priorities: list[Priority] | None = _wire(
        "priorities", _list_of(decode_priority)
    )
    queue_position: int | None = _wire("queuePosition", _int)
    rate_download: int | None = _wire("rateDownload", _int)
    rate_upload: int | None = _wire("rateUpload", _int)
    recheck_progress: float | None = _wire("recheckProgress", _float)
    seconds_downloading: timedelta | None = _wire(
        "secondsDownloading", decode_duration
    )
    seconds_seeding: timedelta | None = _wire(
        "secondsSeeding", decode_duration
    )
    seed_idle_limit: int | None = _wire("seedIdleLimit", _int)
    seed_idle_mode: Mode | None = _wire("seedIdleMode", decode_mode)
    seed_ratio_limit: float | None = _wire("seedRatioLimit", _float)
    seed_ratio_mode: Mode | None = _wire("seedRatioMode", decode_mode)
    size_when_done: int | None = _wire("sizeWhenDone", _int)
    start_date: datetime | None = _wire("startDate", decode_time)
    status: Status | None = _wire("status", decode_status)
    trackers: list[Tracker] | None = _wire(
        "trackers", _list_of(_model(Tracker))
    )
    tracker_stats: list[TrackerStat] | None = _wire(
        "trackerStats", _list_of(_model(TrackerStat))
    )
    total_size: int | None = _wire("totalSize", _int)
    torrent_file: str | None = _wire("torrentFile", _str)
    uploaded_ever: int | None = _wire("uploadedEver", _int)
    upload_limit: int | None = _wire("uploadLimit", _int)
    upload_limited: bool | None = _wire("uploadLimited", decode_bool)
    upload_ratio: float | None = _wire("uploadRatio", _float)
    wanted: list[bool] | None = _wire("wanted", _list_of(decode_bool))
    webseeds: list[str] | None = _wire("webseeds", _list_of(_str))
    webseeds_sending_to_us: int | None = _wire("webseedsSendingToUs", _int)

    @property
    def short_hash(self) -> str:
        """First 7 characters of the hash, or "" if the hash is shorter."""
        if self.hash_string is None or len(self.hash_string) < 7:
            return ""
        return self.hash_string[:7]


# All torrent fields, in declaration order
DEFAULT_TORRENT_GET_FIELDS: tuple[str, ...] = tuple(
    f.metadata["wire"] for f in fields(Torrent)
)


@dataclass(frozen=True)
class TorrentGetResponse(WireModel):
    """Arguments of a torrent-get response.

    "removed" is only populated when "recently-active" was requested and
    lists the ids of torrents removed since the last such request.
    """

    torrents: list[Torrent] = field(
        default_factory=list,
        metadata={"wire": "torrents", "decode": _list_of(_model(Torrent))},
    )
    removed: list[Any] = field(
        default_factory=list,
        metadata={"wire": "removed", "decode": _list_of(lambda v: v)},
    )


@dataclass(frozen=True)
class TorrentAddResponse(WireModel):
    """Arguments of a torrent-add response.

    Exactly one of the two fields is set: the new torrent, or the torrent
    that was already present.
    """

    torrent_added: Torrent | None = _wire("torrent-added", _model(Torrent))
    torrent_duplicate: Torrent | None = _wire(
        "torrent-duplicate", _model(Torrent)
    )

    @property
    def torrent(self) -> Torrent | None:
        return self.torrent_added or self.torrent_duplicate

    @property
    def duplicate(self) -> bool:
        return self.torrent_duplicate is not None


# ============================================================================
# Session
# ============================================================================


@dataclass(frozen=True)
class Units(WireModel):
    """Unit names and multipliers used by the daemon."""

    speed_units: list[str] | None = _wire("speed-units", _list_of(_str))
    speed_bytes: int | None = _wire("speed-bytes", _int)
    size_units: list[str] | None = _wire("size-units", _list_of(_str))
    size_bytes: int | None = _wire("size-bytes", _int)
    memory_units: list[str] | None = _wire("memory-units", _list_of(_str))
    memory_bytes: int | None = _wire("memory-bytes", _int)


@dataclass(frozen=True)
class Session(WireModel):
    """Session arguments as returned by session-get.

    Note: speed limits are in KBps, alt speed times in minutes after
    midnight.
    """

    alt_speed_down: int | None = _wire("alt-speed-down", _int)
    alt_speed_enabled: bool | None = _wire("alt-speed-enabled", decode_bool)
    alt_speed_time_begin: int | None = _wire("alt-speed-time-begin", _int)
    alt_speed_time_enabled: bool | None = _wire(
        "alt-speed-time-enabled", decode_bool
    )
    alt_speed_time_end: int | None = _wire("alt-speed-time-end", _int)
    alt_speed_time_day: int | None = _wire("alt-speed-time-day", _int)
    alt_speed_up: int | None = _wire("alt-speed-up", _int)
    blocklist_url: str | None = _wire("blocklist-url", _str)
    blocklist_enabled: bool | None = _wire("blocklist-enabled", decode_bool)
    blocklist_size: int | None = _wire("blocklist-size", _int)
    cache_size_mb: int | None = _wire("cache-size-mb", _int)
    config_dir: str | None = _wire("config-dir", _str)
    download_dir: str | None = _wire("download-dir", _str)
    download_queue_size: int | None = _wire("download-queue-size", _int)
    download_queue_enabled: bool | None = _wire(
        "download-queue-enabled", decode_bool
    )
    download_dir_free_space: int | None = _wire(
        "download-dir-free-space", _int
    )
    dht_enabled: bool | None = _wire("dht-enabled", decode_bool)
    encryption: Encryption | None = _wire("encryption", decode_encryption)
    idle_seeding_limit: int | None = _wire("idle-seeding-limit", _int)
    idle_seeding_limit_enabled: bool | None = _wire(
        "idle-seeding-limit-enabled", decode_bool
    )
    incomplete_dir: str | None = _wire("incomplete-dir", _str)
    incomplete_dir_enabled: bool | None = _wire(
        "incomplete-dir-enabled", decode_bool
    )
    lpd_enabled: bool | None = _wire("lpd-enabled", decode_bool)
    peer_limit_global: int | None = _wire("peer-limit-global", _int)
    peer_limit_per_torrent: int | None = _wire("peer-limit-per-torrent", _int)
    pex_enabled: bool | None = _wire("pex-enabled", decode_bool)
    peer_port: int | None = _wire("peer-port", _int)
    peer_port_random_on_start: bool | None = _wire(
        "peer-port-random-on-start", decode_bool
    )
    port_forwarding_enabled: bool | None = _wire(
        "port-forwarding-enabled", decode_bool
    )
    queue_stalled_enabled: bool | None = _wire(
        "queue-stalled-enabled", decode_bool
    )
    queue_stalled_minutes: int | None = _wire("queue-stalled-minutes", _int)
    rename_partial_files: bool | None = _wire(
        "rename-partial-files", decode_bool
    )
    rpc_version: int | None = _wire("rpc-version", _int)
    rpc_version_minimum: int | None = _wire("rpc-version-minimum", _int)
    script_torrent_done_filename: str | None = _wire(
        "script-torrent-done-filename", _str
    )
    script_torrent_done_enabled: bool | None = _wire(
        "script-torrent-done-enabled", decode_bool
    )
    seed_ratio_limit: float | None = _wire("seedRatioLimit", _float)
    seed_ratio_limited: bool | None = _wire("seedRatioLimited", decode_bool)
    seed_queue_size: int | None = _wire("seed-queue-size", _int)
    seed_queue_enabled: bool | None = _wire("seed-queue-enabled", decode_bool)
    speed_limit_down: int | None = _wire("speed-limit-down", _int)
    speed_limit_down_enabled: bool | None = _wire(
        "speed-limit-down-enabled", decode_bool
    )
    speed_limit_up: int | None = _wire("speed-limit-up", _int)
    speed_limit_up_enabled: bool | None = _wire(
        "speed-limit-up-enabled", decode_bool
    )
    start_added_torrents: bool | None = _wire(
        "start-added-torrents", decode_bool
    )
    trash_original_torrent_files: bool | None = _wire(
        "trash-original-torrent-files", decode_bool
    )
    units: Units | None = _wire("units", _model(Units))
    utp_enabled: bool | None = _wire("utp-enabled", decode_bool)
    version: str | None = _wire("version", _str)


@dataclass(frozen=True)
class Stats(WireModel):
    """Transfer statistics for one period (tr_session_stats)."""

    uploaded_bytes: int | None = _wire("uploadedBytes", _int)
    downloaded_bytes: int | None = _wire("downloadedBytes", _int)
    files_added: int | None = _wire("filesAdded", _int)
    session_count: int | None = _wire("sessionCount", _int)
    seconds_active: timedelta | None = _wire("secondsActive", decode_duration)


@dataclass(frozen=True)
class SessionStats(WireModel):
    """Arguments of a session-stats response."""

    active_torrent_count: int | None = _wire("activeTorrentCount", _int)
    download_speed: int | None = _wire("downloadSpeed", _int)
    paused_torrent_count: int | None = _wire("pausedTorrentCount", _int)
    torrent_count: int | None = _wire("torrentCount", _int)
    upload_speed: int | None = _wire("uploadSpeed", _int)
    cumulative_stats: Stats | None = _wire("cumulative-stats", _model(Stats))
    current_stats: Stats | None = _wire("current-stats", _model(Stats))


def wire_names(cls: type[WireModel]) -> dict[str, str]:
    """Map a model's field names to their wire names."""
    return {f.name: f.metadata["wire"] for f in fields(cls)}
