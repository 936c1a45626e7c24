import string

HEX_DIGITS = frozenset(string.hexdigits)


def is_torrent_link(text: str) -> bool:
    """Check if text appears to be a torrent link or magnet URI.

    Case-insensitive check for magnet:, http://, or https:// prefixes.
    """
    return text.strip().lower().startswith(("magnet:", "http://", "https://"))


def is_hex(text: str) -> bool:
    """Check if text is a non-empty string of hexadecimal digits."""
    return bool(text) and all(c in HEX_DIGITS for c in text)
