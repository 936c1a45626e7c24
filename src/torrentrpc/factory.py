"""Factory for creating configured client instances."""

from typing import Any

from .client import Client
from .config import load_config
from .util.log import get_logger, log_time

logger = get_logger()

__all__ = ["create_client"]


@log_time
def create_client(profile: str | None = None, **overrides: Any) -> Client:
    """Create a client from the config file and explicit options.

    Options from torrentrpc.conf (and torrentrpc-PROFILE.conf when a
    profile is given) are used unless an override with a value other
    than None is passed for the same option.

    Args:
        profile: Optional config profile name
        **overrides: Client keyword arguments (url, host, username,
            password, csrf, retries, timeout, user_agent,
            credential_fallback, session, log_bodies)

    Returns:
        Client instance

    Raises:
        ClientError: If the profile config file does not exist
    """
    options = load_config(profile)
    options.update({k: v for k, v in overrides.items() if v is not None})

    client = Client(**options)
    logger.debug(f"Created client for {client.url}")
    return client
