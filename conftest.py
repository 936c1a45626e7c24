import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--transmission-port",
        action="store",
        default=None,
        help="Port of a running Transmission daemon for integration tests",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--transmission-port"):
        return

    skip = pytest.mark.skip(reason="needs --transmission-port")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
