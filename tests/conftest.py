from __future__ import annotations

import pytest

SHA256_HEX = "6c3c624b58dbbcd3c0dd82b4c53f04194d1247c6eebdaab7c610cf7d66709b3b"
SHA384_HEX = (
    "6c3c624b58dbbcd4d1247c6eebdaab7c610cf7d66709b3b3c0dd82b4c53f0419"
    "4d1247c6eebdaab7c610cf7d66709b3b"
)
SHA512_HEX = (
    "6c3c624b58dbbcd3c0dd826c3c624b58dbbcd3c0dd82b4c53f04194d1247c6ee"
    "bdaab7c610cf7d66709b3bb4c53f04194d1247c6eebdaab7c610cf7d66709b3b"
)


def pytest_addoption(parser: pytest.Parser):
    parser.addoption(
        "--skip-slow", action="store_true", default=False, help="skip slow tests"
    )


def pytest_configure(config: pytest.Config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    skip_slow = pytest.mark.skip(reason="skip-slow requested")
    for item in items:
        if "slow" in item.keywords and config.getoption("--skip-slow"):
            item.add_marker(skip_slow)


@pytest.fixture(scope="session")
def sha256_digest() -> str:
    return f"sha256:{SHA256_HEX}"


@pytest.fixture(scope="session")
def sha384_digest() -> str:
    return f"sha384:{SHA384_HEX}"


@pytest.fixture(scope="session")
def sha512_digest() -> str:
    return f"sha512:{SHA512_HEX}"
