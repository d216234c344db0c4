"""Pytest configuration ensuring offline tests run by default."""

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--network",
        action="store_true",
        default=False,
        help="run tests that download the public health dataset",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "offline: test relies only on local CSV fixtures and runs by default",
    )
    config.addinivalue_line(
        "markers",
        "requires_network: test downloads the remote CSV files "
        "and is skipped unless --network is passed",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    run_live = config.getoption("--network")
    for item in items:
        if "requires_network" in item.keywords:
            if not run_live:
                item.add_marker(
                    pytest.mark.skip(reason="requires --network to download the dataset")
                )
            continue
        item.add_marker(pytest.mark.offline)
