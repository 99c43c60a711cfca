import pytest


def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip slow tests")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run slow tests")
    parser.addoption("--seed", action="store", type=int,
                     default=1234, help="seed for randomized diff tests")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    # Only run tests requesting the slow fixture
    skip_quick = pytest.mark.skip(reason="skipping all tests that are not slow")
    for item in items:
        if 'slow' not in item.fixturenames:
            item.add_marker(skip_quick)
