import pytest

def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip slow tests")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run slow tests")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    # --slow given: skip everything not marked as slow through the fixture
    skip_quick = pytest.mark.skip(reason="only running slow tests")
    for item in items:
        if 'slow' not in item.fixturenames:
            item.add_marker(skip_quick)
