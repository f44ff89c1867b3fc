import pytest
from elm_review_action.config import Settings


def pytest_collection_modifyitems(items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        if "/integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "/unit/" in path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def settings():
    return Settings(elm_review="elm-review", name="elm-review")


@pytest.fixture
def make_message():
    """Build an elm-review message as found in the JSON report."""
    def _make(rule="NoUnused.Variables", message="Unused variable", start=(1, 1), end=(1, 10), details=None):
        return {
            "message": message,
            "rule": rule,
            "details": details if details is not None else ["Remove it."],
            "region": {
                "start": {"line": start[0], "column": start[1]},
                "end": {"line": end[0], "column": end[1]},
            },
        }
    return _make
