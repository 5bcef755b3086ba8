import pytest

from lending_library.library import Library
from lending_library.main import LibraryManager

@pytest.fixture
def lib():
    # Fresh, empty library for each test
    return Library(seed=False)

@pytest.fixture
def seeded_lib():
    return Library(seed=True)

@pytest.fixture(autouse=True)
def reset_cli_state(monkeypatch):
    # CLI commands share a process-wide Library; start every test from the sample catalog
    monkeypatch.setenv("LIB_CLI_OUTPUT", "plain")
    LibraryManager.reset()
    yield
    LibraryManager.reset()
