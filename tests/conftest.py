import pytest

# Every test starts from the default configuration; tests that need another
# integer policy ask for the `lossy_ints` fixture.


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    monkeypatch.delenv("ARMA_INT_POLICY", raising=False)


@pytest.fixture
def lossy_ints(monkeypatch):
    monkeypatch.setenv("ARMA_INT_POLICY", "lossy")
