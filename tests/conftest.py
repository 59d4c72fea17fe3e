import pytest

from catlog import set_dispatcher


@pytest.fixture(autouse=True)
def _reset_default_dispatcher():
    # Every test starts from a fresh process-wide default
    set_dispatcher(None)
    yield
    set_dispatcher(None)
