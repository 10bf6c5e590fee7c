import pytest

from tests.fakes import FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def test_settings(tmp_path):
    return get_test_settings(tmp_path)
