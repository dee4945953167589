import pytest

from unit import setup_converter


@pytest.fixture(scope="session")
def ureg():
    return setup_converter()
