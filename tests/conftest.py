import pytest

from nets import HALL_NET


@pytest.fixture
def hall_net() -> str:
    return HALL_NET
