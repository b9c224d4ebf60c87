import pytest

from endianness import swap


@pytest.fixture(params=[True, False], ids=["little_host", "big_host"])
def host_little(request, monkeypatch):
    # Pretend to run on a machine of each byte order
    monkeypatch.setattr(swap, "IS_LITTLE", request.param)
    return request.param
