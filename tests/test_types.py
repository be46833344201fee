import pytest

from zdpkit.types import (
    NwkBroadcastAddress,
    ZdpCluster,
    is_broadcast,
    response_cluster,
)


@pytest.mark.parametrize("address", list(NwkBroadcastAddress))
def test_broadcast_addresses_are_broadcast(address):
    assert is_broadcast(address) is True
    assert is_broadcast(int(address)) is True


@pytest.mark.parametrize("address", [0x0000, 0x1234, 0xFFF0])
def test_unicast_addresses_are_not_broadcast(address):
    assert is_broadcast(address) is False


def test_response_cluster_node_descriptor():
    assert response_cluster(ZdpCluster.NODE_DESCRIPTOR) is ZdpCluster.NODE_DESCRIPTOR_RSP


def test_response_cluster_match_descriptor_pinned():
    assert response_cluster(0x0006) == 0x8006


def test_response_cluster_user_descriptor_set():
    assert response_cluster(ZdpCluster.USER_DESCRIPTOR_SET) is ZdpCluster.USER_DESCRIPTOR_CONF


def test_response_cluster_round_trip_for_all_requests():
    requests = [c for c in ZdpCluster if c < 0x8000]
    found = 0
    for request in requests:
        try:
            rsp = response_cluster(request)
        except ValueError:
            continue
        found += 1
        assert rsp & 0x7FFF == request
        assert rsp >= 0x8000
    assert found > 0


def test_response_cluster_rejects_response():
    with pytest.raises(ValueError):
        response_cluster(ZdpCluster.BIND_RSP)


def test_response_cluster_without_response():
    with pytest.raises(ValueError):
        response_cluster(ZdpCluster.DEVICE_ANNCE)


@pytest.mark.parametrize("bad", [-1, 0x10000])
def test_response_cluster_out_of_range(bad):
    with pytest.raises(ValueError):
        response_cluster(bad)