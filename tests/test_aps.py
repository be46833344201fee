import pytest

from zdpkit.aps import (
    Address,
    ApsAddressMode,
    ApsDataConfirm,
    ApsDataIndication,
    ApsDataRequest,
    ApsTxOption,
    aps_status_to_string,
    next_aps_request_id,
)
from zdpkit.types import ApsStatus, MacStatus, NwkBroadcastAddress, NwkStatus


def test_request_ids_cover_1_to_255():
    ids = [next_aps_request_id() for _ in range(600)]
    assert all(1 <= i <= 255 for i in ids)
    assert set(ids) == set(range(1, 256))


def test_empty_address_has_nothing_set():
    addr = Address()
    assert not addr.has_nwk()
    assert not addr.has_ext()
    assert not addr.has_group()
    assert (addr.nwk, addr.ext, addr.group) == (0, 0, 0)


def test_setting_parts_marks_them():
    addr = Address()
    addr.nwk = 0x1234
    assert addr.has_nwk() and not addr.has_ext()
    addr.ext = 0x00212EFFFF000001
    assert addr.has_ext()
    assert addr.ext == 0x00212EFFFF000001


def test_broadcast_and_unicast():
    assert Address(nwk=NwkBroadcastAddress.ALL).is_nwk_broadcast()
    assert Address(nwk=NwkBroadcastAddress.RX_ON_WHEN_IDLE).is_nwk_broadcast()
    assert not Address(nwk=NwkBroadcastAddress.ROUTERS).is_nwk_unicast()
    assert Address(nwk=0x1234).is_nwk_unicast()
    assert not Address().is_nwk_unicast()
    assert not Address().is_nwk_broadcast()


def test_clear_resets_everything():
    addr = Address(nwk=1, ext=2, group=3)
    addr.clear()
    assert addr == Address()
    assert not (addr.has_nwk() or addr.has_ext() or addr.has_group())


def test_nwk_string_form():
    assert Address(nwk=0x0011).to_string_nwk() == "0x0011"
    assert Address(group=0x0011).to_string_group() == "0x0011"


def test_ext_string_round_trip():
    original = Address(ext=0x00212EFFFF000001)
    text = original.to_string_ext()
    assert len(text) == 18
    parsed = Address()
    parsed.from_string_ext(text)
    assert parsed.ext == original.ext
    assert parsed.has_ext()


def test_nwk_string_round_trip():
    parsed = Address()
    parsed.from_string_nwk(Address(nwk=0xABCD).to_string_nwk())
    assert parsed.nwk == 0xABCD


@pytest.mark.parametrize("text", ["", "0x", "zz", "0x1_2", "0x10000"])
def test_invalid_nwk_string_raises(text):
    with pytest.raises(ValueError):
        Address().from_string_nwk(text)


def test_invalid_ext_string_leaves_address_unset():
    addr = Address()
    with pytest.raises(ValueError):
        addr.from_string_ext("not hex")
    assert not addr.has_ext()


def test_out_of_range_parts_raise():
    with pytest.raises(ValueError):
        Address(nwk=0x10000)
    with pytest.raises(ValueError):
        Address(ext=-1)
    with pytest.raises(TypeError):
        Address(group="1")


def test_equality_compares_values_only():
    assert Address(nwk=0) == Address()
    assert Address(nwk=5, ext=7) == Address(ext=7, nwk=5)
    assert not Address(nwk=5) == Address(nwk=6)


def test_requests_get_distinct_ids():
    a = ApsDataRequest()
    b = ApsDataRequest()
    assert a.id != b.id
    assert 1 <= a.id <= 255


def test_request_clear_keeps_id():
    req = ApsDataRequest(profile_id=0x0104, cluster_id=6, asdu=b"\x01\x02")
    req.dst_address.nwk = 0x1234
    req.tx_options = ApsTxOption.ACKNOWLEDGED
    rid = req.id
    req.clear()
    assert req.id == rid
    assert req.asdu == bytearray()
    assert req.profile_id == 0
    assert req.tx_options == ApsTxOption.NONE
    assert not req.dst_address.has_nwk()


def test_request_asdu_is_mutable_copy():
    payload = b"\x10\x20"
    req = ApsDataRequest(asdu=payload)
    req.asdu.append(0x30)
    assert bytes(req.asdu) == payload + b"\x30"


def test_request_source_route_limit():
    ApsDataRequest(source_route=range(9))
    with pytest.raises(ValueError):
        ApsDataRequest(source_route=range(10))


def test_confirm_for_request_copies_fields():
    req = ApsDataRequest(
        dst_address_mode=ApsAddressMode.NWK, src_endpoint=1, dst_endpoint=2
    )
    req.dst_address.nwk = 0x4321
    conf = ApsDataConfirm.for_request(req, ApsStatus.NO_ACK)
    assert conf.id == req.id
    assert conf.dst_address == req.dst_address
    assert conf.dst_address is not req.dst_address
    assert conf.dst_address_mode == ApsAddressMode.NWK
    assert (conf.src_endpoint, conf.dst_endpoint) == (1, 2)
    assert conf.status == ApsStatus.NO_ACK


def test_confirm_defaults():
    conf = ApsDataConfirm()
    assert conf.status == 0xFF
    assert conf.dst_endpoint == 0xFF
    assert conf.dst_address_mode == ApsAddressMode.NONE


def test_indication_reset_restores_defaults():
    ind = ApsDataIndication(profile_id=0x0104, cluster_id=6, asdu=b"\x01", rssi=-40)
    ind.src_address.nwk = 0x1234
    ind.link_quality = 200
    ind.reset()
    assert ind == ApsDataIndication()
    assert not ind.src_address.has_nwk()


def test_status_strings_name_the_layer():
    assert aps_status_to_string(ApsStatus.NO_ACK).startswith("APS_")
    assert aps_status_to_string(NwkStatus.ROUTE_ERROR).startswith("NWK_")
    assert aps_status_to_string(MacStatus.NO_ACK).startswith("MAC_")


def test_status_strings_are_distinct():
    codes = [*ApsStatus, *NwkStatus, *MacStatus]
    names = {aps_status_to_string(code) for code in codes}
    assert len(names) == len(codes)


def test_unknown_status_string_is_hex():
    assert aps_status_to_string(0x55) == "0x55"


def test_status_out_of_range_raises():
    with pytest.raises(ValueError):
        aps_status_to_string(0x100)