import pytest

from zdpkit.parameters import (
    ArrayParameter,
    FirmwareUpdateState,
    ParameterStore,
    StringParameter,
    U16Parameter,
    U32Parameter,
    U64Parameter,
    U8Parameter,
    VariantMapParameter,
)


@pytest.fixture
def store():
    return ParameterStore()


def test_unset_integer_reads_zero(store):
    assert store.get(U16Parameter.PANID) == 0
    assert store.get(StringParameter.DEVICE_NAME) == ""


@pytest.mark.parametrize(
    "parameter, value",
    [
        (U8Parameter.CURRENT_CHANNEL, 25),
        (U16Parameter.HTTP_PORT, 0xFFFF),
        (U32Parameter.CHANNEL_MASK, 0x07FFF800),
        (U64Parameter.MAC_ADDRESS, (1 << 64) - 1),
        (StringParameter.DEVICE_PATH, "/dev/ttyACM0"),
        (ArrayParameter.NETWORK_KEY, bytes(range(16))),
        (ArrayParameter.SECURITY_MATERIAL0, bytes(range(32))),
        (VariantMapParameter.HA_ENDPOINT, {"endpoint": 1}),
    ],
)
def test_round_trip(store, parameter, value):
    assert store.set(parameter, value) is True
    assert store.get(parameter) == value


def test_setting_same_value_reports_no_change(store):
    store.set(U8Parameter.PERMIT_JOIN, 60)
    assert store.set(U8Parameter.PERMIT_JOIN, 60) is False


def test_parameters_with_same_number_are_distinct(store):
    store.set(U8Parameter.CURRENT_CHANNEL, 11)
    store.set(U16Parameter.PANID, 0x1234)
    assert store.get(U8Parameter.CURRENT_CHANNEL) == 11
    assert store.get(U16Parameter.PANID) == 0x1234


def test_u8_out_of_range(store):
    with pytest.raises(ValueError):
        store.set(U8Parameter.CURRENT_CHANNEL, 256)
    with pytest.raises(ValueError):
        store.set(U16Parameter.NWK_ADDRESS, -1)


def test_wrong_value_type(store):
    with pytest.raises(TypeError):
        store.set(StringParameter.HTTP_ROOT, 5)
    with pytest.raises(TypeError):
        store.set(U32Parameter.FRAME_COUNTER, "5")


def test_network_key_size_is_enforced(store):
    with pytest.raises(ValueError):
        store.set(ArrayParameter.NETWORK_KEY, bytes(15))


def test_firmware_update_state(store):
    assert store.get(U8Parameter.FIRMWARE_UPDATE_ACTIVE) is FirmwareUpdateState.IDLE
    store.set(U8Parameter.FIRMWARE_UPDATE_ACTIVE, 2)
    assert store.get(U8Parameter.FIRMWARE_UPDATE_ACTIVE) is FirmwareUpdateState.RUNNING
    with pytest.raises(ValueError):
        store.set(U8Parameter.FIRMWARE_UPDATE_ACTIVE, 9)


def test_map_is_copied(store):
    data = {"a": [1]}
    store.set(VariantMapParameter.LINK_KEY, data)
    data["a"].append(2)
    got = store.get(VariantMapParameter.LINK_KEY)
    got["b"] = 0
    assert store.get(VariantMapParameter.LINK_KEY) == {"a": [1]}


def test_unknown_parameter(store):
    with pytest.raises(TypeError):
        store.get(0)
    with pytest.raises(TypeError):
        store.set("x", 1)