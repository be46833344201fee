"""Common Zigbee network types, status codes and ZDP cluster identifiers."""

from __future__ import annotations

from enum import IntEnum, IntFlag

ZLL_PROFILE_ID = 0xC05E
GP_PROFILE_ID = 0xA1E0
HA_PROFILE_ID = 0x0104
SE_PROFILE_ID = 0x0109
ZDP_PROFILE_ID = 0x0000
ZDO_ENDPOINT = 0x00

_RESPONSE_BIT = 0x8000


class LibraryReturnCode(IntEnum):
    """Return codes of the library services."""

    SUCCESS = 0
    ERROR_NOT_CONNECTED = 1
    ERROR_QUEUE_IS_FULL = 2
    ERROR_NODE_IS_ZOMBIE = 3
    ERROR_NOT_FOUND = 4


class NwkBroadcastAddress(IntEnum):
    """Special network layer broadcast addresses."""

    ALL = 0xFFFF
    LOW_POWER_ROUTERS = 0xFFFB
    ROUTERS = 0xFFFC
    RX_ON_WHEN_IDLE = 0xFFFD


class SecurityMode(IntEnum):
    NO_SECURITY = 0x00
    PRECONFIGURED_NETWORK_KEY = 0x01
    NETWORK_KEY_FROM_TRUST_CENTER = 0x02
    NO_MASTER_BUT_TRUST_CENTER_LINK_KEY = 0x03
    MASTER_KEY = 0x04


class ZdpState(IntEnum):
    """Common ZigBee Device Profile status codes."""

    SUCCESS = 0x00
    INVALID_REQUEST_TYPE = 0x80
    DEVICE_NOT_FOUND = 0x81
    INVALID_ENDPOINT = 0x82
    NOT_ACTIVE = 0x83
    NOT_SUPPORTED = 0x84
    TIMEOUT = 0x85
    NO_MATCH = 0x86
    NO_ENTRY = 0x88
    NO_DESCRIPTOR = 0x89
    INSUFFICIENT_SPACE = 0x8A
    NOT_PERMITTED = 0x8B
    TABLE_FULL = 0x8C
    NOT_AUTHORIZED = 0x8D


class ZclStatus(IntEnum):
    """Common ZigBee Cluster Library status codes."""

    SUCCESS = 0x00
    FAILURE = 0x01
    NOT_AUTHORIZED = 0x7E
    RESERVED_FIELD_NOT_ZERO = 0x7F
    MALFORMED_COMMAND = 0x80
    UNSUP_CLUSTER_COMMAND = 0x81
    UNSUP_GENERAL_COMMAND = 0x82
    UNSUP_MANUF_CLUSTER_COMMAND = 0x83
    UNSUP_MANUF_GENERAL_COMMAND = 0x84
    INVALID_FIELD = 0x85
    UNSUPPORTED_ATTRIBUTE = 0x86
    INVALID_VALUE = 0x87
    READ_ONLY = 0x88
    INSUFFICIENT_SPACE = 0x89
    INCONSISTENT_STARTUP_STATE = 0x90
    DEFINED_OUT_OF_BAND = 0x91
    HARDWARE_FAILURE = 0xC0
    SOFTWARE_FAILURE = 0xC1
    CALIBRATION_ERROR = 0xC2
    CLUSTER_NOT_SUPPORTED_ERROR = 0xC3


class ApsStatus(IntEnum):
    """Common Application Support Layer status codes."""

    SUCCESS = 0x00
    ASDU_TOO_LONG = 0xA0
    DEFRAG_DEFERRED = 0xA1
    DEFRAG_UNSUPPORTED = 0xA2
    ILLEGAL_REQUEST = 0xA3
    INVALID_BINDING = 0xA4
    INVALID_GROUP = 0xA5
    INVALID_PARAMETER = 0xA6
    NO_ACK = 0xA7
    NO_BOUND_DEVICE = 0xA8
    NO_SHORT_ADDRESS = 0xA9
    NOT_SUPPORTED = 0xAA
    SECURED_LINK_KEY = 0xAB
    SECURED_NWK_KEY = 0xAC
    SECURITY_FAIL = 0xAD
    TABLE_FULL = 0xAE
    UNSECURED = 0xAF
    UNSUPPORTED_ATTRIBUTE = 0xB0


class NwkStatus(IntEnum):
    """Common Network Layer status codes."""

    INVALID_PARAMETER = 0xC1
    INVALID_REQUEST = 0xC2
    NOT_PERMITTED = 0xC3
    STARTUP_FAILURE = 0xC4
    ALREADY_PRESENT = 0xC5
    SYNC_FAILURE = 0xC6
    NEIGHBOR_TABLE_FULL = 0xC7
    NO_NETWORK = 0xCA
    ROUTE_DISCOVERY_FAILED = 0xD0
    ROUTE_ERROR = 0xD1
    BROADCAST_TABLE_FULL = 0xD2


class MacStatus(IntEnum):
    """Common Medium Access Control Layer status codes."""

    NO_CHANNEL_ACCESS = 0xE1
    INVALID_PARAMETER = 0xE8
    NO_ACK = 0xE9
    NO_BEACON = 0xEA
    TRANSACTION_EXPIRED = 0xF0


class ApsRequestKeyStatus(IntEnum):
    SUCCESS = 0x00
    NO_SHORT_ADDRESS = 0x01
    SECURITY_FAIL = 0x02
    NOT_SEND = 0x03
    TIMEOUT = 0x04


class AddressMode(IntFlag):
    """Which parts of an address are set."""

    NONE = 0x0
    NWK = 0x1
    EXT = 0x2
    GROUP = 0x4


class DeviceType(IntEnum):
    COORDINATOR = 0
    ROUTER = 1
    END_DEVICE = 2
    UNKNOWN = 3


class DeviceRelationship(IntEnum):
    """Neighbour table relationship between devices."""

    PARENT = 0
    CHILD = 1
    SIBLING = 2
    UNKNOWN = 3
    PREVIOUS_CHILD = 4
    UNAUTHENTICATED_CHILD = 5


class NetworkState(IntEnum):
    """The state of a device or node in the network."""

    NOT_IN_NETWORK = 0
    CONNECTING = 1
    IN_NETWORK = 2
    LEAVING = 3
    UNKNOWN = 4
    TOUCHLINK = 5


class ConnectMode(IntEnum):
    MANUAL = 0x00
    NORMAL = 0x01
    ZLL = 0x02


class CommonState(IntEnum):
    IDLE = 0
    BUSY = 1
    WAIT = 2
    CONFIRMED = 3
    TIMEOUT = 4
    FAILURE = 5
    FINISH = 6
    FIRE_AND_FORGET = 7


class FrequencyBand(IntEnum):
    UNKNOWN = 0
    FREQ_868 = 0x08
    FREQ_902 = 0x20
    FREQ_2400 = 0x40


class ZdpCluster(IntEnum):
    """ZigBee Device Profile cluster identifiers."""

    NWK_ADDR = 0x0000
    IEEE_ADDR = 0x0001
    NODE_DESCRIPTOR = 0x0002
    POWER_DESCRIPTOR = 0x0003
    SIMPLE_DESCRIPTOR = 0x0004
    ACTIVE_ENDPOINTS = 0x0005
    MATCH_DESCRIPTOR = 0x0006
    COMPLEX_DESCRIPTOR = 0x0010
    USER_DESCRIPTOR = 0x0011
    DEVICE_ANNCE = 0x0013
    USER_DESCRIPTOR_SET = 0x0014
    PARENT_ANNOUNCE = 0x001F
    END_DEVICE_BIND_REQ = 0x0020
    BIND_REQ = 0x0021
    UNBIND_REQ = 0x0022
    MGMT_LQI_REQ = 0x0031
    MGMT_RTG_REQ = 0x0032
    MGMT_BIND_REQ = 0x0033
    MGMT_LEAVE_REQ = 0x0034
    MGMT_PERMIT_JOINING_REQ = 0x0036
    MGMT_NWK_UPDATE_REQ = 0x0038
    NWK_ADDR_RSP = 0x8000
    IEEE_ADDR_RSP = 0x8001
    NODE_DESCRIPTOR_RSP = 0x8002
    POWER_DESCRIPTOR_RSP = 0x8003
    SIMPLE_DESCRIPTOR_RSP = 0x8004
    ACTIVE_ENDPOINTS_RSP = 0x8005
    MATCH_DESCRIPTOR_RSP = 0x8006
    USER_DESCRIPTOR_RSP = 0x8011
    USER_DESCRIPTOR_CONF = 0x8014
    END_DEVICE_BIND_RSP = 0x8020
    BIND_RSP = 0x8021
    UNBIND_RSP = 0x8022
    MGMT_LQI_RSP = 0x8031
    MGMT_RTG_RSP = 0x8032
    MGMT_BIND_RSP = 0x8033
    MGMT_LEAVE_RSP = 0x8034
    MGMT_PERMIT_JOINING_RSP = 0x8036
    MGMT_NWK_UPDATE_RSP = 0x8038


class PowerMode(IntEnum):
    """Current power mode in the node power descriptor."""

    ON_WHEN_IDLE = 0
    PERIODIC = 1 << 0
    STIMULATED = 1 << 1


class PowerSource(IntFlag):
    """Available or current power sources in the node power descriptor."""

    UNKNOWN = 0
    MAINS = 1 << 0
    RECHARGEABLE = 1 << 1
    DISPOSABLE = 1 << 2


class PowerSourceLevel(IntEnum):
    """Current power source level in the node power descriptor."""

    CRITICAL = 0
    PERCENT_33 = 4
    PERCENT_66 = 8
    PERCENT_100 = 12


def is_broadcast(address: int) -> bool:
    """Return True if a 16-bit network address is one of the broadcast addresses."""
    return address in NwkBroadcastAddress._value2member_map_


def response_cluster(cluster_id: int) -> ZdpCluster:
    """Return the ZDP response cluster belonging to a request cluster."""
    if not 0 <= cluster_id <= 0xFFFF:
        raise ValueError(f"cluster id out of range: {cluster_id}")
    if cluster_id & _RESPONSE_BIT:
        raise ValueError(f"0x{cluster_id:04X} is already a response cluster")
    try:
        return ZdpCluster(cluster_id | _RESPONSE_BIT)
    except ValueError:
        raise ValueError(f"no response cluster for 0x{cluster_id:04X}") from None