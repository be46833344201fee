# zdpkit

Building blocks for Zigbee gateway software, in plain Python with no runtime
dependencies.

## Modules

- `zdpkit.types`: status codes (`ZdpState`, `ZclStatus`, `ApsStatus`, `NwkStatus`,
  `MacStatus`), device and network enums, ZDP cluster ids (`ZdpCluster`), power
  descriptor enums, `is_broadcast()` and `response_cluster()`.
- `zdpkit.timeref`: `SteadyTimeRef`, `SystemTimeRef`, `TimeMs`, `TimeSeconds`,
  `steady_time_ref()`, `system_time_ref()`, `msec_since_epoch()`, `is_valid()`.
- `zdpkit.aps`: `Address`, `ApsAddressMode`, `ApsTxOption`, `ApsDataRequest`,
  `ApsDataConfirm`, `ApsDataIndication`, `next_aps_request_id()` (ids 1-255) and
  `aps_status_to_string()`.
- `zdpkit.binding`: `Binding` and `BindingTable` (ordered, without duplicates).
- `zdpkit.touchlink`: `TouchlinkRequest`, `TouchlinkStatus`,
  `InterpanIndication` with `from_bytes()` / `to_bytes()`, and
  `generate_transaction_id()`.
- `zdpkit.parameters`: typed controller parameter enums and a validating
  `ParameterStore`.
- `zdpkit.atoms`: `AtomTable`, a bounded table of unique strings referenced by index.
- `zdpkit.debug`: `DebugTrace` with per-item enabling, callbacks and `printf()`;
  `DebugItem`, `item_from_string()`, `string_from_item()`, `hex_to_ascii()`.
- `zdpkit.utf8`: `utf8_codepoint()` and `iter_codepoints()`.
- `zdpkit.http_request`: `HttpRequestHeader.parse()` with `HttpStatus` and `HttpMethod`.
- `zdpkit.files`: `File`, `delete_file()`, `read_dir()`.
- `zdpkit.buffer_pool`: `BufferPool`, a page cache over a file with clock replacement.
- `zdpkit.devices`: `DeviceEntry`, a description of a serial device.

## Installation

```
pip install zdpkit
```

For running the tests:

```
pip install "zdpkit[test]"
pytest
```

## Examples

Addresses and data requests:

```python
from zdpkit.aps import Address, ApsAddressMode, ApsDataRequest
from zdpkit.types import NwkBroadcastAddress

req = ApsDataRequest(
    dst_address=Address(nwk=NwkBroadcastAddress.RX_ON_WHEN_IDLE),
    dst_address_mode=ApsAddressMode.NWK,
    src_endpoint=0,
    dst_endpoint=0,
)
print(req.id, req.dst_address.is_nwk_broadcast())
```

Build a binding and keep it in a table:

```python
from zdpkit.binding import Binding, BindingTable

table = BindingTable()
table.add(Binding.to_group(0x1122334455667788, 0x0001, 0x0006, 1))
print(len(table))
```

Parse an HTTP request header:

```python
from zdpkit.http_request import HttpRequestHeader

hdr = HttpRequestHeader.parse(b"GET /api/lights HTTP/1.1\r\nHost: localhost\r\n\r\n")
print(hdr.parse_status, hdr.http_method(), hdr.path_components_count(), hdr.path_at(1))
```

Work with pages in a buffer pool file:

```python
from zdpkit.buffer_pool import BufferPool

with BufferPool("store.bp", n_frames=8) as pool:
    pool.truncate(1)
    page = pool.alloc_page()
    page.data[0] = 0x66
    pool.mark_page_dirty(page.page_id)
```

## What the package does not do

- It does not talk to a radio, serial port or network: there is no controller
  that sends requests or receives confirms and indications. `DeviceEntry` only
  describes a device, it does not find one.
- It does not parse node, power or simple descriptors, and has no model of
  nodes, neighbours or source routes.
- It has no NaN-boxed value type, node events or Green Power frame handling.
- It offers no command line program.