# dnsdog

A small DNS library. It decodes resource-record data from the DNS wire
format, and it sends already-encoded DNS messages to a nameserver over
UDP, TCP, TLS or HTTPS.

It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading records

Every record class has a class method `read(stated_length, cursor)`.
`stated_length` is the RDLENGTH from the resource-record header, and
`cursor` is a `dnsdog.wire.Cursor` positioned at the start of the record
data. The cursor holds the whole message, so compressed names can be
followed.

```python
from dnsdog.wire import Cursor
from dnsdog.record.address import A
from dnsdog.record.names import MX

record = A.read(4, Cursor(b"\x7f\x00\x00\x01", 0))
print(record.address)               # 127.0.0.1

data = b"\x00\x0a\x07example\x03com\x00"
mx = MX.read(len(data), Cursor(data, 0))
print(mx.preference, mx.exchange)   # 10 example.com.
```

`Cursor(data, position)` reads big-endian integers with `read_u8()`,
`read_u16()` and `read_u32()`, and raw bytes with `read_exact(count)`;
`position` and `remaining` show where it is.

Record classes are frozen dataclasses:

| Module                   | Types                              |
|--------------------------|------------------------------------|
| `dnsdog.record.address`  | `A`, `AAAA`                        |
| `dnsdog.record.names`    | `CNAME`, `NS`, `PTR`, `MX`, `SRV`  |
| `dnsdog.record.soa`      | `SOA`                              |
| `dnsdog.record.loc`      | `LOC` (with `Size`, `Position`, `Altitude`, `Direction`) |
| `dnsdog.record.caa`      | `CAA`                              |
| `dnsdog.record.txt`      | `TXT`                              |
| `dnsdog.record.hinfo`    | `HINFO`                            |
| `dnsdog.record.naptr`    | `NAPTR`                            |
| `dnsdog.record.keys`     | `OPENPGPKEY`, `SSHFP`, `TLSA`      |
| `dnsdog.record.uri`      | `URI`                              |
| `dnsdog.record.eui`      | `EUI48`, `EUI64`                   |
| `dnsdog.record.opt`      | `OPT` (EDNS pseudo-record)         |

Each of them except `OPT` carries `NAME` and `RR_TYPE`. `OPT.read(cursor)`
takes no length: it starts where the class field would be. `OPT.to_bytes()`
serialises it for the additional section of a request.

Display helpers: `EUI48.formatted_address()` and `EUI64.formatted_address()`
(dash-separated hex), `SSHFP.hex_fingerprint()`,
`TLSA.hex_certificate_data()` and `OPENPGPKEY.base64_key()`. The LOC parts
format themselves with `str()`, for example `51°30′12.748″ N` or `405050.50m`;
a latitude or longitude out of range is `None`.

Text fields (TXT, HINFO, CAA, NAPTR, URI) are decoded as UTF-8 with
invalid bytes replaced.

### Looking up types

`dnsdog.record.catalog` maps type numbers and names to record classes:
`record_class(type_number)` and `record_class_by_name(name)` return the
class or `None`. `OPT` is not in the catalogue. `OtherRecord` holds the
raw bytes of a record whose type cannot be decoded.

`dnsdog.record.others.UnknownQtype.from_number(number)` describes such a
type: `str()` gives its name if it is a known type (`46` → `RRSIG`) and
its number otherwise. `find_other_qtype_number(name)` looks up the number
of a known but undecoded type.

### Names

Domain names in records are `dnsdog.labels.Labels`. `Labels.encode(name)`
splits a dotted string (raising `ValueError` for a label over 63 bytes),
and `str()` joins it back with a trailing dot (`"."` for the root).
`read_labels(cursor)` reads a name, following compression pointers, and
returns the labels and the number of bytes they occupied in place.

## Errors

Malformed data raises a subclass of `dnsdog.wire.WireError`:

- `WireIOError`: the buffer ended before the record did;
- `WrongRecordLength`: the stated length breaks a rule of the type;
  `mandated_length` is a `MandatedLength`, built with
  `MandatedLength.exactly(n)` or `MandatedLength.at_least(n)`;
- `WrongLabelLength`: the stated length disagrees with what was read
  (`stated_length`, `length_after_labels`);
- `WrongVersion`: a LOC record with a version other than 0.

A loop of compression pointers raises `WireError` itself.

```python
from dnsdog.wire import Cursor, MandatedLength, WrongRecordLength
from dnsdog.record.address import A

try:
    A.read(3, Cursor(b"\x7f\x00\x00", 0))
except WrongRecordLength as error:
    assert error.mandated_length == MandatedLength.exactly(4)
```

## Transports

`dnsdog.transport` holds `udp.UdpTransport`, `tcp.TcpTransport`,
`tls.TlsTransport`, `https.HttpsTransport` and `auto.AutoTransport`. Each
is built from an address (for HTTPS, a URL of the form
`https://host/path`) and a `parser`, a callable that turns the received
bytes into a response. `send(request)` calls `request.to_bytes()`, sends
the bytes, and returns `parser(reply)`.

```python
from dnsdog.transport.udp import UdpTransport

class RawQuery:
    def __init__(self, data):
        self.data = data

    def to_bytes(self):
        return self.data

transport = UdpTransport("192.0.2.53", parser=bytes)
reply = transport.send(RawQuery(query_bytes))
```

- UDP and TCP use port 53 and TLS uses port 853, unless the address has
  its own port (`"192.0.2.53:5353"`). UDP is IPv4 only.
- TCP and TLS messages are prefixed with their length;
  `tcp.prefix_with_length(data)` and `tcp.length_prefixed_read(stream)`
  do this and can be used on their own.
- TLS presents `TlsTransport.sni_domain()`, the address up to any colon.
- HTTPS sends a POST with `application/dns-message` to port 443 and reads
  one reply of up to 4096 bytes; `https.parse_http_response(data)` splits
  an HTTP response into code, reason, headers and body.
- `AutoTransport` tries UDP first and retries over TCP when the parsed
  response has `flags.truncated` set, so its parser must return objects
  with that attribute.

Failures raise a subclass of `dnsdog.transport.errors.TransportError`:
`ResponseWireError` (the parser raised `WireError`), `NetworkError`,
`TruncatedResponse`, `TlsError`, `HttpError` or `WrongHttpStatus`. An
HTTPS URL that is not `https://host/path`, or a TCP/TLS request over
65535 bytes, raises `ValueError`.

## What it does not do

- It does not build DNS queries or parse whole DNS messages (header,
  question and answer sections). The transports need a request object
  with `to_bytes()` and a parser for the reply, supplied by the caller.
- It has no command-line program; it is a library only.