# rtccore

Pure-Python building blocks for real-time voice and video calls.

## Installation

```
pip install rtccore
pip install "rtccore[test]"   # adds the test dependencies
```

## Contents

- `rtccore.enums`: connection-level states (`IceState`, `GatheringState`,
  `SignalingState`, `ConnectionState`) and call-level enums (`ErrorCode`,
  `InputMode`, which is a combinable flag, `StreamType`, `StreamStatus`,
  `CallConnectionState`, `LogLevel`, `LogSource`).
- `rtccore.exceptions`: `BaseRTCException` and its subclasses (`RTCException`,
  `SdpParseException`, `CallConnectionError`, `CryptoError`, `FileError` and
  others). `wrap_rtc_error(error_type, message)` builds an `RTCException` with
  the message `"[TYPE] message"`. `wrap_sdp_parse_error(line, description)`
  builds an `SdpParseException` and puts the offending line first when one is given.
- `rtccore.binary`: byte-buffer helpers. `to_string` maps each byte to one
  character. `set_with_const` fills a buffer with one byte value. `copy_into`
  raises `ValueError` if the destination is too small. `random_fill` and
  `set_random` write secure random bytes.
- `rtccore.bignum`: `BigNum`, a big integer whose operations set a sticky
  `failed` flag instead of raising. It has `set_bytes`, `set_word`,
  `set_mod_exp`, `set_sub` and `assign`, and `get_bytes` returns the big-endian
  bytes. It is meant for Diffie–Hellman arithmetic. `set_mod_exp` fails on
  negative or failed operands and on a zero modulus.
- `rtccore.encryption`: `sha1_digest`, `sha256_digest` and `sha256_concat`.
  `prepare_key_iv(key, msg_key, x)` derives a `KeyIv` (a 32-byte key and a
  16-byte IV) from a shared key and a 16-byte message key.
  `aes_ctr_process(data, key_iv)` runs AES-256 in counter mode, and the same
  call both encrypts and decrypts.
- `rtccore.models`: the dataclasses `IceCandidate`, `PeerIceParameters`,
  `RTCServer`, `Description` (with `SdpType`), `RTCOnDataEvent` and
  `I420ImageData`. `I420ImageData` checks that its contents hold a full Y plane
  followed by quarter-size U and V planes, and returns each plane through
  `data_y`, `data_u` and `data_v`. `sdp_type_to_string` gives the wire name
  of an `SdpType`.
- `rtccore.hardware`: `HardwareInfo` samples this process's CPU time.
  `cpu_usage()` returns the percentage of total CPU capacity used since the
  previous reading, or `-1.0` if the clocks did not advance. `core_count()`
  returns the number of cores.

## Examples

```python
from rtccore.encryption import prepare_key_iv, aes_ctr_process

shared = bytes(range(256))
msg_key = bytes(16)
key_iv = prepare_key_iv(shared, msg_key, 0)
ciphertext = aes_ctr_process(b"hello", key_iv)
assert aes_ctr_process(ciphertext, key_iv) == b"hello"
```

```python
from rtccore.bignum import BigNum

result = BigNum()
result.set_mod_exp(BigNum.from_word(3), BigNum.from_word(4), BigNum.from_word(7))
assert result.value == 4 and not result.failed
```

```python
from rtccore.models import I420ImageData

frame = I420ImageData(width=4, height=2, contents=bytes(12))
assert frame.luminance_size() == 8 and frame.chroma_size() == 2
```

## What this package does not do

It does not open peer connections, gather ICE candidates or carry media.
It also does not build or parse session descriptions, compress payloads, or
route log output. It provides the data types, errors and crypto primitives
that such a call stack is built on.

## Running the tests

```
pytest
```