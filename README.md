# zinx

Building blocks for message-oriented servers, in plain Python with no
third-party dependencies:

- **`zinx.interfaces`**: the shared contracts. These are `IMessage`, `IRequest`,
  `IRouter`, `IInterceptor`, `IChain`, `IDataPack`, `IDecoder`,
  `IFrameDecoder` and `ILogger`. The module also holds the `LengthField` settings,
  `ByteOrder`, `HeartBeatOption` and a minimal `BaseRequest` that runs bound
  handlers in order (`call`, `abort`, `goto`, `bind_router`,
  `bind_router_slices`).
- **`zinx.chain`**: `Chain`, a chain of responsibility that passes a request
  through a list of interceptors in order.
- **`zinx.framedecoder`**: `FrameDecoder` and `frame_decoder_from_params`.
  They split a byte stream into frames by a length field. The offset, width,
  adjustment and number of bytes to strip can all be set. Partial frames are
  kept until the rest arrives. Frames longer than the maximum are discarded.
- **`zinx.logger`**: `LoggerCore`, a logger with these features:
  - a bit-flag header (`LogFlag`: date, time, microseconds, short or long file, level)
  - a prefix
  - a level threshold (`LogLevel`)
  - an optional hook that receives each formatted line
- **`zinx.stdlog`**: module-level logging functions backed by one shared
  logger. `set_logger()` and `ins()` let you swap in your own `ILogger`.
- **`zinx.mmo`**: an area-of-interest grid for game worlds. It has `Grid` in
  `zinx.mmo.grid`, `AOIManager` in `zinx.mmo.aoi` and `WorldManager` in
  `zinx.mmo.world`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Splitting a stream into frames

```python
from zinx.framedecoder import frame_decoder_from_params

# 2-byte big-endian length at offset 0; strip the length field.
decoder = frame_decoder_from_params(
    max_frame_length=1024,
    length_field_offset=0,
    length_field_length=2,
    length_adjustment=0,
    initial_bytes_to_strip=2,
)

frames = decoder.decode(b"\x00\x0cHELLO, ")
assert frames == []                      # incomplete, kept for later
frames = decoder.decode(b"WORLD")
assert frames == [b"HELLO, WORLD"]
```

Supported length-field widths are 1, 2, 3, 4 and 8 bytes. The 8-byte width is
read as signed. Building a `FrameDecoder` with any other width raises
`FrameDecoderError`.

While decoding, `FrameDecoderError` is raised in three cases:

- the length field is negative;
- the adjusted frame length falls before the end of the length field;
- the frame is shorter than the number of bytes to strip.

## Interceptor chains

```python
from zinx.chain import Chain
from zinx.interfaces import IInterceptor


class Upper(IInterceptor):
    def intercept(self, chain):
        return chain.proceed(chain.request().upper())


result = Chain([Upper()], 0, "hello").proceed("hello")
assert result == "HELLO"
```

Once every interceptor has run, the chain returns the request it was given.
`proceed_with_message(message, response)` works when the held request is an
`IRequest`. It stores `response` on that request before passing it on.

## Logging

```python
import sys
from zinx.logger import LoggerCore, LogFlag, LogLevel

log = LoggerCore("NET", LogFlag.STD_FLAG | LogFlag.LEVEL, sys.stderr)
log.set_log_level(LogLevel.INFO)
log.debug("not shown")
log.infof("listening on %s:%d", "0.0.0.0", 8999)
```

The formatting methods (`debugf`, `infof` and the like) use `%`-style
formatting. The plain ones (`debug`, `info` and the like) join their
arguments with spaces.

Some methods do more than write the line:

- `panic` and `panicf` log the line and then raise `LogPanic`.
- `fatal` and `fatalf` log the line and then raise `SystemExit(1)`.
- `stack` logs its arguments and the stacks of all threads at error level.

The module-level functions in `zinx.stdlog` all act on one shared logger,
`std_log`. They include `info`, `errorf`, `set_prefix`, `reset_flags`,
`add_flag`, `set_log_level` and `stack`.

## Area of interest

```python
from zinx.mmo.aoi import AOIManager

aoi = AOIManager(0, 250, 5, 0, 250, 5)
aoi.add_to_grid_by_pos(1, 10.0, 10.0)
aoi.add_to_grid_by_pos(2, 60.0, 60.0)
print(sorted(aoi.get_pids_by_pos(10.0, 10.0)))   # [1, 2]
print(len(aoi.get_surround_grids_by_gid(0)))     # 4: a corner grid and its 3 neighbours
```

`WorldManager` keeps track of the players online and places each one in the
grid by its `x` and `z` position. A player is any object with `pid`, `x` and
`z` attributes. When no `AOIManager` is given, a default map is used: x from
85 to 410 in 10 columns, y from 75 to 400 in 20 rows.

## What this package does not do

The interfaces describe messages, requests, routers and data packs. The
package does not include:

- a network server or client;
- connection handling or heartbeats;
- concrete message or data-pack classes;
- any wire format for game messages.

Logging goes to a stream only. There is no log file output or rotation.

The `zinx.mmo` modules only keep the bookkeeping: grids, player ids and
positions. They do not send anything to players.