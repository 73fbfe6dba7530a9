"""Abstract interfaces and shared value types of the framework."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

ZINX_DATA_PACK = "zinx_pack_tlv_big_endian"
ZINX_DATA_PACK_OLD = "zinx_pack_ltv_little_endian"
ZINX_MESSAGE = "zinx_message"

HEARTBEAT_DEFAULT_MSG_ID = 99999

HandleStep = int


class ByteOrder(enum.Enum):
    """Byte order of a multi-byte integer field.

    The value is the name accepted by ``int.from_bytes`` and ``int.to_bytes``.
    """

    BIG = "big"
    LITTLE = "little"


@dataclass
class LengthField:
    """Layout of the length field used to split a byte stream into frames."""

    order: ByteOrder = ByteOrder.BIG
    max_frame_length: int = 0
    length_field_offset: int = 0
    length_field_length: int = 0
    length_adjustment: int = 0
    initial_bytes_to_strip: int = 0

    def end_offset(self) -> int:
        """Offset of the first byte after the length field."""
        return self.length_field_offset + self.length_field_length


class IMessage(ABC):
    """A message carrying an id and a data segment."""

    @property
    @abstractmethod
    def msg_id(self) -> int: ...

    @msg_id.setter
    @abstractmethod
    def msg_id(self, value: int) -> None: ...

    @property
    @abstractmethod
    def data(self) -> bytes: ...

    @data.setter
    @abstractmethod
    def data(self, value: bytes) -> None: ...

    @property
    @abstractmethod
    def data_len(self) -> int: ...

    @data_len.setter
    @abstractmethod
    def data_len(self, value: int) -> None: ...

    @property
    @abstractmethod
    def raw_data(self) -> bytes: ...


class IRequest(ABC):
    """A client request: the connection it came from and its message."""

    @property
    @abstractmethod
    def connection(self) -> Any: ...

    @property
    @abstractmethod
    def data(self) -> Optional[bytes]: ...

    @property
    @abstractmethod
    def msg_id(self) -> int: ...

    @property
    @abstractmethod
    def message(self) -> Optional[IMessage]: ...

    @property
    @abstractmethod
    def response(self) -> Any: ...

    @response.setter
    @abstractmethod
    def response(self, value: Any) -> None: ...

    @abstractmethod
    def bind_router(self, router: "IRouter") -> None: ...

    @abstractmethod
    def call(self) -> None:
        """Run the next handler; the caller resumes once it returns."""

    @abstractmethod
    def abort(self) -> None:
        """Stop running further handlers."""

    @abstractmethod
    def goto(self, step: HandleStep) -> None:
        """Continue with the handler at ``step``."""

    @abstractmethod
    def bind_router_slices(self, handlers: list["RouterHandler"]) -> None: ...

    @abstractmethod
    def router_slices_next(self) -> None: ...


class BaseRequest(IRequest):
    """A minimal request.

    Without a connection, a message or bound handlers it carries nothing and
    its operations have no effect.
    """

    def __init__(
        self, connection: Any = None, message: Optional[IMessage] = None
    ) -> None:
        self._connection = connection
        self._message = message
        self._response: Any = None
        self._router: Optional[IRouter] = None
        self._handlers: list[RouterHandler] = []
        self._index = -1

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def data(self) -> Optional[bytes]:
        return self._message.data if self._message is not None else None

    @property
    def msg_id(self) -> int:
        return self._message.msg_id if self._message is not None else 0

    @property
    def message(self) -> Optional[IMessage]:
        return self._message

    @property
    def response(self) -> Any:
        return self._response

    @response.setter
    def response(self, value: Any) -> None:
        self._response = value

    def bind_router(self, router: "IRouter") -> None:
        """Run the router's hooks and handler as this request's handlers."""
        self._router = router
        self.bind_router_slices([router.pre_handle, router.handle, router.post_handle])

    def call(self) -> None:
        self.router_slices_next()

    def abort(self) -> None:
        self._index = len(self._handlers)

    def goto(self, step: HandleStep) -> None:
        self._index = step - 1

    def bind_router_slices(self, handlers: list["RouterHandler"]) -> None:
        self._handlers = list(handlers)
        self._index = -1

    def router_slices_next(self) -> None:
        self._index += 1
        while self._index < len(self._handlers):
            self._handlers[self._index](self)
            self._index += 1


RouterHandler = Callable[[IRequest], None]


class IRouter(ABC):
    """Business handling for one message id, with hooks around it."""

    @abstractmethod
    def pre_handle(self, request: IRequest) -> None: ...

    @abstractmethod
    def handle(self, request: IRequest) -> None: ...

    @abstractmethod
    def post_handle(self, request: IRequest) -> None: ...


class IChain(ABC):
    """A position in a chain of interceptors."""

    @abstractmethod
    def request(self) -> Any:
        """The request data held at this position."""

    @abstractmethod
    def get_message(self) -> Optional[IMessage]: ...

    @abstractmethod
    def proceed(self, request: Any) -> Any:
        """Pass ``request`` on to the next interceptor."""

    @abstractmethod
    def proceed_with_message(self, message: Optional[IMessage], response: Any) -> Any: ...


class IInterceptor(ABC):
    """One link of a chain of responsibility."""

    @abstractmethod
    def intercept(self, chain: IChain) -> Any: ...


class IDecoder(IInterceptor):
    """An interceptor that splits frames described by a length field."""

    @property
    @abstractmethod
    def length_field(self) -> Optional[LengthField]: ...


class IDataPack(ABC):
    """Packs messages to bytes and unpacks message headers."""

    @property
    @abstractmethod
    def head_len(self) -> int: ...

    @abstractmethod
    def pack(self, msg: IMessage) -> bytes: ...

    @abstractmethod
    def unpack(self, data: bytes) -> IMessage: ...


class IFrameDecoder(ABC):
    """Accumulates stream bytes and yields complete frames."""

    @abstractmethod
    def decode(self, data: bytes) -> list[bytes]: ...


class ILogger(ABC):
    """A pluggable logger."""

    @abstractmethod
    def info_f(self, fmt: str, *args: Any) -> None: ...

    @abstractmethod
    def error_f(self, fmt: str, *args: Any) -> None: ...

    @abstractmethod
    def debug_f(self, fmt: str, *args: Any) -> None: ...

    @abstractmethod
    def info_fx(self, ctx: Any, fmt: str, *args: Any) -> None: ...

    @abstractmethod
    def error_fx(self, ctx: Any, fmt: str, *args: Any) -> None: ...

    @abstractmethod
    def debug_fx(self, ctx: Any, fmt: str, *args: Any) -> None: ...


OnRemoteNotAlive = Callable[[Any], None]
HeartBeatMsgFunc = Callable[[Any], bytes]
HeartBeatFunc = Callable[[Any], None]


@dataclass
class HeartBeatOption:
    """User-supplied settings for heartbeat checking."""

    make_msg: Optional[HeartBeatMsgFunc] = None
    on_remote_not_alive: Optional[OnRemoteNotAlive] = None
    heart_beat_msg_id: int = 0
    router: Optional[IRouter] = None
    router_slices: list[RouterHandler] = field(default_factory=list)