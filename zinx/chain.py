"""Chain of responsibility over a list of interceptors."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from zinx.interfaces import IChain, IInterceptor, IMessage, IRequest


class Chain(IChain):
    """A position in an interceptor chain holding the request passed to it."""

    def __init__(self, interceptors: Sequence[IInterceptor], position: int, request: Any):
        self._interceptors = interceptors
        self._position = position
        self._request = request

    def request(self) -> Any:
        return self._request

    def proceed(self, request: Any) -> Any:
        """Run the interceptor at this position; past the end, return ``request``."""
        if self._position < len(self._interceptors):
            following = Chain(self._interceptors, self._position + 1, request)
            return self._interceptors[self._position].intercept(following)
        return request

    def get_message(self) -> Optional[IMessage]:
        """The message of the held request, if it is an ``IRequest``."""
        req = self.as_request(self._request)
        if req is None:
            return None
        return req.message

    def proceed_with_message(self, message: Optional[IMessage], response: Any) -> Any:
        """Store ``response`` on the held request and proceed with it.

        Without a message, a response or an ``IRequest`` to store it on,
        the held request is passed on unchanged.
        """
        if message is None or response is None:
            return self.proceed(self._request)
        req = self.as_request(self._request)
        if req is None:
            return self.proceed(self._request)
        req.response = response
        return self.proceed(req)

    def as_request(self, request: Any) -> Optional[IRequest]:
        """Return ``request`` if it is an ``IRequest``, otherwise ``None``."""
        if isinstance(request, IRequest):
            return request
        return None