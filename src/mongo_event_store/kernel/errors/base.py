"""Root of the mongo_event_store error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error carrying a stable ``code`` and structured ``detail``.

    ``str(error)`` is the plain message, so errors read naturally in
    tracebacks and ``pytest.raises(match=...)``. Use :meth:`to_dict` when
    the error goes into a structured log line.

    *cause* is chained as ``__cause__``, exactly as ``raise ... from cause``
    would, so an error carried in an ``Err`` and raised later by
    ``unwrap()`` still shows the original failure.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]
