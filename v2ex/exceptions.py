"""Exception raised by the V2EX client."""

from __future__ import annotations


class V2exError(Exception):
    """A call failed before a typed result could be produced.

    Covers transport failures, response bodies that do not match the
    expected schema, and requests that could not be built. The underlying
    exception is chained as ``__cause__`` and exposed as :attr:`cause`.
    API responses with ``success: false`` are not errors.
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.detail = detail
        self.status_code = status_code
        self.cause = cause
        if status_code is None:
            super().__init__(detail)
        else:
            super().__init__(f"{status_code}: {detail}")
