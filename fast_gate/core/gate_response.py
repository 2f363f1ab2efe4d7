from typing import Any, Optional

from fast_gate.exceptions.gate_exceptions import AuthorizationException


class GateResponse:
    """
    Outcome of an authorization check.

    `allowed`, `message` and `code` are fixed at construction. The HTTP status
    can be attached afterwards through the fluent `with_status()`/`as_not_found()`.

    Example:
        GateResponse.deny("You do not own this post.").as_not_found()
    """

    __slots__ = ("_allowed", "_message", "_code", "_status")

    def __init__(self, allowed: bool, message: Optional[str] = None, code: Any = None) -> None:
        self._allowed = bool(allowed)
        self._message = message
        self._code = code
        self._status: Optional[int] = None

    @property
    def allowed(self) -> bool:
        return self._allowed

    @property
    def denied(self) -> bool:
        return not self._allowed

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def code(self) -> Any:
        return self._code

    @property
    def status(self) -> Optional[int]:
        """The HTTP status code to respond with on denial."""
        return self._status

    @classmethod
    def allow(cls, message: Optional[str] = None, code: Any = None) -> 'GateResponse':
        return cls(True, message, code)

    @classmethod
    def deny(cls, message: Optional[str] = None, code: Any = None) -> 'GateResponse':
        return cls(False, message, code)

    @classmethod
    def deny_with_status(cls, status: int, message: Optional[str] = None, code: Any = None) -> 'GateResponse':
        return cls.deny(message, code).with_status(status)

    @classmethod
    def deny_as_not_found(cls, message: Optional[str] = None, code: Any = None) -> 'GateResponse':
        return cls.deny_with_status(404, message, code)

    def authorize(self) -> 'GateResponse':
        """
        Raise if the response was denied, otherwise return it.

        Raises:
            AuthorizationException: Carries this response; status is `self.status` or 403.
        """
        if self.denied:
            raise AuthorizationException(self)

        return self

    def with_status(self, status: Optional[int]) -> 'GateResponse':
        self._status = status
        return self

    def as_not_found(self) -> 'GateResponse':
        return self.with_status(404)

    def to_dict(self) -> dict:
        return {
            "allowed": self._allowed,
            "message": self._message,
            "code": self._code,
        }

    def __str__(self) -> str:
        return self._message or ""

    def __repr__(self) -> str:
        return (
            f"GateResponse(allowed={self._allowed!r}, message={self._message!r}, "
            f"code={self._code!r}, status={self._status!r})"
        )
