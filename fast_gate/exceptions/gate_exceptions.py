from typing import TYPE_CHECKING

from fast_gate.exceptions.http_exceptions import HttpException

if TYPE_CHECKING:
    from fast_gate.core.gate_response import GateResponse


class AuthorizationException(HttpException):
    """Raised by `GateResponse.authorize()` when the response is a denial.

    The HTTP status is the one set on the response, or 403 when none was set.
    """

    default_message = "This action is unauthorized."

    def __init__(self, response: 'GateResponse'):
        self.response = response
        super().__init__(
            status_code=response.status or 403,
            error_type="unauthorized_action",
            message=response.message or self.default_message,
            data={"code": response.code} if response.code is not None else None,
        )

    @property
    def code(self):
        return self.response.code
