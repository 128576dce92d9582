"""Typed error raised by action handlers."""

UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"
BAD_REQUEST = "BAD_REQUEST"

HTTP_STATUS = {
    UNAUTHORIZED: 401,
    NOT_FOUND: 404,
    BAD_REQUEST: 400,
}


class ActionError(Exception):
    """Error with a stable ``code`` and a human-readable ``message``."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}
