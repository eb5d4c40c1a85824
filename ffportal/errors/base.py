from typing import Any


class ApplicationError(Exception):
    """General application error"""

    http_code: int = 500
    error_code: int
    error: str

    def __init__(self, details: Any | None = None):
        # copy class message to the instance, so details never leak into the class
        self.error = self.error
        if details:
            self.error += f": {details}"
        super().__init__(self.error)
