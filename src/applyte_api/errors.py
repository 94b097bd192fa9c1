class ApplyteError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ApplyteError):
    """
    Malformed client input. Carries the HTTP status the client should see:
    422 for values that fail validation, 400 for missing or conflicting parameters.
    """

    status_code = 400


class UserNotAuthorizedError(ApplyteError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized", status_code: int | None = None):
        super().__init__(message, status_code)


class UserExistedError(BadRequestError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message, 400)
