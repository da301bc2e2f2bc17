"""Base exception for failures that carry a user-facing message."""


class DomainError(Exception):
    default_message = "Request failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)
