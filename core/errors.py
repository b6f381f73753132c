class IntervYouError(Exception):
    """Base class for application errors."""


class HistoryUnavailable(IntervYouError):
    """The user's past sessions could not be read, so seen questions are unknown."""

    def __init__(self, user_id, message: str = "Session history is unavailable"):
        super().__init__(f"{message} (user {user_id})")
        self.user_id = user_id
