class DirectoryError(Exception):
    """Base class for failures talking to the Slack directory."""


class ResolutionError(DirectoryError):
    """A user ID could not be resolved to a profile."""

    def __init__(self, user_id: str, reason: str):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"could not resolve user {user_id}: {reason}")


class FetchError(DirectoryError):
    """A channel listing request failed."""

    def __init__(self, user_id: str, reason: str):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"could not list channels for user {user_id}: {reason}")
