class UserDirectoryError(Exception):
    """Base class for errors raised by user-directory."""


class UserDirectoryClientError(UserDirectoryError):
    """The caller's input conflicts with the current state of the directory.

    Transport layers should report these as client errors rather than
    server faults.
    """


class DuplicateEmailError(UserDirectoryClientError):
    def __init__(self, email: str):
        super().__init__(f"Email {email!r} is already in use.")
        self.email = email


class NotFoundError(UserDirectoryError):
    def __init__(self, entity_name: str, criteria: str):
        super().__init__(f"No {entity_name} matches {criteria}.")
        self.entity_name = entity_name
        self.criteria = criteria
