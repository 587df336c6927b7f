# Fatal startup errors. Anything raised from here ends the process with exit code 1.


class StartupError(Exception):
    pass


class UserDataRootError(StartupError):
    """The platform user-data directory could not be determined."""


class DirectoryCreateFailed(StartupError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Failed to create backup directory @{path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EventSourceRegistrationFailed(StartupError):
    def __init__(self, reason=None):
        self.reason = reason
        message = "Failed to register hotkeys!"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
