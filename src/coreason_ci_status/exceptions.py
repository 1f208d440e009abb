class CIStatusError(Exception):
    """Base exception for Coreason CI Status."""

    pass


class LocalEnvironmentError(CIStatusError):
    """Exception raised when the commit or remote URL cannot be read from the local checkout."""

    pass


class RemoteError(CIStatusError):
    """Exception raised when the remote status API call fails (network, auth, not found, malformed payload)."""

    pass


class UnrecognizedStateError(CIStatusError):
    """Exception raised when a check or the combined result reports a state outside the known values."""

    def __init__(self, state: str) -> None:
        super().__init__(f"Unknown status received from github: {state}")
        self.state = state
