class DecisionMakerError(Exception):
    """Base exception for the decision maker."""

    pass


class DiscoveryError(DecisionMakerError):
    """Base exception for pod/process discovery errors."""

    pass


class DiscoveryRootError(DiscoveryError):
    """Raised when the process-table root cannot be read."""

    def __init__(self, root: str, reason: Exception):
        self.root = root
        self.reason = reason
        super().__init__(f"failed to read process table root '{root}': {reason}")
