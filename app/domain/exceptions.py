"""Domain exceptions."""


class VehicleSourceError(Exception):
    """Raised when the vehicle data source cannot list vehicles."""


class InvalidListingStateError(Exception):
    """Raised when a listing operation is not allowed in the current session status."""

    def __init__(self, status: str, operation: str) -> None:
        """
        Initialize error.

        Args:
            status: Current listing session status
            operation: Operation that was attempted
        """
        self.status = status
        self.operation = operation
        super().__init__(f"Cannot {operation} while listing is {status}")


class ListingSessionNotFoundError(Exception):
    """Raised when a listing session does not exist or has expired."""

    def __init__(self, session_id: str) -> None:
        """
        Initialize error.

        Args:
            session_id: Missing session identifier
        """
        self.session_id = session_id
        super().__init__(f"Listing session not found: {session_id}")
