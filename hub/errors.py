"""Client-facing errors for the hub API."""


class HubError(Exception):
    """A request the hub refuses. Rendered as {success: false, message} with the given status."""

    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}
