"""
Domain errors raised by the dashboard update functions.
Routers translate them into HTTP 400 responses.
"""


class DashboardError(Exception):
    """Base class for user-facing validation failures."""

    message = "Invalid input."

    def __init__(self, message=None, value=None):
        self.value = value
        super().__init__(message or self.message)


class InvalidAmount(DashboardError):
    message = "Please enter a valid amount."


class InvalidGoal(DashboardError):
    message = "Please enter a valid reserve goal."
