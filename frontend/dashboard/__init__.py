from .client import DashboardClient
from .state import DashboardController, DashboardState

__all__ = ["DashboardClient", "DashboardController", "DashboardState"]
