"""Services package for the tracker."""

from lifetracker.services.analytics_service import AnalyticsService
from lifetracker.services.dashboard_service import BudgetDashboardService
from lifetracker.services.export_service import ExportService
from lifetracker.services.goal_service import GoalService
from lifetracker.services.habit_service import HabitService
from lifetracker.services.persistence_service import PersistenceService
from lifetracker.services.storage_service import LocalStorage
from lifetracker.services.transaction_service import TransactionService

__all__ = [
    "AnalyticsService",
    "BudgetDashboardService",
    "ExportService",
    "GoalService",
    "HabitService",
    "LocalStorage",
    "PersistenceService",
    "TransactionService",
]
