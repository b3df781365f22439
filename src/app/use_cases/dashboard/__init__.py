"""Dashboard use cases"""
from .get_summary import GetDashboardSummary

__all__ = ["GetDashboardSummary"]
