"""
Payroll views package.

Views are split into modules by functionality:
- settings_views.py - Pay settings
- summary_views.py - Pay periods and summaries
- tools_views.py - Quick pay calculator and data reset
"""

from .settings_views import pay_settings
from .summary_views import pay_periods, period_summary
from .tools_views import quick_pay, reset_data

__all__ = [
    "pay_settings",
    "pay_periods",
    "period_summary",
    "quick_pay",
    "reset_data",
]
