"""
Services module for the AI Opportunities Prioritization Matrix.
"""

from opportunity_matrix.services.dashboard import DashboardController
from opportunity_matrix.services.form_controller import FormController, coerce_bool, coerce_int
from opportunity_matrix.services.grid_presenter import GridPresenter


__all__ = [
    "DashboardController",
    "FormController",
    "GridPresenter",
    "coerce_bool",
    "coerce_int",
]
