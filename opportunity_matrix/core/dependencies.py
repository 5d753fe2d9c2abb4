"""
Dependencies - AI Opportunities Prioritization Matrix
opportunity_matrix/core/dependencies.py

Factories that wire a dashboard session from settings.
"""

from typing import Optional

from opportunity_matrix.config import Settings, get_settings
from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.repositories.seed_data import load_seed_opportunities
from opportunity_matrix.services.dashboard import DashboardController
from opportunity_matrix.services.form_controller import FormController


def get_opportunity_repository(settings: Optional[Settings] = None) -> OpportunityRepository:
    """Fresh repository, seeded when LOAD_SEED_DATA is on."""
    settings = settings or get_settings()
    seed = load_seed_opportunities() if settings.LOAD_SEED_DATA else []
    return OpportunityRepository(seed)


def get_dashboard_controller(settings: Optional[Settings] = None) -> DashboardController:
    """New controller for one session. Not cached: each session owns its state."""
    settings = settings or get_settings()
    repository = get_opportunity_repository(settings)
    form = FormController(
        repository,
        default_score=settings.DRAFT_DEFAULT_SCORE,
        default_technology_type=settings.DEFAULT_TECHNOLOGY_TYPE,
    )
    return DashboardController(repository, form=form)
