# tests/conftest.py

"""
Pytest Fixtures - Shared repositories, controllers and opportunity data

SEED DATA REFERENCE (ids assigned by position):
- 1, 2   -> "0-0" Quick Wins / Must-Dos
- 3, 4   -> "0-1" Strategic Investments
- 5, 6   -> "0-2" Long-Term Bets
- 7, 8   -> "1-0" Good Candidates
- 9, 10  -> "1-1" Evaluate Further
- 11     -> "1-2" Reconsider / Park
- 12     -> "2-0" Low Priority (Easier)
- 13     -> "2-1" Low Priority (Moderate)
- 14     -> "2-2" Avoid / Sunset
"""

import pytest

from opportunity_matrix.config import Settings
from opportunity_matrix.models.opportunity import SCORE_FIELDS, Opportunity, OpportunityCreate
from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.repositories.seed_data import load_seed_opportunities
from opportunity_matrix.services.dashboard import DashboardController
from opportunity_matrix.services.form_controller import FormController


# =============================================================================
# OPPORTUNITY DATA FIXTURES
# =============================================================================

@pytest.fixture
def valid_opportunity_data():
    """Every score at 5; lands in "1-1" with risk 5."""
    data = {
        "name": "Invoice Matching Assistant",
        "description": "Match supplier invoices to purchase orders.",
        "quick_win_potential": False,
        "technology_type": "Machine Learning",
    }
    data.update({field: 5 for field in SCORE_FIELDS})
    return data


@pytest.fixture
def quick_win_data(valid_opportunity_data):
    """High impact, high feasibility, low risk sub-scores."""
    return {
        **valid_opportunity_data,
        "name": "Ticket Auto-Triage",
        "overall_business_impact": 8,
        "overall_feasibility_readiness": 9,
        "model_bias_risk": 2,
        "cost_vs_roi_assessment": 2,
        "technical_complexity": 2,
    }


@pytest.fixture
def make_opportunity(valid_opportunity_data):
    """Factory: make_opportunity(id, **overrides) -> Opportunity."""
    def _make(opportunity_id: int, **overrides) -> Opportunity:
        data = OpportunityCreate(**{**valid_opportunity_data, **overrides})
        return Opportunity.create(opportunity_id, data)
    return _make


# =============================================================================
# STORE / CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def empty_repository():
    return OpportunityRepository()


@pytest.fixture
def seeded_repository():
    return OpportunityRepository(load_seed_opportunities())


@pytest.fixture
def form(empty_repository):
    return FormController(empty_repository)


@pytest.fixture
def open_form(form):
    form.toggle()
    return form


@pytest.fixture
def controller(seeded_repository):
    return DashboardController(seeded_repository)


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)
