"""
Repositories Package - AI Opportunities Prioritization Matrix
opportunity_matrix/repositories/__init__.py

In-memory opportunity store and its seed data.
"""

from opportunity_matrix.repositories.opportunity_repository import OpportunityRepository
from opportunity_matrix.repositories.seed_data import load_seed_opportunities, raw_seed_records

__all__ = [
    "OpportunityRepository",
    "load_seed_opportunities",
    "raw_seed_records",
]
