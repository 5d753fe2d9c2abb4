"""
Seed Data - AI Opportunities Prioritization Matrix
opportunity_matrix/repositories/seed_data.py

Starting list of opportunities for a fresh session. Raw records carry no id
and no overall risk; load_seed_opportunities() assigns ids by position and
derives the risk.
"""

from typing import Any, Dict, List, Tuple

import structlog

from opportunity_matrix.models.enumerations import TechnologyType
from opportunity_matrix.models.opportunity import SCORE_FIELDS, Opportunity, OpportunityCreate

logger = structlog.get_logger(__name__)

# Column order for the score tuples below matches SCORE_FIELDS:
# impact, feasibility, cost savings, revenue, efficiency, experience,
# strategic alignment, customer alignment, data quality, technical complexity,
# internal expertise, user adoption, model bias risk, cost vs ROI
_SeedRow = Tuple[str, str, TechnologyType, bool, Tuple[int, ...]]

_SEED_ROWS: List[_SeedRow] = [
    (
        "Automated Text Extraction from PDFs",
        "Core objective, enabling intelligent search; high data quality, mature tech, low bias risk.",
        TechnologyType.NATURAL_LANGUAGE_PROCESSING, True,
        (9, 8, 7, 4, 9, 6, 9, 7, 8, 3, 7, 8, 2, 2),
    ),
    (
        "Classification Model for Design Elements",
        "Core to organizing assets; good data, but potential for subtle bias in classification categories.",
        TechnologyType.COMPUTER_VISION, True,
        (8, 7, 6, 4, 8, 6, 8, 6, 7, 4, 6, 7, 5, 3),
    ),
    (
        "AI-Powered Predictive Asset Popularity",
        "Analyze historical usage to suggest relevant assets; data integration is complex, risk of model drift.",
        TechnologyType.PREDICTIVE_ANALYTICS, False,
        (8, 5, 4, 6, 6, 7, 7, 7, 5, 6, 5, 6, 5, 5),
    ),
    (
        "Automated Metadata Generation",
        "AI automatically tags assets with detailed, consistent metadata; requires robust CV/NLP, "
        "potential for inaccuracies or ethical tagging issues.",
        TechnologyType.COMPUTER_VISION, False,
        (9, 6, 7, 4, 8, 6, 8, 6, 5, 6, 5, 7, 6, 5),
    ),
    (
        "Generative AI for Initial Design Concepts",
        "Highly complex, requiring advanced GenAI models; limited training data, high risk of "
        "inconsistent output or ethical concerns.",
        TechnologyType.GENERATIVE_AI, False,
        (8, 2, 3, 7, 5, 8, 7, 7, 3, 9, 2, 5, 8, 8),
    ),
    (
        "AI for Cross-Platform Design Consistency Audit",
        "Identify and flag inconsistencies in branding elements; technically challenging, potential for "
        "false positives/negatives leading to user distrust.",
        TechnologyType.COMPUTER_VISION, False,
        (7, 3, 5, 3, 6, 5, 8, 6, 4, 9, 3, 4, 8, 7),
    ),
    (
        "AI-Enhanced Search Query Understanding",
        "NLP to better interpret complex user queries; relatively straightforward implementation, low user "
        "adoption risk if benefits are clear.",
        TechnologyType.NATURAL_LANGUAGE_PROCESSING, True,
        (6, 8, 4, 3, 6, 8, 6, 8, 7, 3, 7, 8, 3, 3),
    ),
    (
        "Automated Reporting on Asset Usage",
        "AI analyzes usage logs to generate reports; data is available, direct efficiency gain, low risk.",
        TechnologyType.PREDICTIVE_ANALYTICS, True,
        (5, 9, 5, 2, 7, 3, 5, 4, 8, 2, 8, 7, 2, 3),
    ),
    (
        "AI-Assisted User Onboarding",
        "AI-powered chatbot or tutorial system; content creation is key, user adoption depends on "
        "perceived helpfulness.",
        TechnologyType.CONVERSATIONAL_AI, False,
        (5, 5, 3, 2, 5, 7, 5, 7, 5, 5, 5, 5, 4, 5),
    ),
    (
        "Automated Rights & Licensing Tagging",
        "NLP to scan associated documents and tag assets; high legal/compliance risk if tagging is "
        "incorrect, requires robust accuracy and human oversight.",
        TechnologyType.NATURAL_LANGUAGE_PROCESSING, False,
        (6, 4, 6, 2, 6, 3, 6, 4, 4, 7, 4, 5, 9, 7),
    ),
    (
        "AI for Sentiment Analysis of Design Feedback",
        "Analyze written client feedback for sentiment trends; subjectivity in sentiment, data quality "
        "for nuances, potential for misinterpretation.",
        TechnologyType.NATURAL_LANGUAGE_PROCESSING, False,
        (5, 3, 2, 3, 3, 6, 5, 6, 3, 7, 3, 4, 6, 5),
    ),
    (
        "Automated Daily System Health Checks",
        "Simple RPA/scripting for system uptime; minimal complexity, low risk.",
        TechnologyType.ROBOTIC_PROCESS_AUTOMATION, True,
        (2, 9, 3, 1, 4, 1, 2, 1, 9, 1, 9, 8, 1, 2),
    ),
    (
        "AI-Generated Welcome Emails for New Team Members",
        "Basic GenAI for HR; low impact on core business, but simple to implement with minimal risk.",
        TechnologyType.GENERATIVE_AI, False,
        (2, 6, 1, 1, 3, 4, 2, 2, 6, 3, 6, 6, 3, 2),
    ),
    (
        "AI for Predicting Office Supply Needs",
        "Irrelevant to core asset management business; no significant risks or benefits in this context.",
        TechnologyType.PREDICTIVE_ANALYTICS, False,
        (1, 3, 1, 1, 2, 1, 1, 1, 2, 3, 3, 2, 2, 4),
    ),
]


def raw_seed_records() -> List[Dict[str, Any]]:
    """Seed rows as plain dicts (no id, no overall_risk)."""
    records = []
    for name, description, technology_type, quick_win, scores in _SEED_ROWS:
        record: Dict[str, Any] = {
            "name": name,
            "description": description,
            "quick_win_potential": quick_win,
            "technology_type": technology_type,
        }
        record.update(zip(SCORE_FIELDS, scores))
        records.append(record)
    return records


def load_seed_opportunities() -> List[Opportunity]:
    """Map the raw seed list to stored opportunities with ids 1..N."""
    opportunities = [
        Opportunity.create(index + 1, OpportunityCreate(**raw))
        for index, raw in enumerate(raw_seed_records())
    ]
    logger.info("seed_loaded", count=len(opportunities))
    return opportunities
