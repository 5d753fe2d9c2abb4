"""
scoring/ - Opportunity scoring

Modules:
    utils.py            - Decimal helpers (clamp, weighted sum, half-up rounding)
    categorizer.py      - Score -> High/Medium/Low and category pair -> grid cell
    risk_calculator.py  - Overall risk from bias, cost-vs-ROI and complexity
"""
