from enum import Enum

class Category(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

class TechnologyType(str, Enum):
    MACHINE_LEARNING = "Machine Learning"
    NATURAL_LANGUAGE_PROCESSING = "Natural Language Processing"
    COMPUTER_VISION = "Computer Vision"
    GENERATIVE_AI = "Generative AI"
    ROBOTIC_PROCESS_AUTOMATION = "Robotic Process Automation"
    PREDICTIVE_ANALYTICS = "Predictive Analytics"
    CONVERSATIONAL_AI = "Conversational AI"

class ScoreField(str, Enum):
    OVERALL_BUSINESS_IMPACT = "overall_business_impact"
    OVERALL_FEASIBILITY_READINESS = "overall_feasibility_readiness"
    COST_SAVINGS_POTENTIAL = "cost_savings_potential"
    REVENUE_POTENTIAL = "revenue_potential"
    EFFICIENCY_IMPROVEMENT = "efficiency_improvement"
    EXPERIENCE_IMPROVEMENT = "experience_improvement"
    STRATEGIC_ALIGNMENT = "strategic_alignment"
    CUSTOMER_NEEDS_ALIGNMENT = "customer_needs_alignment"
    DATA_QUALITY = "data_quality"
    TECHNICAL_COMPLEXITY = "technical_complexity"
    INTERNAL_EXPERTISE = "internal_expertise"
    USER_ADOPTION_LIKELIHOOD = "user_adoption_likelihood"
    MODEL_BIAS_RISK = "model_bias_risk"
    COST_VS_ROI_ASSESSMENT = "cost_vs_roi_assessment"
