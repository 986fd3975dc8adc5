"""
Schema module for generation plans.
"""

from .models import DomainSchema, GenerationPlan
from .loader import load_plan, save_plan, validate_plan_file, describe_validation_error, PlanLoadError

__all__ = [
    'DomainSchema',
    'GenerationPlan',
    'load_plan',
    'save_plan',
    'validate_plan_file',
    'describe_validation_error',
    'PlanLoadError',
]
