"""
YAML generation plan loader with validation.
"""

import logging
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union
from pydantic import ValidationError
from .models import GenerationPlan

logger = logging.getLogger(__name__)


class PlanLoadError(Exception):
    """
    Exception raised when a plan file cannot be loaded.

    Every problem found is kept in ``problems``, one line each.
    """

    def __init__(self, path: Union[str, Path], problems: List[str]):
        self.path = Path(path)
        self.problems = problems
        super().__init__(f"{self.path}: " + "; ".join(problems))


def _location(loc) -> str:
    """Render a pydantic error location as 'domains[0].type'."""
    text = ""
    for part in loc:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text or "plan"


def describe_validation_error(error: ValidationError) -> List[str]:
    """Turn a pydantic ValidationError into one 'location: message' line per problem."""
    return [f"{_location(e['loc'])}: {e['msg']}" for e in error.errors()]


def _read_mapping(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise PlanLoadError(path, ["plan file not found"])
    if path.suffix not in ('.yaml', '.yml'):
        raise PlanLoadError(path, [f"expected a .yaml or .yml file, got '{path.suffix}'"])

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise PlanLoadError(path, [f"invalid YAML: {e}"])
    except OSError as e:
        raise PlanLoadError(path, [f"cannot read file: {e}"])

    if not isinstance(data, dict):
        raise PlanLoadError(path, [f"top level must be a mapping, got {type(data).__name__}"])
    return data


def load_plan(path: Union[str, Path]) -> GenerationPlan:
    """
    Load and validate a generation plan from a YAML file.

    Args:
        path: Path to the YAML plan file

    Returns:
        Validated GenerationPlan object

    Raises:
        PlanLoadError: If the file is missing, unreadable, or not a valid plan
    """
    path = Path(path)
    data = _read_mapping(path)

    try:
        plan = GenerationPlan.model_validate(data)
    except ValidationError as e:
        raise PlanLoadError(path, describe_validation_error(e))

    logger.debug("Loaded plan %s with %d domains", path, len(plan.domains))
    return plan


def save_plan(plan: GenerationPlan, path: Union[str, Path]) -> None:
    """
    Write a generation plan as YAML, keeping field order and omitting unset values.

    Raises:
        PlanLoadError: If the file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    text = yaml.safe_dump(plan.model_dump(exclude_none=True), default_flow_style=False, sort_keys=False)
    try:
        path.write_text(text)
    except OSError as e:
        raise PlanLoadError(path, [f"cannot write file: {e}"])


def validate_plan_file(path: Union[str, Path]) -> List[str]:
    """
    Check a plan file without raising.

    Returns:
        The problems found, empty when the plan is valid
    """
    try:
        load_plan(path)
    except PlanLoadError as e:
        return e.problems
    return []
