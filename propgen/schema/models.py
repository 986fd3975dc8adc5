"""
Pydantic models for generation plan validation.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional, Union


class DomainSchema(BaseModel):
    """Schema definition for a single value domain."""
    name: str = Field(description="Domain name")
    type: str = Field(description="Type name (e.g., 'Int', 'float64')")
    iterations: Optional[int] = Field(None, ge=0, description="Number of samples, overrides the plan default")
    edgecases: Optional[List[Union[int, float]]] = Field(None, description="Replacement edge cases")
    min: Optional[float] = Field(None, description="Inclusive lower bound applied as a filter")
    max: Optional[float] = Field(None, description="Inclusive upper bound applied as a filter")
    scale: Optional[Union[int, float]] = Field(None, description="Multiplier applied to every value; an int keeps integer kinds exact")

    @model_validator(mode='after')
    def validate_bounds(self):
        """Ensure min does not exceed max."""
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self


class GenerationPlan(BaseModel):
    """Root schema for a generation plan."""
    version: str = Field(description="Schema version")
    seed: Optional[int] = Field(None, description="Seed for the random source")
    iterations: int = Field(default=100, ge=0, description="Default number of samples per domain")
    domains: List[DomainSchema] = Field(min_length=1, description="List of domain definitions")

    @field_validator('version')
    @classmethod
    def validate_version(cls, v):
        """Validate schema version format."""
        parts = v.split('.')
        if len(parts) != 3:
            raise ValueError(f"Version must be in format 'X.Y.Z', got '{v}'")

        for part in parts:
            if not part.isdigit():
                raise ValueError(f"Version parts must be numeric, got '{v}'")

        return v

    @model_validator(mode='after')
    def validate_unique_names(self):
        """Validate that domain names are unique."""
        seen = set()
        for domain in self.domains:
            if domain.name in seen:
                raise ValueError(f"Duplicate domain name '{domain.name}'")
            seen.add(domain.name)
        return self

    def get_domain(self, name: str) -> Optional[DomainSchema]:
        """Get domain schema by name."""
        for domain in self.domains:
            if domain.name == name:
                return domain
        return None
