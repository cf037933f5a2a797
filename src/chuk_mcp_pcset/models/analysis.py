"""
Analysis models - serializable results of set-class analysis.

These wrap the pure core in pydantic models so that tools can return
them as JSON and callers can validate what they receive.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_pcset.constants import MODULUS


def _reduce(values: list[int]) -> list[int]:
    return [v % MODULUS for v in values]


class SetClass(BaseModel):
    """
    A named set class from the catalogue.

    The prime form is computed from the pitch classes when the catalogue
    is loaded, so entries can be written in any familiar voicing.
    """

    name: str = Field(..., description="Identifier (e.g., 'major_triad')")
    family: str = Field("", description="Catalogue family (e.g., 'triads', 'scales')")
    description: str = Field("", description="Human-readable description")
    pitch_classes: list[int] = Field(..., description="Pitch classes as written")
    prime_form: list[int] = Field(default_factory=list, description="Prime form")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure set-class name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid set class name: {v}")
        return v.lower().replace("-", "_")

    @field_validator("pitch_classes")
    @classmethod
    def reduce_pitch_classes(cls, v: list[int]) -> list[int]:
        """Keep pitch classes in [0, 12)."""
        return _reduce(v)


class SetAnalysis(BaseModel):
    """
    Canonical forms and descriptors of one pitch-class set.
    """

    pitch_classes: list[int] = Field(..., description="Input, reduced mod 12, order kept")
    cardinality: int = Field(..., ge=0, description="Number of distinct pitch classes")
    normal_form: list[int] = Field(..., description="Normal order")
    reduced_form: list[int] = Field(..., description="Normal order transposed to 0")
    prime_form: list[int] = Field(..., description="Set-class representative")
    interval_class_vector: list[int] = Field(..., min_length=6, max_length=6)
    interval_vector: list[int] = Field(..., min_length=12, max_length=12)
    chroma: int = Field(..., ge=0, lt=1 << MODULUS, description="12-bit presence mask")
    complement: list[int] = Field(..., description="Pitch classes not in the set")
    transpositional_symmetry: int = Field(
        ..., ge=0, description="Number of Tn (n in 0-11) that map the set onto itself"
    )
    is_inversionally_symmetric: bool = Field(
        ..., description="Whether some TnI maps the set onto itself"
    )
    names: list[str] = Field(default_factory=list, description="Matching catalogue entries")

    model_config = {"frozen": True}


class SetRelation(BaseModel):
    """
    Single-operator relation between a source and a target set.

    transposition_number is n where Tn(source) == target, compared
    position by position; index_number is n where TnI(source) == target.
    """

    source: list[int] = Field(..., description="Source as compared")
    target: list[int] = Field(..., description="Target as compared")
    compared_in_normal_form: bool = Field(
        False, description="Whether both sets were put in normal order first"
    )
    transposition_number: int | None = Field(None, description="n with Tn(source) == target")
    index_number: int | None = Field(None, description="n with TnI(source) == target")
    same_set_class: bool = Field(..., description="Whether the prime forms are equal")

    model_config = {"frozen": True}

    @property
    def related(self) -> bool:
        """True when a single Tn or TnI maps source onto target."""
        return self.transposition_number is not None or self.index_number is not None
