"""Pydantic models for Conjugador API requests and responses."""

from pydantic import BaseModel, Field
from typing import Literal

from conjugador.settings import DEFAULT_VARIANT, MAX_INFINITIVE_LENGTH

VariantName = Literal["bp_post_reform", "bp_pre_reform", "ep_post_reform", "ep_pre_reform"]
MoodName = Literal["regular", "passive", "progressive"]


# ============================================================================
# Request Models
# ============================================================================


class VerbRequest(BaseModel):
    """Request body for verb information."""
    infinitive: str = Field(..., min_length=1, max_length=MAX_INFINITIVE_LENGTH, description="Portuguese infinitive")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    infinitive: str = Field(..., min_length=1, max_length=MAX_INFINITIVE_LENGTH, description="Portuguese infinitive")
    variant: VariantName = Field(DEFAULT_VARIANT, description="Brazilian/European spelling, before/after the 1990 reform")
    mood: MoodName = Field("regular", description="Active voice, passive (ser + participle) or progressive (estar)")
    pronoun1: str | None = Field(None, description="Object pronoun, reflexive 'se', or the indirect object of a pair")
    pronoun2: str | None = Field(None, description="Direct object pronoun paired with pronoun1 (optional)")
    tenses: list[str] | None = Field(None, description="Tense names to return, e.g. 'present_indicative' (optional)")


# ============================================================================
# Response Models
# ============================================================================


class VerbVariant(BaseModel):
    """Spelling of a verb in one variant."""
    variant: str = Field(..., description="Variant name")
    infinitive: str = Field(..., description="Infinitive as spelled in this variant")
    stem: str = Field(..., description="Infinitive without its two-letter ending")


class VerbResponse(BaseModel):
    """Response for /verb."""
    infinitive: str = Field(..., description="Canonical infinitive")
    ending: str = Field(..., description="Last two letters of the infinitive")
    variants: list[VerbVariant]
    derivative_of: str | None = Field(None, description="Irregular root the verb conjugates like")
    defect: str | None = Field(None, description="Defective verb family, if any")


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    infinitive: str = Field(..., description="Canonical infinitive")
    variant: str = Field(..., description="Variant name")
    mood: str = Field(..., description="Mood name")
    pronoun: str | None = Field(None, description="Clitic placed in every form (contracted pair or single)")
    conjugations: dict[str, list[str | None]] = Field(
        ..., description="Tense -> forms per person; alternatives joined by '/', null where the verb has no form"
    )


class TensesResponse(BaseModel):
    """Response for /tenses."""
    tenses: list[str] = Field(..., description="Tense names in build order")
    count: int
