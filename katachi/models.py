"""
Pydantic models for katachi results and verb data.

Two groups of models live here:
- Engine results (ConjugationResult, GridResult) returned by katachi.engine.
- The verb-data chart shape (VerbData) that a verb-data provider sends and
  that katachi.engine.build_chart produces.

Usage:
    from katachi.models import VerbData

    data = VerbData.model_validate(payload)
    result = conjugate("書く", state, verb_data=data)
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Engine Results
# =============================================================================

class ConjugationResult(BaseModel):
    """
    One conjugated form.

    `source` tells where the surface form came from: 'irregular' (irregular
    verb table), 'provider' (pre-computed verb data) or 'rules' (pattern
    tables).
    """
    verb: str = Field(..., description="Dictionary form")
    construction: str = Field(..., description="Canonical construction name")
    surface_form: str = Field(..., description="Conjugated form (empty if unavailable)")
    gloss: str = Field(..., description="English gloss")
    formality: str = Field("casual", description="Requested formality level")
    verb_type: str = Field(..., description="Inflection class label or 'irregular'")
    source: str = Field("rules", description="'irregular', 'provider' or 'rules'")


class GridResult(BaseModel):
    """One construction at every formality level."""
    verb: str = Field(..., description="Dictionary form")
    construction: str = Field(..., description="Canonical construction name")
    gloss: str = Field(..., description="English gloss")
    verb_type: str = Field(..., description="Inflection class label or 'irregular'")
    cells: Dict[str, str] = Field(default_factory=dict, description="Formality -> surface form")

    @classmethod
    def from_results(cls, results: List[ConjugationResult]) -> "GridResult":
        """
        Collect per-formality results for the same construction.

        Raises:
            ValueError: If results is empty
        """
        if not results:
            raise ValueError("No conjugation results")

        first = results[0]
        return cls(
            verb=first.verb,
            construction=first.construction,
            gloss=first.gloss,
            verb_type=first.verb_type,
            cells={r.formality: r.surface_form for r in results},
        )


# =============================================================================
# Verb Data Chart
# =============================================================================

class ConjugationEntry(BaseModel):
    """A single chart cell."""
    english: str = Field("", description="English gloss")
    japanese: str = Field("", description="Conjugated form")
    alts: List[str] = Field(default_factory=list, description="Alternative forms")


class Conjugations(BaseModel):
    """
    Chart of pre-computed forms.

    `tenses` is grouped by category (time, aspect, mood, modals, desire);
    voice forms sit in their own mapping.
    """
    tenses: Dict[str, Dict[str, ConjugationEntry]] = Field(default_factory=dict)
    voice: Dict[str, ConjugationEntry] = Field(default_factory=dict)

    def get(self, category: str, form: str) -> Optional[ConjugationEntry]:
        """Get the entry at category.form, or None."""
        if category == "voice":
            return self.voice.get(form)
        return self.tenses.get(category, {}).get(form)

    def set(self, category: str, form: str, entry: ConjugationEntry) -> None:
        if category == "voice":
            self.voice[form] = entry
        else:
            self.tenses.setdefault(category, {})[form] = entry


class VerbData(BaseModel):
    """Pre-computed conjugation chart for one verb."""
    valid: bool = Field(True, description="False if the verb was rejected")
    error: Optional[str] = Field(None, description="Rejection reason")
    verb: str = Field(..., description="Dictionary form")
    verb_type: str = Field("", alias="verbType", description="Inflection class label")
    negative: bool = Field(False, description="True if every chart cell is negated")
    conjugations: Conjugations = Field(default_factory=Conjugations)
    polite_conjugations: Optional[Conjugations] = Field(
        None,
        alias="politeConjugations",
        description="Polite chart, if the provider computed one",
    )

    class Config:
        populate_by_name = True  # Accept both verb_type and verbType
