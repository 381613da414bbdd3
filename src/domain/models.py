from typing import Iterable, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


SymptomKind = Literal["reported", "visual"]
SymptomCategory = Literal[
    "pain", "itching", "discharge", "redness", "lesion", "vesicles", "ulcer", "dysuria"
]
Severity = Literal["mild", "moderate", "severe"]
Urgency = Literal["low", "moderate", "high", "urgent"]

LesionType = Literal["vesicles", "ulcers", "warts", "discharge", "rash", "none"]
LesionColor = Literal["red", "yellow", "green", "white", "clear", "brown", "skin-colored"]
LesionPattern = Literal["clustered", "scattered", "single", "cauliflower", "linear"]
Inflammation = Literal["none", "mild", "moderate", "severe"]
Texture = Literal["smooth", "rough", "bumpy", "fluid-filled"]


NORMAL_CODE = "QA02"


class Symptom(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SymptomKind = "reported"
    category: SymptomCategory
    severity: Severity = "moderate"
    duration: Optional[str] = None
    location: Optional[str] = None

    @field_validator("duration", "location")
    @classmethod
    def blank_to_none(cls, v: Optional[str]):
        if v is not None:
            v = v.strip()
            if len(v) == 0:
                return None
        return v


class VisualFeatures(BaseModel):
    """Mocked lesion attributes for the area shown to the camera."""

    model_config = ConfigDict(frozen=True)

    has_genitalia: bool = False
    lesion_type: Optional[LesionType] = None
    color: Optional[LesionColor] = None
    pattern: Optional[LesionPattern] = None
    inflammation: Optional[Inflammation] = None
    texture: Optional[Texture] = None

    @property
    def has_lesions(self) -> bool:
        return self.lesion_type is not None and self.lesion_type != "none"


class SymptomAccumulator(BaseModel):
    """Per-session evidence: reported/visual symptoms plus the latest visual analysis.

    Immutable; every update returns a new accumulator.
    """

    model_config = ConfigDict(frozen=True)

    symptoms: Tuple[Symptom, ...] = ()
    visual_features: VisualFeatures = VisualFeatures()

    def add_symptoms(self, symptoms: Iterable[Symptom]) -> "SymptomAccumulator":
        return self.model_copy(update={"symptoms": self.symptoms + tuple(symptoms)})

    def with_visual_features(self, features: VisualFeatures) -> "SymptomAccumulator":
        return self.model_copy(update={"visual_features": features})

    @property
    def categories(self) -> List[str]:
        return [s.category for s in self.symptoms]

    @property
    def reported_categories(self) -> List[str]:
        return [s.category for s in self.symptoms if s.kind == "reported"]


class PrimaryDiagnosis(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    confidence: int = Field(..., ge=0, le=100)


class DifferentialDiagnosis(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    probability: int = Field(..., ge=0, le=100)


class DiagnosisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: PrimaryDiagnosis
    differentials: Tuple[DifferentialDiagnosis, ...] = ()
    reasoning: str
    actions: Tuple[str, ...] = ()
    urgency: Urgency

    @property
    def is_normal(self) -> bool:
        return self.primary.code == NORMAL_CODE
