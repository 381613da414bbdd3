from typing import Optional, Sequence

from src.application.ports import FeatureSourcePort
from src.domain.models import Symptom, VisualFeatures
from src.domain.visual import derive_visual_features


class StaticFeatureSource(FeatureSourcePort):
    def __init__(self, region_visible: bool = True, features: Optional[VisualFeatures] = None):
        self.region_visible = region_visible
        self.features = features

    def detect_region(self) -> bool:
        return self.region_visible

    def analyze(self, symptoms: Sequence[Symptom]) -> VisualFeatures:
        if self.features is not None:
            return self.features
        return derive_visual_features(symptoms, region_visible=self.region_visible)
