from typing import Protocol, Sequence
from src.domain.models import Symptom, VisualFeatures


class FeatureSourcePort(Protocol):
    def detect_region(self) -> bool:
        """
        Returns True when the area of concern is visible in the current camera frame.
        """
        ...

    def analyze(self, symptoms: Sequence[Symptom]) -> VisualFeatures:
        ...
