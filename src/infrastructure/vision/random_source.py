import logging
import random
from typing import Optional, Sequence

from src.application.ports import FeatureSourcePort
from src.domain.models import Symptom, VisualFeatures
from src.domain.visual import derive_visual_features
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class RandomFeatureSource(FeatureSourcePort):
    """Simulated camera: detection is a coin flip, lesion features follow the symptoms."""

    def __init__(
        self,
        seed: Optional[int] = None,
        detection_rate: float = 0.7,
        region_rate: float = 0.6,
    ):
        for name, rate in (("detection_rate", detection_rate), ("region_rate", region_rate)):
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {rate}")
        self._rng = random.Random(seed)
        self.detection_rate = detection_rate
        self.region_rate = region_rate

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RandomFeatureSource":
        settings = settings or Settings()
        return cls(
            seed=settings.feature_seed,
            detection_rate=settings.image_detection_rate,
            region_rate=settings.region_detection_rate,
        )

    def detect_region(self) -> bool:
        return self._rng.random() < self.region_rate

    def analyze(self, symptoms: Sequence[Symptom]) -> VisualFeatures:
        visible = self._rng.random() < self.detection_rate
        if not visible:
            logger.debug("Simulated analysis did not find the area of concern")
        return derive_visual_features(symptoms, region_visible=visible)
