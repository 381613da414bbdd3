import logging
from typing import List, Tuple

from src.application.ports import FeatureSourcePort
from src.domain.extraction import extract_symptoms
from src.domain.models import DiagnosisResult, Symptom, SymptomAccumulator
from src.domain.rules import diagnose, match_rule


logger = logging.getLogger(__name__)


class SelfAssessmentUseCase:
    """Threads a SymptomAccumulator through text intake, camera analysis and diagnosis."""

    def __init__(self, feature_source: FeatureSourcePort):
        self.feature_source = feature_source

    def ingest_text(self, acc: SymptomAccumulator, text: str) -> Tuple[SymptomAccumulator, List[Symptom]]:
        symptoms = extract_symptoms(text)
        if symptoms:
            logger.debug("Extracted symptoms: %s", [s.category for s in symptoms])
        return acc.add_symptoms(symptoms), symptoms

    def detect_region(self) -> bool:
        return self.feature_source.detect_region()

    def analyze_image(self, acc: SymptomAccumulator) -> SymptomAccumulator:
        features = self.feature_source.analyze(acc.symptoms)
        logger.debug("Visual analysis: %s", features)
        return acc.with_visual_features(features)

    def diagnose(self, acc: SymptomAccumulator) -> DiagnosisResult:
        result = diagnose(acc)
        logger.info(
            "Diagnosis rule=%s code=%s urgency=%s (symptoms=%d)",
            match_rule(acc), result.primary.code, result.urgency, len(acc.symptoms),
        )
        return result
