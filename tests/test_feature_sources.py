"""Unit tests for feature source adapters."""
from types import SimpleNamespace

import pytest

from src.domain.models import Symptom, VisualFeatures
from src.infrastructure.vision.random_source import RandomFeatureSource
from src.infrastructure.vision.static_source import StaticFeatureSource


class TestRandomFeatureSource:
    """Test the seeded camera simulation."""

    def test_same_seed_is_reproducible(self):
        """Test that seeding makes runs repeatable."""
        symptoms = [Symptom(category="vesicles")]
        a = RandomFeatureSource(seed=42)
        b = RandomFeatureSource(seed=42)
        runs_a = [(a.detect_region(), a.analyze(symptoms)) for _ in range(10)]
        runs_b = [(b.detect_region(), b.analyze(symptoms)) for _ in range(10)]
        assert runs_a == runs_b

    def test_certain_detection(self):
        """Test rate 1.0 always finds the area."""
        source = RandomFeatureSource(seed=1, detection_rate=1.0, region_rate=1.0)
        for _ in range(20):
            assert source.detect_region()
            assert source.analyze([Symptom(category="ulcer")]).lesion_type == "ulcers"

    def test_never_detected(self):
        """Test rate 0.0 never finds the area."""
        source = RandomFeatureSource(seed=1, detection_rate=0.0, region_rate=0.0)
        for _ in range(20):
            assert not source.detect_region()
            assert source.analyze([Symptom(category="ulcer")]) == VisualFeatures(has_genitalia=False)

    @pytest.mark.parametrize("kwargs", [{"detection_rate": 1.5}, {"region_rate": -0.1}])
    def test_invalid_rates(self, kwargs):
        """Test rate validation."""
        with pytest.raises(ValueError):
            RandomFeatureSource(**kwargs)

    def test_from_settings(self):
        """Test construction from settings."""
        settings = SimpleNamespace(feature_seed=7, image_detection_rate=0.5, region_detection_rate=0.25)
        source = RandomFeatureSource.from_settings(settings)
        assert source.detection_rate == 0.5
        assert source.region_rate == 0.25


class TestStaticFeatureSource:
    """Test the deterministic adapter."""

    def test_fixed_features(self):
        """Test that configured features are returned as-is."""
        features = VisualFeatures(has_genitalia=True, lesion_type="rash", color="white")
        source = StaticFeatureSource(features=features)
        assert source.analyze([Symptom(category="vesicles")]) == features

    def test_derived_features(self):
        """Test derivation when no features are configured."""
        source = StaticFeatureSource()
        assert source.analyze([Symptom(category="discharge")]).lesion_type == "discharge"

    def test_hidden_region(self):
        """Test a hidden area."""
        source = StaticFeatureSource(region_visible=False)
        assert source.detect_region() is False
        assert source.analyze([Symptom(category="lesion")]).has_genitalia is False
