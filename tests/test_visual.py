"""Unit tests for the visual feature stub."""
from src.domain.models import Symptom
from src.domain.visual import derive_visual_features


def _symptoms(*categories):
    return [Symptom(category=c) for c in categories]


class TestDeriveVisualFeatures:
    """Test mocked lesion attributes."""

    def test_region_not_visible(self):
        """Test that nothing is described when the area is not visible."""
        features = derive_visual_features(_symptoms("ulcer"), region_visible=False)
        assert features.has_genitalia is False
        assert features.lesion_type is None
        assert not features.has_lesions

    def test_visible_without_symptoms(self):
        """Test a clean visible area."""
        features = derive_visual_features([], region_visible=True)
        assert features.has_genitalia is True
        assert features.lesion_type == "none"
        assert features.inflammation == "none"
        assert features.color is None

    def test_vesicles_take_priority(self):
        """Test that vesicles win over every other category."""
        features = derive_visual_features(_symptoms("redness", "lesion", "vesicles"), True)
        assert features.lesion_type == "vesicles"
        assert features.texture == "fluid-filled"
        assert features.pattern == "clustered"
        assert features.color == "clear"

    def test_lesion_before_ulcer(self):
        """Test warts profile."""
        features = derive_visual_features(_symptoms("ulcer", "lesion"), True)
        assert features.lesion_type == "warts"
        assert features.pattern == "cauliflower"
        assert features.inflammation == "mild"

    def test_ulcer_profile(self):
        """Test ulcer profile."""
        features = derive_visual_features(_symptoms("discharge", "ulcer"), True)
        assert features.lesion_type == "ulcers"
        assert features.inflammation == "severe"

    def test_discharge_keeps_defaults(self):
        """Test that discharge only overrides color and inflammation."""
        features = derive_visual_features(_symptoms("discharge"), True)
        assert features.lesion_type == "discharge"
        assert features.color == "yellow"
        assert features.pattern == "single"
        assert features.texture == "smooth"

    def test_unprofiled_symptoms(self):
        """Test symptoms without a visual profile."""
        features = derive_visual_features(_symptoms("pain", "itching"), True)
        assert features.lesion_type == "none"
        assert features.color == "skin-colored"
        assert features.inflammation == "none"
