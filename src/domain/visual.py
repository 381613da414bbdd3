from typing import Sequence

from .models import Symptom, VisualFeatures


# First matching symptom category decides the mocked lesion appearance.
VISUAL_PROFILES = (
    ("vesicles", dict(lesion_type="vesicles", color="clear", pattern="clustered",
                      texture="fluid-filled", inflammation="moderate")),
    ("lesion", dict(lesion_type="warts", color="skin-colored", pattern="cauliflower",
                    texture="rough", inflammation="mild")),
    ("ulcer", dict(lesion_type="ulcers", color="red", pattern="single",
                   texture="smooth", inflammation="severe")),
    ("discharge", dict(lesion_type="discharge", color="yellow", inflammation="moderate")),
    ("redness", dict(lesion_type="rash", color="red", pattern="scattered",
                     inflammation="moderate")),
)

DEFAULT_APPEARANCE = dict(
    lesion_type="none",
    color="skin-colored",
    pattern="single",
    inflammation="none",
    texture="smooth",
)


def derive_visual_features(symptoms: Sequence[Symptom], region_visible: bool) -> VisualFeatures:
    """Build a stand-in visual analysis from the symptoms gathered so far."""
    if not region_visible:
        return VisualFeatures(has_genitalia=False)

    if not symptoms:
        return VisualFeatures(has_genitalia=True, lesion_type="none", inflammation="none")

    categories = {s.category for s in symptoms}
    appearance = dict(DEFAULT_APPEARANCE)
    for category, profile in VISUAL_PROFILES:
        if category in categories:
            appearance.update(profile)
            break

    return VisualFeatures(has_genitalia=True, **appearance)
