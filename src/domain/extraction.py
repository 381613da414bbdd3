from typing import List, Sequence, Tuple

from .models import Symptom


# (category, keywords, default severity), checked in this order
SYMPTOM_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("pain", ("pain", "hurt", "sore", "ache"), "moderate"),
    ("itching", ("itch", "itchy", "itching"), "moderate"),
    ("discharge", ("discharge", "fluid", "leak", "drip"), "moderate"),
    ("redness", ("red", "redness", "inflamed", "inflammation"), "moderate"),
    ("lesion", ("bump", "lump", "growth", "wart"), "moderate"),
    ("vesicles", ("blister", "vesicle", "fluid-filled", "bubble"), "moderate"),
    ("ulcer", ("ulcer", "sore", "open wound", "crater"), "severe"),
    ("dysuria", ("urination", "urinating", "pee", "burning"), "moderate"),
)

# Intensity qualifiers, highest severity first
SEVERITY_QUALIFIERS = {
    "pain": (
        ("severe", ("severe", "intense", "excruciating")),
        ("mild", ("mild", "slight")),
    ),
    "discharge": (
        ("severe", ("heavy", "lots", "much")),
    ),
}


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(word in text for word in keywords)


def _severity_for(category: str, text: str, default: str) -> str:
    for severity, qualifiers in SEVERITY_QUALIFIERS.get(category, ()):
        if _contains_any(text, qualifiers):
            return severity
    return default


def extract_symptoms(text: str) -> List[Symptom]:
    """Map a free-text transcript to reported symptom tags.

    Matching is a case-insensitive substring test, so one keyword can feed
    more than one category ("sore" is both pain and ulcer).
    """
    symptoms: List[Symptom] = []
    if not text or not text.strip():
        return symptoms

    lower_text = text.lower()
    for category, keywords, default_severity in SYMPTOM_KEYWORDS:
        if _contains_any(lower_text, keywords):
            severity = _severity_for(category, lower_text, default_severity)
            symptoms.append(Symptom(kind="reported", category=category, severity=severity))
    return symptoms
