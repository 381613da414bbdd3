"""Markdown rendering for interview transcripts and diagnosis results."""
import re

from src.domain.models import DiagnosisResult


DISCLAIMER = (
    "⚕️ **Important:** This result is for informational purposes only and does not replace "
    "a professional medical diagnosis. For proper evaluation and treatment, please consult "
    "a qualified healthcare provider."
)

HIGHLIGHT_TERMS = [
    "pain", "hurt", "sore", "itch", "itchy", "itching", "discharge", "fluid", "red", "redness",
    "bump", "lump", "growth", "wart", "blister", "vesicle", "ulcer", "burning", "severe",
    "inflammation",
]

# Longest first so "redness" wins over "red"
_HIGHLIGHT_RE = re.compile(
    "(" + "|".join(re.escape(t) for t in sorted(HIGHLIGHT_TERMS, key=len, reverse=True)) + ")",
    re.IGNORECASE,
)

URGENCY_BANNERS = {
    "urgent": ("🔴", "Urgent", "Seek medical attention immediately."),
    "high": ("🟠", "High Priority", "See a specialist as soon as possible."),
    "moderate": ("🔵", "Moderate", "Book an appointment with a healthcare professional."),
    "low": ("🟢", "Low", "No immediate action needed."),
}


def highlight_symptoms(text: str) -> str:
    return _HIGHLIGHT_RE.sub(r"**\1**", text)


def confidence_band(confidence: int) -> str:
    if confidence > 80:
        return "high"
    if confidence > 60:
        return "medium"
    return "low"


def format_result_for_chat(result: DiagnosisResult) -> str:
    lines = ["# 📋 Diagnosis Complete\n"]

    if result.is_normal:
        lines.append("## ✅ No Abnormality Detected\n")
    else:
        icon, label, advice = URGENCY_BANNERS[result.urgency]
        lines.append(f"## {icon} Urgency: {label}")
        lines.append(f"{advice}\n")

    primary = result.primary
    band_icon = {"high": "🟢", "medium": "🟡", "low": "🔴"}[confidence_band(primary.confidence)]
    lines.append("## 🏥 Primary Finding")
    lines.append(f"**{primary.name}** (ICD-11 `{primary.code}`)")
    lines.append(f"- {band_icon} Confidence: {primary.confidence}%")
    lines.append(f"- Why: {result.reasoning}")
    lines.append("")

    if result.differentials:
        lines.append("## 🔍 Differential Diagnoses")
        for diff in result.differentials:
            lines.append(f"- {diff.name} (`{diff.code}`): {diff.probability}%")
        lines.append("")

    lines.append("## 📝 Recommended Actions")
    for i, action in enumerate(result.actions, 1):
        lines.append(f"{i}. {action}")
    lines.append("")

    lines.append("---")
    lines.append(DISCLAIMER)

    return "\n".join(lines)
