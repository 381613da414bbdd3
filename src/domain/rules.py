from typing import Callable, List, Tuple

from .models import (
    NORMAL_CODE,
    DiagnosisResult,
    DifferentialDiagnosis,
    PrimaryDiagnosis,
    SymptomAccumulator,
)


ICD11_CODES = {
    # STIs
    "chlamydia": "1A95.0",
    "gonorrhea": "1A91.0",
    "syphilis": "1A62",
    "herpes": "1E90",
    "hpv_warts": "1E91.1",
    # Non-STIs
    "candida": "1F23.0",
    "normal": NORMAL_CODE,
}

DERMATITIS_CODE = "1F20"
FOLLICULITIS_CODE = "1F21"
NONSPECIFIC_URETHRITIS_CODE = "1A96"
KERATOSIS_CODE = "2F20"


def _result(code, name, confidence, differentials, reasoning, actions, urgency) -> DiagnosisResult:
    return DiagnosisResult(
        primary=PrimaryDiagnosis(code=code, name=name, confidence=confidence),
        differentials=tuple(
            DifferentialDiagnosis(code=c, name=n, probability=p) for c, n, p in differentials
        ),
        reasoning=reasoning,
        actions=tuple(actions),
        urgency=urgency,
    )


NO_ABNORMALITY = _result(
    ICD11_CODES["normal"], "No abnormality detected", 95, [],
    "No reported symptoms or visual abnormalities were detected.",
    [
        "Continue regular health checkups",
        "Perform self-checks if symptoms appear",
        "Practice safe sexual behaviors",
    ],
    "low",
)

HERPES = _result(
    ICD11_CODES["herpes"], "Suspected Genital Herpes Infection", 85,
    [
        (ICD11_CODES["syphilis"], "Syphilis", 15),
        (DERMATITIS_CODE, "Contact Dermatitis", 10),
    ],
    "The combination of vesicular lesions and pain strongly suggests genital herpes infection.",
    [
        "Seek immediate consultation with a urologist or STI specialist",
        "PCR testing is needed for definitive diagnosis",
        "Avoid sexual contact to prevent partner transmission",
        "Early antiviral treatment is most effective",
    ],
    "high",
)

SYPHILIS = _result(
    ICD11_CODES["syphilis"], "Suspected Syphilis", 80,
    [
        (ICD11_CODES["herpes"], "Genital Herpes", 20),
        (DERMATITIS_CODE, "Traumatic Ulcer", 15),
    ],
    "The presence of painless ulcers suggests primary syphilis lesions (chancre).",
    [
        "Seek urgent medical attention immediately",
        "Serological testing (RPR, TPLA) is required",
        "Partner testing is also necessary",
        "Early treatment can achieve complete cure",
    ],
    "urgent",
)

HPV_WARTS = _result(
    ICD11_CODES["hpv_warts"], "Suspected Genital Warts (HPV Infection)", 90,
    [
        (KERATOSIS_CODE, "Seborrheic Keratosis", 10),
        (FOLLICULITIS_CODE, "Folliculitis", 5),
    ],
    "Cauliflower-like warty lesions strongly suggest HPV-induced genital warts.",
    [
        "Consult with a urologist or dermatologist",
        "Tissue diagnosis for definitive confirmation is recommended",
        "Consider partner screening",
        "Treatment options include surgical removal, cryotherapy, and topical medications",
    ],
    "moderate",
)

GONOCOCCAL_URETHRITIS = _result(
    ICD11_CODES["gonorrhea"], "Suspected Gonococcal Urethritis", 75,
    [
        (ICD11_CODES["chlamydia"], "Chlamydial Urethritis", 60),
        (NONSPECIFIC_URETHRITIS_CODE, "Non-specific Urethritis", 30),
    ],
    "Purulent discharge with dysuria suggests bacterial urethritis. "
    "Differentiation between gonorrhea and chlamydia is needed.",
    [
        "Consult with a urologist",
        "Urine testing and discharge culture for pathogen identification is necessary",
        "Simultaneous partner treatment is important",
        "Appropriate antibiotic therapy is required",
    ],
    "high",
)

CHLAMYDIA = _result(
    ICD11_CODES["chlamydia"], "Suspected Chlamydia Infection", 70,
    [
        (ICD11_CODES["gonorrhea"], "Gonorrhea", 40),
        (NONSPECIFIC_URETHRITIS_CODE, "Non-specific Urethritis", 25),
    ],
    "Mild symptoms suggest chlamydia infection.",
    [
        "Consult with a urologist or STI specialist",
        "PCR testing for definitive diagnosis is recommended",
        "Partner testing and treatment is also necessary",
        "Appropriate antibiotic treatment can achieve complete cure",
    ],
    "moderate",
)

CANDIDA = _result(
    ICD11_CODES["candida"], "Suspected Candida Balanitis", 80,
    [
        (DERMATITIS_CODE, "Contact Dermatitis", 20),
        (FOLLICULITIS_CODE, "Seborrheic Dermatitis", 15),
    ],
    "Itching with white discharge suggests candida infection.",
    [
        "Consult with a urologist or dermatologist",
        "Fungal testing for definitive diagnosis is recommended",
        "Antifungal medication treatment is effective",
        "Maintain cleanliness and dryness",
    ],
    "moderate",
)

INFLAMMATION = _result(
    DERMATITIS_CODE, "Suspected Non-specific Inflammation", 60,
    [
        (ICD11_CODES["chlamydia"], "Chlamydia Infection", 30),
        (ICD11_CODES["candida"], "Candida Infection", 25),
        (FOLLICULITIS_CODE, "Contact Dermatitis", 20),
    ],
    "Inflammatory symptoms are present but lack specific findings, requiring detailed examination.",
    [
        "Consult with a urologist for detailed examination",
        "Exclusion of infectious diseases is important",
        "Seek early consultation if symptoms worsen",
        "Maintain good hygiene",
    ],
    "moderate",
)

GENERAL_STI = _result(
    NONSPECIFIC_URETHRITIS_CODE, "Suspected STI (Requires Further Investigation)", 50,
    [
        (ICD11_CODES["chlamydia"], "Chlamydia Infection", 40),
        (ICD11_CODES["gonorrhea"], "Gonorrhea", 30),
        (ICD11_CODES["candida"], "Candida Infection", 25),
    ],
    "Symptoms suggest possible STI, but definitive diagnosis requires detailed examination.",
    [
        "Consult with a urologist or STI specialist",
        "Comprehensive STI testing panel is recommended",
        "Consider partner screening",
        "Seek early consultation before symptoms worsen",
    ],
    "moderate",
)


def _no_findings(acc: SymptomAccumulator) -> bool:
    return not acc.reported_categories and not (
        acc.visual_features.has_genitalia and acc.visual_features.lesion_type != "none"
    )


def _herpes(acc: SymptomAccumulator) -> bool:
    vf = acc.visual_features
    return "vesicles" in acc.reported_categories or (
        vf.lesion_type == "vesicles" and vf.texture == "fluid-filled"
    )


def _syphilis(acc: SymptomAccumulator) -> bool:
    vf = acc.visual_features
    return "ulcer" in acc.reported_categories or (
        vf.lesion_type == "ulcers" and vf.inflammation == "severe"
    )


def _hpv(acc: SymptomAccumulator) -> bool:
    vf = acc.visual_features
    return "lesion" in acc.reported_categories or (
        vf.lesion_type == "warts" and vf.pattern == "cauliflower"
    )


def _urethritis(acc: SymptomAccumulator) -> bool:
    reported = acc.reported_categories
    return (
        "discharge" in reported
        or "dysuria" in reported
        or acc.visual_features.lesion_type == "discharge"
    )


def _candida(acc: SymptomAccumulator) -> bool:
    reported = acc.reported_categories
    return "itching" in reported and (
        "discharge" in reported or acc.visual_features.color == "white"
    )


def _inflammation(acc: SymptomAccumulator) -> bool:
    reported = acc.reported_categories
    return "redness" in reported or "pain" in reported


def _urethritis_result(acc: SymptomAccumulator) -> DiagnosisResult:
    # Secondary branch looks at every symptom, visual ones included.
    categories = acc.categories
    if "discharge" in categories and "dysuria" in categories:
        return GONOCOCCAL_URETHRITIS
    return CHLAMYDIA


def _static(result: DiagnosisResult) -> Callable[[SymptomAccumulator], DiagnosisResult]:
    return lambda acc: result


# Ordered priority list: first matching predicate wins.
DIAGNOSIS_RULES: List[Tuple[str, Callable[[SymptomAccumulator], bool], Callable[[SymptomAccumulator], DiagnosisResult]]] = [
    ("no_abnormality", _no_findings, _static(NO_ABNORMALITY)),
    ("herpes", _herpes, _static(HERPES)),
    ("syphilis", _syphilis, _static(SYPHILIS)),
    ("hpv_warts", _hpv, _static(HPV_WARTS)),
    ("urethritis", _urethritis, _urethritis_result),
    ("candida", _candida, _static(CANDIDA)),
    ("inflammation", _inflammation, _static(INFLAMMATION)),
]


def match_rule(acc: SymptomAccumulator) -> str:
    for name, predicate, _ in DIAGNOSIS_RULES:
        if predicate(acc):
            return name
    return "general_sti"


def diagnose(acc: SymptomAccumulator) -> DiagnosisResult:
    for _, predicate, resolve in DIAGNOSIS_RULES:
        if predicate(acc):
            return resolve(acc)
    return GENERAL_STI
