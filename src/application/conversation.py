import logging
from typing import List, Optional

from src.domain.models import DiagnosisResult, SymptomAccumulator
from src.application.use_cases import SelfAssessmentUseCase


logger = logging.getLogger(__name__)


GREETING = (
    "Hello. Please tell me about your symptoms in detail. "
    "When did these symptoms start and what are you experiencing?"
)

REGION_NOT_VISIBLE = (
    "The affected area doesn't appear to be visible in the camera. "
    "For diagnosis, please show the area of concern to the camera. "
    "If you cannot show it, please describe your symptoms in detail."
)

ASSESSMENT_COMPLETE = "Assessment complete. Please start a new interview to begin again."

FALLBACK_QUESTION = (
    "Please tell me more about your symptoms. "
    "Are there any other concerns you'd like to discuss?"
)

# First matching keyword group picks the follow-up question.
FOLLOW_UP_QUESTIONS = [
    (("pain", "hurt", "sore"),
     "I understand you're experiencing pain. When did this pain start? Does it get worse during urination?"),
    (("itch", "itchy", "itching"),
     "I see you have itching symptoms. Are there any other symptoms like discharge or redness?"),
    (("discharge", "fluid", "leak"),
     "You mentioned discharge. Can you describe the color, amount, and any odor?"),
    (("red", "redness", "inflamed"),
     "I notice you mentioned redness. When did this redness appear? Is it spreading?"),
    (("bump", "lump", "growth", "wart"),
     "You mentioned bumps or growths. When did these appear? Have they changed in size or number?"),
    (("blister", "vesicle", "fluid-filled"),
     "You mentioned blisters. When did these appear? Are they painful?"),
    (("ulcer", "sore", "open wound"),
     "You mentioned sores or ulcers. Are these painful? When did they first appear?"),
    (("urination", "urinating", "pee"),
     "You mentioned urination symptoms. Is there pain, burning, or difficulty when urinating?"),
]


def choose_follow_up(user_text: str) -> str:
    lower_input = user_text.lower()
    for keywords, question in FOLLOW_UP_QUESTIONS:
        if any(word in lower_input for word in keywords):
            return question
    return FALLBACK_QUESTION


class InterviewConversation:
    """Drives the symptom interview: greeting, follow-up prompts, camera check, diagnosis."""

    def __init__(self, use_case: SelfAssessmentUseCase):
        self.use_case = use_case
        self.reset()

    def reset(self):
        self.accumulator = SymptomAccumulator()
        self.stage = "initial"  # initial, listening, responding
        self.transcript = ""
        self.last_prompt: Optional[str] = None
        self.region_detected: Optional[bool] = None
        self.conversation_history: List[dict] = []
        self.result: Optional[DiagnosisResult] = None

    def start(self) -> str:
        self.reset()
        return self._prompt(GREETING)

    def handle_user_input(self, user_text: str) -> Optional[str]:
        if not user_text or not user_text.strip():
            return None

        if self.result is not None:
            return ASSESSMENT_COMPLETE

        self.transcript = f"{self.transcript} {user_text}" if self.transcript else user_text
        self.conversation_history.append({"role": "user", "content": user_text})

        self.accumulator, _ = self.use_case.ingest_text(self.accumulator, user_text)

        self.stage = "responding"
        return self._prompt(choose_follow_up(user_text))

    def check_camera(self) -> Optional[str]:
        """Run the one-off camera check; returns a prompt when the area is not visible."""
        if self.region_detected is not None:
            return None

        self.region_detected = self.use_case.detect_region()
        if not self.region_detected:
            logger.info("Area of concern not visible in camera frame")
            return self._prompt(REGION_NOT_VISIBLE)

        self.accumulator = self.use_case.analyze_image(self.accumulator)
        return None

    def finish(self) -> DiagnosisResult:
        self.result = self.use_case.diagnose(self.accumulator)
        return self.result

    def _prompt(self, message: str) -> str:
        self.last_prompt = message
        self.conversation_history.append({"role": "assistant", "content": message})
        self.stage = "listening"
        return message
