import logging
from typing import Optional

import streamlit as st

from src.application.conversation import InterviewConversation
from src.application.ports import FeatureSourcePort
from src.application.use_cases import SelfAssessmentUseCase
from src.infrastructure.config import Settings
from src.infrastructure.vision.random_source import RandomFeatureSource
from src.infrastructure.vision.static_source import StaticFeatureSource
from src.presentation.formatting import DISCLAIMER, format_result_for_chat, highlight_symptoms


logger = logging.getLogger(__name__)


CAMERA_ANALYZED = "📷 Camera check complete: the area of concern was analyzed."


def build_feature_source(settings: Settings) -> FeatureSourcePort:
    if settings.feature_source == "static":
        return StaticFeatureSource()
    return RandomFeatureSource.from_settings(settings)


def _init_session_state(settings: Settings):
    if "interview" not in st.session_state:
        use_case = SelfAssessmentUseCase(build_feature_source(settings))
        st.session_state.interview = InterviewConversation(use_case)
    if "chat_messages" not in st.session_state:
        st.session_state.chat_messages = []


def _new_interview():
    interview = st.session_state.interview
    greeting = interview.start()
    st.session_state.chat_messages = [{"role": "assistant", "content": greeting}]


def run_camera_check(interview: InterviewConversation) -> Optional[str]:
    """Returns the chat message for a camera check, or None when it already ran."""
    if interview.region_detected is not None:
        return None
    prompt = interview.check_camera()
    if prompt:
        return prompt
    return CAMERA_ANALYZED


def _render_sidebar(settings: Settings):
    st.sidebar.title("⚙️ Session")
    st.sidebar.caption(f"**Camera simulation:** {settings.feature_source}")

    interview = st.session_state.interview
    if st.sidebar.button("📷 Check Camera", use_container_width=True):
        message = run_camera_check(interview)
        if message:
            st.session_state.chat_messages.append({"role": "assistant", "content": message})
        st.rerun()

    if interview.transcript:
        st.sidebar.markdown("### Transcript")
        st.sidebar.markdown(highlight_symptoms(interview.transcript))

    st.sidebar.divider()

    if st.sidebar.button("🔄 New Interview", use_container_width=True):
        _new_interview()
        st.rerun()


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(
        page_title="STI Self-Check",
        page_icon="⚕️",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    _init_session_state(settings)
    _render_sidebar(settings)

    st.markdown("# 🏥 STI Self-Check")
    st.info(DISCLAIMER)

    for msg in st.session_state.chat_messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    interview = st.session_state.interview

    user_input = st.chat_input("Describe your symptoms...")
    if user_input:
        reply = interview.handle_user_input(user_input)
        if reply is not None:
            st.session_state.chat_messages.append({"role": "user", "content": user_input})
            st.session_state.chat_messages.append({"role": "assistant", "content": reply})
        st.rerun()

    if interview.result is None and interview.stage != "initial":
        if st.button("View Diagnosis Results", type="primary", use_container_width=True):
            with st.spinner("🔬 Analyzing..."):
                try:
                    result = interview.finish()
                    st.session_state.chat_messages.append({
                        "role": "assistant",
                        "content": format_result_for_chat(result),
                    })
                except Exception as e:
                    logger.exception("Diagnosis failed: %s", e)
                    st.session_state.chat_messages.append({
                        "role": "assistant",
                        "content": f"❌ **Error during analysis:** {str(e)}\n\nPlease try again.",
                    })
            st.rerun()

    if not st.session_state.chat_messages:
        _new_interview()
        st.rerun()


if __name__ == "__main__":
    main()
