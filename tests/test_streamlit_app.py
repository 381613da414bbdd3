"""Tests for Streamlit app wiring."""
from types import SimpleNamespace

from src.application.conversation import REGION_NOT_VISIBLE, InterviewConversation
from src.application.use_cases import SelfAssessmentUseCase
from src.infrastructure.vision.random_source import RandomFeatureSource
from src.infrastructure.vision.static_source import StaticFeatureSource
from src.presentation.streamlit_app import CAMERA_ANALYZED, build_feature_source, run_camera_check


def _settings(source):
    return SimpleNamespace(
        feature_source=source,
        feature_seed=3,
        image_detection_rate=0.7,
        region_detection_rate=0.6,
    )


def test_static_feature_source_selected():
    assert isinstance(build_feature_source(_settings("static")), StaticFeatureSource)


def test_random_feature_source_selected():
    source = build_feature_source(_settings("random"))
    assert isinstance(source, RandomFeatureSource)
    assert source.region_rate == 0.6


def test_camera_check_reports_each_outcome_once():
    visible = InterviewConversation(SelfAssessmentUseCase(StaticFeatureSource()))
    visible.start()
    assert run_camera_check(visible) == CAMERA_ANALYZED
    assert run_camera_check(visible) is None

    hidden = InterviewConversation(SelfAssessmentUseCase(StaticFeatureSource(region_visible=False)))
    hidden.start()
    assert run_camera_check(hidden) == REGION_NOT_VISIBLE
    assert run_camera_check(hidden) is None
