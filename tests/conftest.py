import pytest

from batterywatch.models import ClassifierConfig, ClassifierState, HealthState
from batterywatch.notify import MockNotifier


@pytest.fixture
def classifier_state() -> ClassifierState:
    return ClassifierState()


@pytest.fixture
def default_config() -> ClassifierConfig:
    return ClassifierConfig(warning_level=40, critical_level=20)


@pytest.fixture
def health_state() -> HealthState:
    return HealthState()


@pytest.fixture
def notifier() -> MockNotifier:
    return MockNotifier()
