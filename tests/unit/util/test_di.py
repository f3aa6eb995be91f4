"""Unit tests for DI provider selection and container wiring."""

import pytest

from discuss.application.usecase.thread import GetThreadUseCase
from discuss.config import Settings, ThreadingSettings
from discuss.domain.service import BestAnswerService, ThreadService
from discuss.util.di import (
    ConfigProvider,
    ProdConfigProvider,
    ProdDomainProvider,
    get_provider,
)
from tests.di import MockConfigProvider, build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()
env_configured = create_env_fixture(unmock={"config"})


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdDomainProvider) is ProdDomainProvider

    def test_mockable_provider_selects_production(self):
        assert get_provider(ConfigProvider, use_mock=False) is ProdConfigProvider

    def test_mockable_provider_selects_mock(self):
        assert get_provider(ConfigProvider, use_mock=True) is MockConfigProvider


class TestContainer:
    """Tests for the test container."""

    def test_unknown_component_raises_error(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})

    def test_mock_settings_are_used(self, unit_env):
        settings = unit_env.get(Settings)

        assert settings.environment == "test"
        assert unit_env.get(ThreadingSettings).max_depth == 3

    def test_domain_services_are_shared(self, unit_env):
        """Domain services live for the whole app scope."""
        assert unit_env.get(ThreadService) is unit_env.get(ThreadService)
        assert isinstance(unit_env.get(BestAnswerService), BestAnswerService)

    def test_use_case_resolves(self, unit_env):
        use_case = unit_env.get(GetThreadUseCase)

        assert use_case.thread_service.settings.max_depth == 3

    def test_unmocked_config_reads_environment(self, monkeypatch, request):
        monkeypatch.setenv("THREADING__MAX_DEPTH", "7")

        env = request.getfixturevalue("env_configured")

        assert env.get(ThreadService).settings.max_depth == 7
