import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from officehours.models.manager import ModelManager, TaskConfig
from officehours.models.providers.base import ChatRequest, ModelResponse, ModelError
from officehours.settings import Settings, DEFAULT_CONFIG_PATH


class TestModelManager:
    """Test suite for ModelManager functionality"""

    @pytest.fixture
    def valid_config(self, tmp_path):
        """Create a valid config file for testing"""
        config_content = """
providers:
  openai:
    type: openai
    settings:
      timeout: 30.0

tasks:
  triage:
    provider: openai
    model: "gpt-4o-mini"
    params:
      temperature: 0.1

  generate_plan:
    provider: openai
    model: "gpt-4o"
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)
        return config_file

    @pytest.fixture
    def prompts_dir(self, tmp_path):
        """Create a mock prompts directory"""
        prompt = tmp_path / "prompts" / "triage" / "respond" / "v1"
        prompt.mkdir(parents=True)
        (prompt / "system.j2").write_text("You are a helpful assistant.")
        (prompt / "user.j2").write_text("Triage this: {{ text }}")
        return tmp_path / "prompts"

    @pytest.fixture
    def settings(self):
        return Settings(openai_api_key="sk-test")

    @pytest.fixture
    def manager(self, valid_config, settings, prompts_dir):
        return ModelManager(valid_config, settings=settings, prompts_dir=prompts_dir)

    def test_initialization_success(self, manager, valid_config):
        assert manager.config_path == Path(valid_config)
        assert manager.prompts is not None
        assert set(manager.config["tasks"]) == {"triage", "generate_plan"}

    def test_bundled_config_loads(self, settings):
        """
        Test: Shipped config.yaml is valid
        How: Load the packaged config with the packaged prompts
        Ensures: Both endpoint tasks are configured against the openai provider
        """
        manager = ModelManager(DEFAULT_CONFIG_PATH, settings=settings)
        assert manager.task_config("triage").provider == "openai"
        assert manager.task_config("generate_plan").provider == "openai"

    def test_missing_config_file(self, tmp_path, settings):
        with pytest.raises(FileNotFoundError, match="Config not found"):
            ModelManager(tmp_path / "missing.yaml", settings=settings)

    @pytest.mark.parametrize("content,message", [
        ("tasks: {}\n", "Config missing 'providers'"),
        ("providers: {}\n", "Config missing 'tasks'"),
        ("providers: {openai: {type: openai}}\ntasks:\n  t: {model: m}\n", "Task 't' missing provider"),
        ("providers: {openai: {type: openai}}\ntasks:\n  t: {provider: openai}\n", "Task 't' missing model"),
        ("providers: {openai: {type: openai}}\ntasks:\n  t: {provider: other, model: m}\n", "unknown provider 'other'"),
    ])
    def test_invalid_config(self, tmp_path, settings, content, message):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)
        with pytest.raises(ValueError, match=message):
            ModelManager(config_file, settings=settings)

    def test_task_config(self, manager):
        assert manager.task_config("triage") == TaskConfig(provider="openai", model="gpt-4o-mini", params={"temperature": 0.1})
        assert manager.task_config("generate_plan").params == {}

    def test_model_override_from_settings(self, valid_config, prompts_dir):
        manager = ModelManager(valid_config, settings=Settings(openai_api_key="k", openai_model="gpt-4.1"), prompts_dir=prompts_dir)
        assert manager.task_config("triage").model == "gpt-4.1"
        assert manager.task_config("generate_plan").model == "gpt-4.1"

    def test_unknown_task(self, manager):
        with pytest.raises(ValueError, match="Unknown task"):
            manager.call("summarize", "triage/respond@v1", {"text": "x"})

    def test_call_builds_chat_request(self, manager):
        """
        Test: Full call path with a mocked provider
        How: Patch OpenAIProvider and inspect the ChatRequest it receives
        Ensures: Prompt rendering, task params and schema all reach the provider
        """
        schema = {"type": "object"}
        with patch('officehours.models.manager.OpenAIProvider') as provider_cls:
            provider_cls.return_value.chat.return_value = ModelResponse(content="{}", raw=None, meta={})
            response = manager.call("triage", "triage/respond@v1", {"text": "Login broken"}, schema=schema, schema_name="triage_response")

        assert response.content == "{}"
        provider_cls.assert_called_once_with(api_key="sk-test", timeout=30.0)

        request = provider_cls.return_value.chat.call_args.args[0]
        assert isinstance(request, ChatRequest)
        assert request.model == "gpt-4o-mini"
        assert request.params == {"temperature": 0.1}
        assert request.schema == schema
        assert request.schema_name == "triage_response"
        assert request.messages[1] == {"role": "user", "content": "Triage this: Login broken"}

    def test_params_override(self, manager):
        with patch('officehours.models.manager.OpenAIProvider') as provider_cls:
            provider_cls.return_value.chat.return_value = ModelResponse(content="{}", raw=None, meta={})
            manager.call("triage", "triage/respond@v1", {"text": "x"}, temperature=0.7, max_output_tokens=500)

        request = provider_cls.return_value.chat.call_args.args[0]
        assert request.params == {"temperature": 0.7, "max_output_tokens": 500}

    def test_fresh_provider_per_call(self, manager):
        with patch('officehours.models.manager.OpenAIProvider') as provider_cls:
            provider_cls.return_value.chat.return_value = ModelResponse(content="{}", raw=None, meta={})
            manager.call("triage", "triage/respond@v1", {"text": "a"})
            manager.call("triage", "triage/respond@v1", {"text": "b"})

        assert provider_cls.call_count == 2

    def test_provider_error_propagates(self, manager):
        with patch('officehours.models.manager.OpenAIProvider') as provider_cls:
            provider_cls.return_value.chat.side_effect = ModelError("rate limited", status_code=429)
            with pytest.raises(ModelError) as exc_info:
                manager.call("triage", "triage/respond@v1", {"text": "x"})

        assert exc_info.value.status_code == 429
        assert provider_cls.return_value.chat.call_count == 1


class TestSettings:
    def test_from_env(self, tmp_path):
        settings = Settings.from_env({
            "OPENAI_API_KEY": "sk-abc",
            "OPENAI_MODEL": "gpt-4.1-mini",
            "DEBUG_ERRORS": "TRUE",
            "LOG_LEVEL": "debug",
            "OFFICEHOURS_CONFIG": str(tmp_path / "c.yaml"),
        })
        assert settings.openai_api_key == "sk-abc"
        assert settings.openai_model == "gpt-4.1-mini"
        assert settings.debug_errors is True
        assert settings.log_level == "DEBUG"
        assert settings.config_path == tmp_path / "c.yaml"

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.openai_api_key is None
        assert settings.has_credentials is False
        assert settings.openai_model is None
        assert settings.debug_errors is False
        assert settings.config_path == DEFAULT_CONFIG_PATH

    @pytest.mark.parametrize("value", ["1", "yes", "false", ""])
    def test_debug_flag_requires_true(self, value):
        assert Settings.from_env({"DEBUG_ERRORS": value}).debug_errors is False

    def test_empty_api_key_is_missing(self):
        assert Settings.from_env({"OPENAI_API_KEY": ""}).has_credentials is False
