from __future__ import annotations
from typing import Optional, Dict, Any, Union
from pathlib import Path
from dataclasses import dataclass
from enum import Enum
import yaml
import time
import logging

from .prompts import PromptManager, DEFAULT_PROMPTS_DIR
from .providers.base import ChatRequest, ModelResponse, ModelError, ModelTimeout
from .providers.openai_sdk import OpenAIProvider
from ..settings import Settings

logger = logging.getLogger(__name__)


class Provider(Enum):
    OPENAI = "openai"

@dataclass(frozen=True)
class TaskConfig:
    provider: str
    model: str
    params: Dict[str, Any]


class ModelManager:
    """Resolves a task to a model and provider and runs one completion.

    A fresh provider client is built for every call; nothing is cached across
    requests except the (read-only) prompt templates.
    """

    def __init__(self, config_path: Union[Path, str], settings: Optional[Settings] = None, prompts_dir: Optional[Path] = None):
        self.config_path = Path(config_path)
        self.settings = settings or Settings.from_env()
        self.config = self._load_config()
        self.prompts = PromptManager(prompts_dir or DEFAULT_PROMPTS_DIR)

    def _load_config(self) -> Dict:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config not found: {self.config_path}")
        with open(self.config_path) as f:
            config = yaml.safe_load(f) or {}

        if 'providers' not in config:
            raise ValueError("Config missing 'providers'")
        if 'tasks' not in config:
            raise ValueError("Config missing 'tasks'")

        for task_name, task_cfg in config['tasks'].items():
            if 'provider' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing provider")
            if 'model' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing model")
            if task_cfg['provider'] not in config['providers']:
                raise ValueError(f"Task '{task_name}' references unknown provider '{task_cfg['provider']}'")

        return config

    def task_config(self, task: str) -> TaskConfig:
        if task not in self.config["tasks"]:
            raise ValueError(f"Unknown task: {task}")
        task_cfg = self.config["tasks"][task]
        return TaskConfig(
            provider=task_cfg["provider"],
            model=self.settings.openai_model or task_cfg["model"],
            params=dict(task_cfg.get("params") or {}),
        )

    def _create_provider(self, provider_name: str):
        provider_cfg = self.config["providers"][provider_name]
        provider_type = provider_cfg["type"]
        settings = provider_cfg.get("settings") or {}

        if provider_type == Provider.OPENAI.value:
            return OpenAIProvider(api_key=self.settings.openai_api_key, **settings)
        raise ValueError(f"Unknown provider type: {provider_type}")

    def call(self, task: str, prompt_ref: str, variables: Dict[str, Any], schema: Optional[Dict[str, Any]] = None, schema_name: str = "response_schema", **params_override) -> ModelResponse:
        task_cfg = self.task_config(task)
        rendered = self.prompts.render(prompt_ref, variables)

        request = ChatRequest(
            model=task_cfg.model,
            messages=rendered,
            params={**task_cfg.params, **params_override},
            schema=schema,
            schema_name=schema_name,
        )

        provider = self._create_provider(task_cfg.provider)
        start_time = time.perf_counter()
        try:
            response = provider.chat(request)
        except (ModelTimeout, ModelError) as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(f"task '{task}' failed after {elapsed_ms:.0f}ms: {e}")
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"task '{task}' completed with {task_cfg.model} in {elapsed_ms:.0f}ms")
        return response
