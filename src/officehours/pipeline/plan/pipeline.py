import logging
from typing import Any, Dict

from ...models.manager import ModelManager
from ...models.providers.base import ModelError
from ...settings import Settings
from .types import PlanVariant, RequestEnvelope
from .schema import result_rules, build_response_schema
from .normalizer import normalize_request
from .validator import validate_model_output
from .errors import MissingCredentials, EmptyModelOutput, provider_failure

logger = logging.getLogger(__name__)


class PlanPipeline:
    def __init__(self, manager: ModelManager, settings: Settings, variant: PlanVariant):
        self.model_manager = manager
        self.settings = settings
        self.variant = variant
        self.rules = result_rules(variant.next_steps_pattern)
        self.response_schema = build_response_schema(self.rules)

    def process(self, envelope: RequestEnvelope) -> Dict[str, Any]:
        """
        Run a POST envelope through normalize -> prompt -> completion -> validate.

        Returns the validated result object exactly as the model produced it.
        Raises a PipelineError subclass on any failure.
        """
        normalized = normalize_request(envelope, self.variant.input_field)

        if not self.settings.has_credentials:
            raise MissingCredentials("Missing OPENAI_API_KEY environment variable.")

        logger.info(f"[{envelope.request_id}] {self.variant.name}: calling model ({len(normalized.text)} chars of input)")
        try:
            response = self.model_manager.call(
                task=self.variant.task,
                prompt_ref=self.variant.prompt_ref,
                variables={"text": normalized.text, "fields": self.rules},
                schema=self.response_schema,
                schema_name=self.variant.schema_name,
            )
        except ModelError as e:
            logger.warning(f"[{envelope.request_id}] {self.variant.name}: provider call failed: {e}")
            raise provider_failure(e) from e

        text = response.content
        if not text or not isinstance(text, str):
            raise EmptyModelOutput("No text output received from model.")

        result = validate_model_output(text, self.rules)
        logger.info(f"[{envelope.request_id}] {self.variant.name}: result validated")
        return result
