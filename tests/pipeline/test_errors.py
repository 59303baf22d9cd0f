import pytest
from unittest.mock import Mock

import httpx
from openai import APIStatusError

from officehours.models.providers.base import ModelError, ModelTimeout
from officehours.pipeline.plan.errors import (
    classify_provider_error, provider_failure, PipelineError, ProviderFailure, MODEL_OUTPUT_LIMIT
)


class TestClassifyProviderError:
    @pytest.mark.parametrize("status,expected", [
        (401, (502, "LLM authentication failed.")),
        (403, (502, "LLM authentication failed.")),
        (429, (429, "Rate limited by LLM provider. Try again shortly.")),
        (500, (502, "LLM provider error. Try again shortly.")),
        (503, (502, "LLM provider error. Try again shortly.")),
        (400, (502, "LLM request failed.")),
        (404, (502, "LLM request failed.")),
        (None, (502, "LLM request failed.")),
    ])
    def test_status_mapping(self, status, expected):
        assert classify_provider_error(ModelError("boom", status_code=status)) == expected

    def test_timeout_without_status(self):
        assert classify_provider_error(ModelTimeout("slow")) == (502, "LLM request failed.")

    def test_plain_exception(self):
        assert classify_provider_error(RuntimeError("network down")) == (502, "LLM request failed.")

    def test_non_integer_status_ignored(self):
        exc = Mock(status_code="429")
        assert classify_provider_error(exc) == (502, "LLM request failed.")

    def test_openai_status_error_classified_directly(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/responses")
        response = httpx.Response(429, request=request)
        exc = APIStatusError("rate limited", response=response, body=None)

        assert classify_provider_error(exc)[0] == 429


class TestProviderFailure:
    def test_carries_status_and_details(self):
        failure = provider_failure(ModelError("OpenAI API error: quota", status_code=429))

        assert isinstance(failure, ProviderFailure)
        assert failure.status_code == 429
        assert failure.message == "Rate limited by LLM provider. Try again shortly."
        assert failure.details == "OpenAI API error: quota"
        assert failure.model_output is None


class TestPipelineError:
    def test_class_status_used_by_default(self):
        assert ProviderFailure("x").status_code == 502

    def test_status_override(self):
        assert ProviderFailure("x", status_code=429).status_code == 429

    def test_model_output_truncated(self):
        error = PipelineError("x", model_output="y" * (MODEL_OUTPUT_LIMIT * 2))
        assert len(error.model_output) == MODEL_OUTPUT_LIMIT
