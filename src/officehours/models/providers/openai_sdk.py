from __future__ import annotations
from typing import Dict, Any, Optional
import time
import logging

from openai import OpenAI
from openai import APIStatusError, APITimeoutError, APIConnectionError

from .base import ModelProvider, ChatRequest, ModelResponse, ModelError, ModelTimeout

logger = logging.getLogger(__name__)


class OpenAIProvider(ModelProvider):
    """OpenAI Responses API provider.

    Failures are translated into ModelError/ModelTimeout and raised once;
    there is no retry loop here.
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None, default_headers: Optional[Dict[str, str]] = None, timeout: float = 60.0, max_retries: int = 0, **kwargs):
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=default_headers or {},
            timeout=timeout,
            max_retries=max_retries,
            **kwargs
        )
        self.base_url = base_url
        self.timeout = timeout

    def _build_params(self, req: ChatRequest) -> Dict[str, Any]:
        params = {
            "model": req.model,
            "input": req.messages,
            **(req.params or {})
        }
        if req.schema is not None:
            params["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": req.schema_name,
                    "schema": req.schema,
                    "strict": True
                }
            }
        return params

    def chat(self, req: ChatRequest) -> ModelResponse:
        t0 = time.perf_counter()
        try:
            response = self.client.responses.create(**self._build_params(req))
        except APITimeoutError as e:
            raise ModelTimeout(f"OpenAI timeout: {e}") from e
        except APIStatusError as e:
            raise ModelError(f"OpenAI API error: {e}", status_code=e.status_code) from e
        except APIConnectionError as e:
            raise ModelError(f"OpenAI connection error: {e}") from e
        except Exception as e:
            raise ModelError(f"OpenAI provider error: {e}") from e

        dt = time.perf_counter() - t0

        content = getattr(response, "output_text", None)
        if not isinstance(content, str):
            content = None

        meta = {
            "provider": "openai",
            "model": getattr(response, "model", req.model),
            "latency": dt,
            "base_url": self.base_url or "https://api.openai.com/v1",
        }
        if getattr(response, "id", None):
            meta["id"] = response.id
        if getattr(response, "usage", None) is not None:
            try:
                meta["usage"] = response.usage.model_dump()
            except AttributeError:
                meta["usage"] = {
                    "input_tokens": getattr(response.usage, "input_tokens", None),
                    "output_tokens": getattr(response.usage, "output_tokens", None),
                    "total_tokens": getattr(response.usage, "total_tokens", None)
                }

        logger.debug(f"openai response {meta.get('id')} in {dt:.2f}s")
        return ModelResponse(content=content, raw=response, meta=meta)
