from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Optional, List

#unified model errors
class ModelError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code #upstream HTTP status when the provider returned one

class ModelTimeout(ModelError): ...

@dataclass(frozen=True)
class ChatRequest:
    model: str
    messages: List[Dict[str, Any]]
    params: Dict[str, Any] | None = None
    schema: Optional[Dict[str, Any]] = None #json schema for strict structured output
    schema_name: str = "response_schema"

@dataclass(frozen=True)
class ModelResponse:
    content: Optional[str] #None when the provider produced no text
    raw: Any #provider-native response obj/dict
    meta: Dict[str, Any] #timings, token counts, model, id, etc.

class ModelProvider(ABC):
    @abstractmethod
    def chat(self, req: ChatRequest) -> ModelResponse:
        raise NotImplementedError
