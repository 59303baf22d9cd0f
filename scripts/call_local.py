#!/usr/bin/env python3
"""
Run one triage request in-process, without starting the server.

Usage: python scripts/call_local.py [message ...]
"""

import json
import sys
from dotenv import load_dotenv

from officehours.settings import Settings
from officehours.models.manager import ModelManager
from officehours.pipeline.plan.types import RequestEnvelope
from officehours.pipeline.plan.pipeline import PlanPipeline
from officehours.pipeline.plan.variants import TRIAGE
from officehours.pipeline.plan.errors import PipelineError
from officehours.api.models.common import ErrorResponse
from officehours.utils.log import setup_logging

DEFAULT_MESSAGE = (
    "Our team triages hundreds of Jira tickets manually each week "
    "and it's hard to prioritize and route them consistently."
)


def main(argv) -> int:
    load_dotenv()
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    user_message = " ".join(argv) or DEFAULT_MESSAGE
    envelope = RequestEnvelope(method="POST", body=json.dumps({TRIAGE.input_field: user_message}))
    pipeline = PlanPipeline(ModelManager(settings.config_path, settings=settings), settings, TRIAGE)

    try:
        status, body = 200, pipeline.process(envelope)
    except PipelineError as e:
        error = ErrorResponse(
            error=e.message,
            requestId=envelope.request_id,
            details=e.details if settings.debug_errors else None,
            model_output=e.model_output if settings.debug_errors else None,
        )
        status, body = e.status_code, error.to_body()

    print("Status:", status)
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
