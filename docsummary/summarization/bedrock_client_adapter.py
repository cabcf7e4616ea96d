import json
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError

from docsummary.summarization.client_base import BaseGenerationClient, split_timeout
from docsummary.summarization.exceptions import (
    SummarizationError,
    SummarizationNetworkError,
    SummarizationTimeoutError,
    SummarizationUnavailableError,
)
from docsummary.summarization.models import Prompt

_UNAVAILABLE_CODES = frozenset({"ResourceNotFoundException", "AccessDeniedException"})


class BedrockClientAdapter(BaseGenerationClient):
    """Completion-style generation client for Amazon Titan Text on Bedrock."""

    TOP_P = 0.9

    def __init__(
        self,
        *,
        region: str | None,
        timeout_seconds: float,
        client: Any | None = None,
    ) -> None:
        if client is None:
            connect_seconds, read_seconds = split_timeout(timeout_seconds)
            config = Config(
                connect_timeout=connect_seconds,
                read_timeout=read_seconds,
                retries={"total_max_attempts": 1, "mode": "standard"},
            )
            client = boto3.client("bedrock-runtime", region_name=region, config=config)
        self._client = client

    def complete(
        self,
        *,
        model: str,
        prompt: Prompt,
        max_tokens: int,
        temperature: float,
    ) -> str:
        body = {
            "inputText": prompt.as_text(),
            "textGenerationConfig": {
                "maxTokenCount": max_tokens,
                "temperature": temperature,
                "topP": self.TOP_P,
            },
        }
        try:
            response = self._client.invoke_model(
                modelId=model,
                body=json.dumps(body),
                contentType="application/json",
                accept="application/json",
            )
            payload = json.loads(response["body"].read())
        except (ReadTimeoutError, ConnectTimeoutError) as exc:
            raise SummarizationTimeoutError(f"Bedrock call timed out: {exc}") from exc
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _UNAVAILABLE_CODES:
                raise SummarizationUnavailableError(
                    f"Bedrock model unavailable or not permitted: {exc}"
                ) from exc
            raise SummarizationNetworkError(f"Bedrock API error: {exc}") from exc
        except BotoCoreError as exc:
            raise SummarizationNetworkError(f"Bedrock network error: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise SummarizationError(f"Bedrock returned invalid JSON: {exc}") from exc

        results = payload.get("results") or []
        text = results[0].get("outputText") if results else None
        if not text:
            raise SummarizationError("AI returned empty response")
        return text
