"""Gemini Transport - Implements generation calls via Google Gemini API."""

import logging
from typing import Any, Dict, Iterator, Optional

import google.genai as genai
from google.genai import types

from authors_linguist.services.transport.generation_transport import GenerationTransport


logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-3-flash-preview"

_SCHEMA_TYPES = {
    "object": types.Type.OBJECT,
    "string": types.Type.STRING,
    "array": types.Type.ARRAY,
    "number": types.Type.NUMBER,
    "integer": types.Type.INTEGER,
    "boolean": types.Type.BOOLEAN,
}


def to_gemini_schema(schema: Dict[str, Any]) -> types.Schema:
    """Convert a JSON-schema style dict into a google.genai Schema."""
    properties = schema.get("properties")
    items = schema.get("items")
    return types.Schema(
        type=_SCHEMA_TYPES[schema["type"]],
        description=schema.get("description"),
        properties={name: to_gemini_schema(prop) for name, prop in properties.items()} if properties else None,
        items=to_gemini_schema(items) if items else None,
        required=list(schema["required"]) if "required" in schema else None,
    )


class GeminiTransport(GenerationTransport):
    """
    Generation transport backed by the google.genai package.

    One client is created per transport and lives for the process lifetime.
    No retries and no timeout policy: failures surface straight from the SDK.
    """

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL, client: Optional[genai.Client] = None):
        """
        Args:
            api_key: Gemini API key for authentication.
            model_name: Model identifier used for every request.
            client: Pre-built SDK client (mainly for tests).
        """
        if client is None:
            if not api_key:
                raise ValueError("A Gemini API key is required")
            client = genai.Client(api_key=api_key)
        self._client = client
        self.model_name = model_name

    def stream_generate(self, prompt: str, system_instruction: str) -> Iterator[str]:
        logger.debug("Streaming request: model=%s prompt_chars=%d", self.model_name, len(prompt))
        response = self._client.models.generate_content_stream(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
            ),
        )
        try:
            for chunk in response:
                yield chunk.text or ""
        finally:
            close = getattr(response, "close", None)
            if close is not None:
                close()

    def generate_structured(
        self, prompt: str, system_instruction: str, schema: Dict[str, Any]
    ) -> Optional[str]:
        logger.debug("Structured request: model=%s prompt_chars=%d", self.model_name, len(prompt))
        response = self._client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type="application/json",
                response_schema=to_gemini_schema(schema),
            ),
        )
        return response.text
