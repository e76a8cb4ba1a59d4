"""OpenAI Responses API client for product label extraction."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from health_scan.services.vision import VisionClient

_AMOUNT = {"type": "number", "minimum": 0.0}
_NUTRITION_FIELDS = (
    "calories",
    "total_fat",
    "saturated_fat",
    "cholesterol",
    "sodium",
    "total_carbohydrates",
    "sugar",
    "protein",
)

PRODUCT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "ingredients": {"type": "array", "items": {"type": "string"}},
        "nutrition_facts": {
            "anyOf": [
                {
                    "type": "object",
                    "properties": {
                        **{name: _AMOUNT for name in _NUTRITION_FIELDS},
                        "serving_size": {"type": "string"},
                    },
                    "required": [*_NUTRITION_FIELDS, "serving_size"],
                    "additionalProperties": False,
                },
                {"type": "null"},
            ]
        },
    },
    "required": ["name", "ingredients", "nutrition_facts"],
    "additionalProperties": False,
}

LABEL_PROMPT = (
    "Read the food product packaging in the image. "
    "Return the product name, the ingredient list in label order, "
    "and the nutrition facts per serving (sodium and cholesterol in mg, "
    "other amounts in grams), or null when no nutrition label is visible."
)


@dataclass
class OpenAIVisionClient(VisionClient):
    """Reads product labels with the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        reasoning_effort: str | None = None,
        store: bool = False,
    ) -> "OpenAIVisionClient":
        """Create a label reader with its own OpenAI client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def read_product_label(self, image_url: str) -> dict[str, object]:
        """Ask the model for the label as structured product data."""
        response = await self.client.responses.create(**self._label_request(image_url))
        if response.status == "incomplete":
            details = response.incomplete_details
            reason = details.reason if details else "unknown"
            raise RuntimeError(f"OpenAI stopped reading the label early: {reason}")
        if not response.output_text:
            raise RuntimeError("OpenAI returned an empty product extraction")
        return json.loads(response.output_text)

    def _label_request(self, image_url: str) -> dict[str, object]:
        request: dict[str, object] = {
            "model": self.model,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": LABEL_PROMPT},
                        # Ingredient lists are small print.
                        {
                            "type": "input_image",
                            "image_url": image_url,
                            "detail": "high",
                        },
                    ],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "product_extract",
                    "strict": True,
                    "schema": PRODUCT_SCHEMA,
                }
            },
            "store": self.store,
        }
        if self.reasoning_effort:
            request["reasoning"] = {"effort": self.reasoning_effort}
        return request

    async def close(self) -> None:
        """Close the underlying OpenAI HTTP client."""
        await self.client.close()
