"""Claude Vision service for wine label and receipt extraction."""

import base64
import json
import logging
import time
from typing import Any

import anthropic
from pydantic import ValidationError

from pourfolio.config import settings
from pourfolio.schemas.scan import (
    ExtractedWine,
    LabelScanPayload,
    LabelScanResult,
    LabelWine,
    ReceiptScanPayload,
    ReceiptScanResult,
)

logger = logging.getLogger(__name__)

LABEL_PARSE_ERROR = "Failed to parse label data"
RECEIPT_PARSE_ERROR = "Failed to parse receipt data"

LABEL_PROMPT = """Analyze this wine bottle label and extract all wine information. Return ONLY a valid JSON object (no markdown, no code blocks) with this exact structure:

{
  "name": "full wine name (e.g., 'Cabernet Sauvignon' or 'Estate Reserve Cabernet Sauvignon')",
  "producer": "winery/producer name (e.g., 'Harvester', 'Château Margaux')",
  "vintage": 2020 (4-digit year as number, or null if not visible),
  "wine_type": "red" | "white" | "rose" | "sparkling" | "dessert" | "fortified" | null,
  "region": "wine region (e.g., 'Paso Robles', 'Napa Valley', 'Bordeaux')",
  "sub_region": "sub-region or AVA if visible (e.g., 'Estrella District', 'Rutherford')",
  "country": "country of origin (e.g., 'USA', 'France', 'Italy')",
  "appellation": "appellation or designation if visible",
  "grape_varieties": ["array", "of", "grape", "varieties"] or null,
  "alcohol_percentage": 14.5 (as decimal number) or null,
  "confidence": 85 (0-100 confidence score for overall extraction quality),
  "raw_text": "transcription of all visible text on the label"
}

Important guidelines:
- Extract information exactly as shown on the label
- The "name" should be the wine's name (varietal, blend name, or proprietary name), NOT the producer
- The "producer" should be the winery or producer name
- For wine_type, infer from the varietal if not explicitly stated:
  - Cabernet Sauvignon, Merlot, Pinot Noir, Zinfandel, Syrah = red
  - Chardonnay, Sauvignon Blanc, Riesling, Pinot Grigio = white
  - Look for "Rosé" or pink color indicators = rose
  - Look for "Brut", "Champagne", "Prosecco", "Cava" = sparkling
- For regions like "Paso Robles" or "Napa Valley", the country is "USA"
- Look for alcohol percentage usually shown as "XX% ALC/VOL" or "XX% ABV"
- Confidence should reflect how clearly you can read the label (lower if blurry, partial, or obscured)
- Return ONLY the JSON object, no explanation or markdown formatting"""

RECEIPT_PROMPT = """Analyze this wine purchase receipt and extract all wine-related information. Return ONLY a valid JSON object (no markdown, no code blocks) with this exact structure:

{
  "vendor": "store/winery name if visible",
  "vendor_type": "winery" | "retailer" | "auction" | "private" | "other" | null,
  "purchase_date": "YYYY-MM-DD format if visible, or null",
  "subtotal_cents": number in cents or null,
  "tax_cents": number in cents or null,
  "total_cents": number in cents or null,
  "wines": [
    {
      "name": "full wine name including vintage year if in name",
      "producer": "winery/producer name if identifiable separately from wine name",
      "vintage": 2020 (4-digit year as number, or null if not visible),
      "wine_type": "red" | "white" | "rose" | "sparkling" | "dessert" | "fortified" | null,
      "quantity": 1 (number of bottles),
      "price_cents": 2500 (total line price in cents),
      "unit_price_cents": 2500 (price per bottle in cents),
      "confidence": 85 (0-100 confidence score for this extraction),
      "raw_text": "exact text from receipt for this line item",
      "region": "wine region if identifiable (e.g., Napa Valley, Bordeaux)",
      "country": "country if identifiable"
    }
  ],
  "raw_text": "full text transcription of the receipt"
}

Important guidelines:
- Extract ALL wine items, even partial information is valuable
- If a wine name includes the vintage year (e.g., "2019 Cabernet"), extract it to the vintage field
- Convert all prices to cents (e.g., $25.00 = 2500)
- For quantity, look for indicators like "2x", "qty: 2", or multiple of the same item
- Confidence should reflect how certain you are about the extraction (lower if text is blurry or ambiguous)
- If you can identify the wine type from the name (Cabernet = red, Chardonnay = white, etc.), include it
- Look for common wine retailers: Total Wine, BevMo, Wine.com, winery names, etc.
- Return ONLY the JSON object, no explanation or markdown formatting"""


class VisionServiceError(Exception):
    """Raised when the model reply carries no usable text."""


def strip_code_fences(text: str) -> str:
    """Remove optional markdown code fences around a JSON reply.

    Examples:
        >>> strip_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):]
    if cleaned.startswith("```"):
        cleaned = cleaned[len("```"):]
    if cleaned.endswith("```"):
        cleaned = cleaned[: -len("```")]
    return cleaned.strip()


def _load_json(text: str) -> Any:
    return json.loads(strip_code_fences(text))


def parse_label_response(text: str) -> LabelScanResult:
    """Turn the model's label reply into a LabelScanResult.

    Unparseable replies give ``success=False`` with ``raw_text`` set to the
    untouched reply.
    """
    try:
        payload = LabelScanPayload.model_validate(_load_json(text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error("Failed to parse label response: %s", e)
        logger.debug("Response was: %s", text)
        return LabelScanResult(success=False, error=LABEL_PARSE_ERROR, raw_text=text)

    wine = LabelWine.model_validate(payload.model_dump(exclude={"raw_text"}))
    return LabelScanResult(success=True, wine=wine, raw_text=payload.raw_text or "")


def parse_receipt_response(text: str, now_ms: int | None = None) -> ReceiptScanResult:
    """Turn the model's receipt reply into a ReceiptScanResult.

    Each wine gets an id ``extracted-<epoch ms>-<index>``.
    """
    try:
        payload = ReceiptScanPayload.model_validate(_load_json(text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error("Failed to parse receipt response: %s", e)
        logger.debug("Response was: %s", text)
        return ReceiptScanResult(success=False, error=RECEIPT_PARSE_ERROR, raw_text=text)

    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    wines = [
        ExtractedWine(id=f"extracted-{stamp}-{index}", **line.model_dump())
        for index, line in enumerate(payload.wines)
    ]
    return ReceiptScanResult(
        success=True,
        vendor=payload.vendor,
        vendor_type=payload.vendor_type,
        purchase_date=payload.purchase_date,
        subtotal_cents=payload.subtotal_cents,
        tax_cents=payload.tax_cents,
        total_cents=payload.total_cents,
        wines=wines,
        raw_text=payload.raw_text or "",
    )


class ClaudeVisionService:
    """Service for reading wine labels and receipts with Claude's vision capabilities."""

    def __init__(
        self,
        api_key: str | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = client

    @property
    def api_key(self) -> str | None:
        return self._api_key or settings.anthropic_api_key

    def is_available(self) -> bool:
        """Check if an Anthropic API key (or injected client) is configured."""
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> anthropic.AsyncAnthropic:
        """Lazily create and cache the async Anthropic client."""
        if self._client is None:
            if not self.api_key:
                raise VisionServiceError("No Anthropic API key configured")
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def _complete(
        self,
        image_data: bytes,
        media_type: str,
        prompt: str,
        max_tokens: int,
    ) -> str:
        """Send one image plus prompt and return the text of the reply."""
        image_base64 = base64.standard_b64encode(image_data).decode("utf-8")

        message = await self._get_client().messages.create(
            model=settings.vision_model,
            max_tokens=max_tokens,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": image_base64,
                            },
                        },
                        {
                            "type": "text",
                            "text": prompt,
                        },
                    ],
                }
            ],
        )

        for block in message.content:
            if getattr(block, "type", None) == "text":
                return block.text
        raise VisionServiceError("No text response from Claude")

    async def analyze_label(self, image_data: bytes, media_type: str) -> LabelScanResult:
        """Extract wine details from a label image.

        Errors from the API propagate; only the reply parsing is non-fatal.
        """
        text = await self._complete(
            image_data, media_type, LABEL_PROMPT, settings.label_max_tokens
        )
        return parse_label_response(text)

    async def analyze_receipt(self, image_data: bytes, media_type: str) -> ReceiptScanResult:
        """Extract vendor, totals and wine lines from a receipt image."""
        text = await self._complete(
            image_data, media_type, RECEIPT_PROMPT, settings.receipt_max_tokens
        )
        return parse_receipt_response(text)
