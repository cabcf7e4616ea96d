from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, ReadTimeoutError

from docsummary.config.settings import Settings
from docsummary.ocr.base import BaseOcrClient
from docsummary.ocr.disabled_adapter import DisabledOcrClient
from docsummary.ocr.exceptions import OcrError
from docsummary.ocr.factory import OcrFactory
from docsummary.ocr.fallback import OcrFallbackAdapter
from docsummary.ocr.textract_adapter import TextractOcrClient


class TestTextractOcrClient:
    def test_returns_line_blocks_only(self) -> None:
        client = MagicMock()
        client.detect_document_text.return_value = {
            "Blocks": [
                {"BlockType": "PAGE"},
                {"BlockType": "LINE", "Text": "Invoice 2024"},
                {"BlockType": "WORD", "Text": "Invoice"},
                {"BlockType": "LINE", "Text": "Total due"},
                {"BlockType": "LINE"},
            ]
        }
        lines = TextractOcrClient(client=client).detect_text(b"bytes")
        assert lines == ["Invoice 2024", "Total due"]
        client.detect_document_text.assert_called_once_with(Document={"Bytes": b"bytes"})

    def test_no_blocks(self) -> None:
        client = MagicMock()
        client.detect_document_text.return_value = {}
        assert TextractOcrClient(client=client).detect_text(b"x") == []

    def test_client_error_raises_ocr_error(self) -> None:
        client = MagicMock()
        client.detect_document_text.side_effect = ClientError(
            {"Error": {"Code": "UnsupportedDocumentException", "Message": "bad"}},
            "DetectDocumentText",
        )
        with pytest.raises(OcrError, match="Textract request failed"):
            TextractOcrClient(client=client).detect_text(b"x")

    def test_transport_error_raises_ocr_error(self) -> None:
        client = MagicMock()
        client.detect_document_text.side_effect = ReadTimeoutError(endpoint_url="https://textract")
        with pytest.raises(OcrError):
            TextractOcrClient(client=client).detect_text(b"x")


class TestOcrFallbackAdapter:
    def test_joins_trimmed_lines(self) -> None:
        client = MagicMock(spec=BaseOcrClient)
        client.detect_text.return_value = ["  First line ", "", "   ", "Second line"]
        assert OcrFallbackAdapter(client).recognize(b"x") == "First line Second line"

    def test_failure_returns_empty_text(self) -> None:
        client = MagicMock(spec=BaseOcrClient)
        client.detect_text.side_effect = OcrError("throttled")
        assert OcrFallbackAdapter(client).recognize(b"x") == ""

    def test_disabled_client_recognizes_nothing(self) -> None:
        assert OcrFallbackAdapter(DisabledOcrClient()).recognize(b"x") == ""


class TestOcrFactory:
    def test_creates_disabled_adapter(self) -> None:
        adapter = OcrFactory.create(Settings(ocr_provider="disabled"))
        assert isinstance(adapter, OcrFallbackAdapter)
        assert isinstance(adapter._client, DisabledOcrClient)

    def test_creates_textract_adapter(self) -> None:
        with patch("docsummary.ocr.textract_adapter.boto3.client") as client_factory:
            adapter = OcrFactory.create(Settings(ocr_provider="textract", ocr_region="ap-south-1"))
        assert isinstance(adapter._client, TextractOcrClient)
        client_factory.assert_called_once_with("textract", region_name="ap-south-1")

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR provider 'tesseract'"):
            OcrFactory.create(Settings(ocr_provider="tesseract"))
