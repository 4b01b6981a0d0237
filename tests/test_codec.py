import json
from datetime import datetime, timezone
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from plugin_http import DeserializationError, JsonCodec


class Payment(BaseModel):
    payment_id: str = Field(alias="paymentId")
    amount: float
    created_date: datetime = Field(alias="createdDate")
    note: Optional[str] = None


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


@pytest.fixture
def payment() -> Payment:
    return Payment(
        paymentId="p-1",
        amount=12.5,
        createdDate=datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc),
    )


class TestJsonCodec:
    def test_null_fields_are_omitted(self, codec: JsonCodec, payment: Payment):
        wire = json.loads(codec.encode(payment))
        assert "note" not in wire
        assert wire["paymentId"] == "p-1"

    def test_dates_are_iso_8601_text(self, codec: JsonCodec, payment: Payment):
        wire = json.loads(codec.encode(payment))
        assert isinstance(wire["createdDate"], str)
        assert datetime.fromisoformat(wire["createdDate"].replace("Z", "+00:00")) == (
            payment.created_date
        )

    def test_round_trip_restores_missing_fields(
        self, codec: JsonCodec, payment: Payment
    ):
        decoded = codec.decode(codec.encode(payment), Payment)
        assert decoded == payment
        assert decoded.note is None

    def test_unescaped_control_characters_are_tolerated(self, codec: JsonCodec):
        raw = '{"paymentId": "p-2", "amount": 1, "createdDate": "2024-03-01T00:00:00Z", "note": "line one\nline two\tend"}'
        decoded = codec.decode(raw, Payment)
        assert decoded.note == "line one\nline two\tend"

    def test_decode_bytes(self, codec: JsonCodec):
        assert codec.decode(b'{"a": [1, 2]}', dict) == {"a": [1, 2]}

    def test_decode_generic_type(self, codec: JsonCodec):
        assert codec.decode("[1, 2, 3]", List[int]) == [1, 2, 3]

    def test_decode_without_type_returns_parsed_json(self, codec: JsonCodec):
        assert codec.decode('{"ok": true}', None) == {"ok": True}

    def test_invalid_json(self, codec: JsonCodec):
        with pytest.raises(DeserializationError) as exc_info:
            codec.decode("<html>oops</html>", Payment)
        assert exc_info.value.result_type is Payment
        assert "Payment" in exc_info.value.message

    def test_json_not_matching_type(self, codec: JsonCodec):
        with pytest.raises(DeserializationError):
            codec.decode('{"paymentId": "p-3"}', Payment)

    def test_invalid_utf8(self, codec: JsonCodec):
        with pytest.raises(DeserializationError):
            codec.decode(b"\xff\xfe{}", dict)

    def test_keep_nulls_when_configured(self, payment: Payment):
        wire = json.loads(JsonCodec(exclude_none=False).encode(payment))
        assert wire["note"] is None
