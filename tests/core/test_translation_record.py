"""Unit tests for TranslationRecord parsing, serialisation and presentation."""

import pytest

from pocket_translator.core import PendingRecord, RecordType, TranslationRecord, newest_first


def make_record(**overrides):
    fields = dict(
        id="rec-1",
        type=RecordType.TEXT,
        original="Hello",
        translated="안녕하세요",
        source_lang="English",
        target_lang="한국어",
        timestamp=1_700_000_000_000,
    )
    fields.update(overrides)
    return TranslationRecord(**fields)


class TestRecordConstruction:

    def test_from_pending_assigns_id_and_timestamp(self):
        pending = PendingRecord(
            type=RecordType.CAMERA,
            original="data:image/jpeg;base64,AAAA",
            translated="Menu",
            source_lang="日本語",
            target_lang="English",
        )
        record = TranslationRecord.from_pending(pending, record_id="abc", timestamp=42)

        assert record.id == "abc"
        assert record.timestamp == 42
        assert record.type is RecordType.CAMERA
        assert record.original == pending.original

    def test_records_are_immutable(self):
        record = make_record()
        with pytest.raises(AttributeError):
            record.translated = "changed"


class TestRecordWireFormat:

    def test_to_dict_uses_camel_case_keys(self):
        data = make_record().to_dict()
        assert data == {
            "id": "rec-1",
            "type": "text",
            "original": "Hello",
            "translated": "안녕하세요",
            "sourceLang": "English",
            "targetLang": "한국어",
            "timestamp": 1_700_000_000_000,
        }

    def test_from_dict_reads_to_dict_output(self):
        record = make_record(type=RecordType.IMAGE)
        assert TranslationRecord.from_dict(record.to_dict()) == record

    def test_from_dict_coerces_spreadsheet_values(self):
        record = TranslationRecord.from_dict({
            "id": 17,
            "type": "Camera",
            "original": "data:image/jpeg;base64,AAAA",
            "translated": None,
            "sourceLang": "English",
            "targetLang": "Deutsch",
            "timestamp": "1700000000000.0",
        })
        assert record.id == "17"
        assert record.type is RecordType.CAMERA
        assert record.translated == ""
        assert record.timestamp == 1_700_000_000_000

    @pytest.mark.parametrize("missing", ["id", "type", "timestamp"])
    def test_from_dict_rejects_missing_required_field(self, missing):
        data = make_record().to_dict()
        del data[missing]
        with pytest.raises(ValueError, match=missing):
            TranslationRecord.from_dict(data)

    def test_from_dict_rejects_unknown_type(self):
        data = make_record().to_dict()
        data["type"] = "video"
        with pytest.raises(ValueError, match="Unknown record type"):
            TranslationRecord.from_dict(data)

    @pytest.mark.parametrize("timestamp", ["yesterday", "Infinity", 1e400, "NaN", [100]])
    def test_from_dict_rejects_unusable_timestamp(self, timestamp):
        data = make_record().to_dict()
        data["timestamp"] = timestamp
        with pytest.raises(ValueError, match="Invalid timestamp"):
            TranslationRecord.from_dict(data)

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ValueError):
            TranslationRecord.from_dict(["not", "a", "record"])


class TestRecordPresentation:

    def test_text_preview_is_original(self):
        assert make_record(original="Hello\nworld").preview == "Hello world"

    def test_long_text_preview_is_truncated(self):
        preview = make_record(original="a" * 200).preview
        assert len(preview) == 60
        assert preview.endswith("…")

    @pytest.mark.parametrize("record_type", [RecordType.IMAGE, RecordType.CAMERA])
    def test_image_preview_is_generic_label(self, record_type):
        record = make_record(type=record_type, original="data:image/png;base64,AAAA")
        assert record.is_image
        assert record.preview == "Image Translation"

    def test_language_pair_falls_back_for_missing_source(self):
        assert make_record(source_lang="").language_pair == "? → 한국어"
        assert make_record().language_pair == "English → 한국어"


def test_newest_first_sorts_by_timestamp_descending():
    records = [make_record(id=str(ts), timestamp=ts) for ts in (100, 300, 200)]
    assert [r.timestamp for r in newest_first(records)] == [300, 200, 100]
