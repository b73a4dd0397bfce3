"""Tests for request body parsing and response envelopes."""
from datetime import datetime
import pytest
from app.exceptions import InvalidInputError
from app.service.city_service import parse_city, parse_new_translation, parse_translation_patch, parse_id, success


class TestParseCity:

    def test_unknown_keys_are_dropped(self):
        assert parse_city({"hex": "ab12", "id": 9, "updated_at": "2020-01-01"}) == {"hex": "ab12"}

    def test_absent_keys_stay_absent(self):
        assert parse_city({}) == {}

    def test_explicit_null_is_kept(self):
        assert parse_city({"deleted_at": None}) == {"deleted_at": None}

    def test_timestamps_are_parsed(self):
        assert parse_city({"deleted_at": "2024-03-01T10:30:00"}) == {
            "deleted_at": datetime(2024, 3, 1, 10, 30)
        }

    def test_bad_timestamp(self):
        with pytest.raises(InvalidInputError, match="Invalid value for 'deleted_at'"):
            parse_city({"deleted_at": "yesterday"})

    @pytest.mark.parametrize("payload", [None, [], "hex", 5])
    def test_body_must_be_an_object(self, payload):
        with pytest.raises(InvalidInputError, match="Invalid request data"):
            parse_city(payload)

    def test_hex_must_be_a_string(self):
        with pytest.raises(InvalidInputError):
            parse_city({"hex": 12})

    def test_hex_may_not_be_null(self):
        with pytest.raises(InvalidInputError, match="'hex'"):
            parse_city({"hex": None})


class TestParseTranslation:

    def test_new_translation(self):
        payload = {"city_id": 3, "language": "EN", "name": "Spring Valley", "extra": True}
        assert parse_new_translation(payload) == {"city_id": 3, "language": "EN", "name": "Spring Valley"}

    @pytest.mark.parametrize("city_id", [None, 0, "3", True])
    def test_city_id_is_required(self, city_id):
        with pytest.raises(InvalidInputError, match="City ID is required"):
            parse_new_translation({"city_id": city_id, "language": "EN", "name": "x"})

    def test_missing_city_id_key(self):
        with pytest.raises(InvalidInputError, match="City ID is required"):
            parse_new_translation({"language": "EN", "name": "x"})

    def test_language_and_name_are_required(self):
        with pytest.raises(InvalidInputError, match="language, name"):
            parse_new_translation({"city_id": 1})

    def test_patch_keeps_only_sent_fields(self):
        assert parse_translation_patch({"name": "Paris"}) == {"name": "Paris"}

    @pytest.mark.parametrize("column", ["language", "name"])
    def test_patch_rejects_explicit_null(self, column):
        with pytest.raises(InvalidInputError, match=f"'{column}'"):
            parse_translation_patch({column: None})

    def test_patch_rejects_negative_city_id(self):
        with pytest.raises(InvalidInputError, match="City ID is required"):
            parse_translation_patch({"city_id": -2})

    def test_patch_rejects_empty_name(self):
        with pytest.raises(InvalidInputError, match="'name'"):
            parse_translation_patch({"name": ""})


class TestParseId:

    def test_parses(self):
        assert parse_id("12", "Translation ID") == 12

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        with pytest.raises(InvalidInputError, match="Translation ID is required"):
            parse_id(value, "Translation ID")

    def test_not_a_number(self):
        with pytest.raises(InvalidInputError, match="must be an integer"):
            parse_id("abc", "Translation ID")


def test_success_envelope():
    assert success([1]) == {"status": "success", "data": [1]}
    assert success(message="done") == {"status": "success", "data": None, "message": "done"}
    assert success([], meta={"limit": 10, "skip": 0, "total": 0})["meta"]["total"] == 0
