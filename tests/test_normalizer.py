"""
test_normalizer.py — Tests for raw record → DisplayItem normalisation.
"""

import pytest

from heritage_dashboard.models.dashboard import CultureItem, EventItem
from heritage_dashboard.services.normalizer import (
    is_event_record,
    normalize,
    normalize_many,
)

PLACEHOLDER = "/placeholder.svg"


class TestDiscrimination:

    def test_record_with_lokasi_is_event(self, make_event):
        item = normalize(make_event(7, "2024-05-01"), PLACEHOLDER)
        assert isinstance(item, EventItem)
        assert item.kind == "event"

    def test_record_without_location_is_culture(self, make_culture):
        item = normalize(make_culture(3), PLACEHOLDER)
        assert isinstance(item, CultureItem)
        assert item.kind == "culture"

    def test_null_location_still_counts_as_event(self):
        """Presence of the key decides, not its value."""
        item = normalize({"id": 1, "nama": "X", "lokasi": None}, PLACEHOLDER)
        assert item.kind == "event"
        assert item.location == ""

    def test_english_location_key_is_event(self):
        raw = {"id": 9, "name": "Harvest Fair", "date": "2024-09-01", "location": "Bogor"}
        item = normalize(raw, PLACEHOLDER)
        assert item.kind == "event"
        assert item.name == "Harvest Fair"
        assert item.location == "Bogor"
        assert item.date == "2024-09-01"

    def test_event_shaped_record_without_location_is_culture(self, make_event):
        raw = make_event(2, "2024-01-01")
        del raw["lokasi"]
        assert normalize(raw, PLACEHOLDER).kind == "culture"

    def test_location_less_record_keeps_its_date(self, make_event, make_culture):
        raw = make_event(7, "2020-01-01")
        del raw["lokasi"]
        assert normalize(raw, PLACEHOLDER).date == "2020-01-01"
        assert normalize(make_culture(3), PLACEHOLDER).date == ""

    @pytest.mark.parametrize("raw", [None, "text", 42, ["lokasi"]])
    def test_is_event_record_false_for_non_dicts(self, raw):
        assert is_event_record(raw) is False


class TestEventFields:

    def test_maps_indonesian_fields(self, make_event):
        item = normalize(make_event(5, "2024-03-20"), PLACEHOLDER)
        assert item == EventItem(
            id="5",
            name="Event 5",
            image="/img/event-5.jpg",
            date="2024-03-20",
            location="Kota 5",
            region="Daerah 5",
        )

    def test_missing_region_defaults_to_na(self, make_event):
        item = normalize(make_event(1, "2024-01-01", daerah=None), PLACEHOLDER)
        assert item.region == "N/A"

    def test_missing_image_uses_placeholder(self, make_event):
        item = normalize(make_event(1, "2024-01-01", gambar=None), PLACEHOLDER)
        assert item.image == PLACEHOLDER

    def test_default_placeholder_comes_from_settings(self, make_event):
        from heritage_dashboard.core.config import settings

        item = normalize(make_event(1, "2024-01-01", gambar=""))
        assert item.image == settings.placeholder_image


class TestCultureFields:

    def test_maps_indonesian_fields(self, make_culture):
        item = normalize(make_culture(4), PLACEHOLDER)
        assert item == CultureItem(
            id="4",
            name="Budaya 4",
            image="/img/budaya-4.jpg",
            type="Tarian",
            region="Daerah 4",
            province="Provinsi 4",
        )

    def test_missing_references_default_to_na(self):
        item = normalize({"id": 1, "nama": "Ulos", "tipe": "Kain"}, PLACEHOLDER)
        assert item.region == "N/A"
        assert item.province == "N/A"

    def test_blank_reference_name_defaults_to_na(self, make_culture):
        item = normalize(make_culture(1, daerah={"nama": "  "}, provinsi={}), PLACEHOLDER)
        assert item.region == "N/A"
        assert item.province == "N/A"

    def test_string_reference_is_used_as_name(self, make_culture):
        item = normalize(make_culture(1, provinsi="Bali"), PLACEHOLDER)
        assert item.province == "Bali"


class TestForgiving:

    @pytest.mark.parametrize("raw", [{}, None, "garbage", 12, []])
    def test_never_raises_on_malformed_input(self, raw):
        item = normalize(raw, PLACEHOLDER)
        assert item.kind == "culture"
        assert item.id == ""
        assert item.name == ""
        assert item.region == "N/A"
        assert item.image == PLACEHOLDER

    def test_numeric_id_rendered_as_string(self, make_culture):
        assert normalize(make_culture(17), PLACEHOLDER).id == "17"

    def test_region_never_empty(self, make_event, make_culture):
        records = [
            make_event(1, "2024-01-01", daerah=None),
            make_event(2, "2024-01-01", daerah={"nama": None}),
            make_culture(3, daerah=""),
            make_culture(4),
        ]
        for item in normalize_many(records, PLACEHOLDER):
            assert item.region

    def test_normalize_many_preserves_order(self, make_event, make_culture):
        items = normalize_many(
            [make_culture(1), make_event(2, "2024-01-01"), make_culture(3)], PLACEHOLDER
        )
        assert [(i.kind, i.id) for i in items] == [
            ("culture", "1"),
            ("event", "2"),
            ("culture", "3"),
        ]

    def test_items_are_frozen(self, make_culture):
        item = normalize(make_culture(1), PLACEHOLDER)
        with pytest.raises(Exception):
            item.name = "changed"
