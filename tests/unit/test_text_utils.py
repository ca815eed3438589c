import pytest

from auction_lint.services.text_utils import (
    _parse_json_response,
    capitalize_name,
    differ_only_in_diacritics,
    extract_object_type,
    extract_period,
    generate_suggested_title,
    title_case_artist,
)


class TestObjectType:
    @pytest.mark.parametrize(
        "title,expected",
        [
            ("TAVLA, olja på duk", "TAVLA"),
            ("Figurin, stengods", "FIGURIN"),
            ("rolf lidberg papper", None),
            ("A. Zorn etsning", None),
            ("", None),
        ],
    )
    def test_extract_object_type(self, title, expected):
        assert extract_object_type(title) == expected


class TestPeriod:
    def test_year(self):
        assert extract_period("LITOGRAFI, signerad 1947") == "1947"

    def test_century_form(self):
        assert extract_period("SKÅP, allmoge, 1800-tal") == "1800"

    def test_decade_form(self):
        assert extract_period("VAS, glas, 60-tal") == "60-tal"

    def test_none(self):
        assert extract_period("VAS, glas") is None


class TestSuggestedTitle:
    def test_leading_name_form(self):
        assert generate_suggested_title("Lisa Larson, figurin, stengods", "Lisa Larson") == "figurin, stengods"

    def test_embedded_name(self):
        assert (
            generate_suggested_title("TAVLA, olja, Pablo Picasso, kubistisk", "pablo picasso")
            == "TAVLA, olja, kubistisk"
        )

    def test_nothing_left(self):
        assert generate_suggested_title("Lisa Larson", "Lisa Larson") == "Titel utan konstnärsnamn"


class TestNames:
    def test_capitalize_name(self):
        assert capitalize_name("rolf LIDBERG") == "Rolf Lidberg"

    def test_title_case_artist_keeps_particles(self):
        assert title_case_artist("hans von bergen") == "Hans von Bergen"

    def test_diacritics(self):
        assert differ_only_in_diacritics("Hermes", "Hermès") is True
        assert differ_only_in_diacritics("Hermes", "hermes") is False
        assert differ_only_in_diacritics("Orefors", "Orrefors") is False


class TestParseJson:
    def test_fenced(self):
        assert _parse_json_response('```json\n{"a": 1}\n```') == {"a": 1}

    def test_embedded(self):
        assert _parse_json_response('Svar: {"a": 1} klart') == {"a": 1}

    def test_garbage(self):
        assert _parse_json_response("inget") is None

    def test_list_is_not_an_object(self):
        assert _parse_json_response("[1, 2]") is None
