import pytest

from auction_lint.models import FieldType, IssueSource, IssueType, SessionContext, SpellIssue
from auction_lint.services.oracle import OracleTask, OracleTransportError
from auction_lint.services.spellcheck import (
    SpellcheckEngine,
    check_brands,
    check_brands_with_oracle,
    check_dictionary,
    check_with_oracle,
    deduplicate_issues,
    filter_false_positives,
)


def _issue(original, corrected, confidence, source=IssueSource.DICTIONARY):
    return SpellIssue(
        original=original,
        corrected=corrected,
        confidence=confidence,
        source=source,
        category="general",
    )


class TestDictionaryCheck:
    def test_finds_known_misspellings(self):
        issues = check_dictionary("Vas i krystal med blåa detaljer")

        assert [(i.original, i.corrected) for i in issues] == [("krystal", "kristall"), ("blåa", "blå")]
        assert issues[0].display_category == "material"
        assert issues[1].display_category == "färg"
        assert all(i.source == IssueSource.DICTIONARY for i in issues)

    def test_reports_each_word_once(self):
        issues = check_dictionary("krystal och Krystal")
        assert len(issues) == 1

    def test_ignores_short_words(self):
        assert check_dictionary("nag") == []

    def test_is_idempotent(self):
        text = "Skål i sylver och krystal, porlin med reppar"
        first = [i.to_dict() for i in check_dictionary(text)]
        second = [i.to_dict() for i in check_dictionary(text)]

        assert first == second
        assert first


class TestDeduplicate:
    def test_keeps_highest_confidence_across_sources(self):
        dictionary = _issue("krystal", "kristall", 0.85)
        ai = _issue("Krystal", "kristal", 0.95, IssueSource.AI_SPELLCHECK)

        merged = deduplicate_issues([dictionary, ai])

        assert merged == [ai]

    def test_ties_keep_first(self):
        first = _issue("krystal", "kristall", 0.9)
        second = _issue("krystal", "kristal", 0.9, IssueSource.AI_SPELLCHECK)

        assert deduplicate_issues([first, second]) == [first]


class TestFilterFalsePositives:
    def test_drops_ignored_terms(self):
        context = SessionContext(ignored_terms=frozenset({"Krystal"}))
        assert filter_false_positives([_issue("krystal", "kristall", 0.99)], "vas i krystal", context) == []

    def test_drops_whitelisted_terms(self):
        issues = [_issue("boett", "boet", 0.99)]
        assert filter_false_positives(issues, "armbandsur, boett i stål", SessionContext()) == []

    @pytest.mark.parametrize("confidence", [0.5, 0.85, 0.99, 1.0])
    def test_drops_words_from_artist_field_regardless_of_confidence(self, confidence):
        context = SessionContext(artist_field_value="Christian Beijer")
        issues = [_issue("Beijer", "Bejer", confidence)]

        assert filter_false_positives(issues, "Akvarell av Beijer", context) == []

    def test_drops_diacritic_only_fix_on_proper_name(self):
        issues = [_issue("Hermes", "Hermès", 0.99, IssueSource.BRAND_FUZZY)]
        assert filter_false_positives(issues, "Väska, Hermes, Paris", SessionContext()) == []

    def test_drops_low_confidence_fix_on_proper_name(self):
        issues = [_issue("Jarup", "Jarupp", 0.9)]
        assert filter_false_positives(issues, "Akvarell av E. Jarup", SessionContext()) == []

    def test_keeps_confident_fix_on_proper_name(self):
        issues = [_issue("Jarup", "Jarupp", 0.97)]
        assert filter_false_positives(issues, "Akvarell av E. Jarup", SessionContext()) == issues


class TestBrandMatcher:
    def test_flags_variant_spelling(self):
        issues = check_brands("Vas från Orefors, signerad")

        assert len(issues) == 1
        assert issues[0].original == "Orefors"
        assert issues[0].corrected == "Orrefors"
        assert issues[0].type == IssueType.BRAND
        assert issues[0].display_category == "märke"

    def test_multi_word_brand_keeps_original_casing(self):
        issues = check_brands("Tallrik, bing grondahl, julmotiv")

        assert [(i.original, i.corrected) for i in issues] == [("bing grondahl", "Bing & Grøndahl")]

    def test_near_correct_spelling_is_left_alone(self):
        assert check_brands("Fat, Royal Kopenhagen, blå blomma") == []

    def test_silent_when_canonical_present(self):
        assert check_brands("Orrefors vas, jfr Orefors") == []

    def test_clean_text(self):
        assert check_brands("Tallrik, porslin, blå dekor") == []


class TestAICheck:
    @pytest.mark.asyncio
    async def test_filters_oracle_issues(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={
                "issues": [
                    {"original": "akverell", "corrected": "akvarell", "confidence": 0.95},
                    {"original": "olija", "corrected": "olja"},
                    {"original": "teckninng", "corrected": "teckning", "confidence": 0.5},
                    {"original": "boett", "corrected": "boet", "confidence": 0.99},
                    {"original": "Vas", "corrected": "vas", "confidence": 0.99},
                ]
            }
        )

        issues = await check_with_oracle(
            "akverell och olija", FieldType.DESCRIPTION, SessionContext(title_value="AKVARELL"), oracle
        )

        assert [(i.original, i.confidence) for i in issues] == [("akverell", 0.95), ("olija", 0.9)]
        assert all(i.source == IssueSource.AI_SPELLCHECK for i in issues)
        request = oracle.requests[0]
        assert request.title_context == "AKVARELL"
        assert "boett" in request.whitelist

    @pytest.mark.asyncio
    async def test_title_field_gets_no_title_context(self, fake_oracle):
        oracle = fake_oracle(spellcheck={"issues": []})

        await check_with_oracle("TAVLA, olja", FieldType.TITLE, SessionContext(title_value="TAVLA, olja"), oracle)

        assert oracle.requests[0].title_context is None

    @pytest.mark.asyncio
    async def test_oracle_failure_means_no_issues(self, fake_oracle):
        oracle = fake_oracle(spellcheck=OracleTransportError("down"))

        assert await check_with_oracle("akverell på duk", FieldType.DESCRIPTION, SessionContext(), oracle) == []

    @pytest.mark.asyncio
    async def test_zero_confidence_is_not_replaced_by_default(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={"issues": [{"original": "akverell", "corrected": "akvarell", "confidence": 0}]}
        )

        assert await check_with_oracle("akverell på papper", FieldType.DESCRIPTION, SessionContext(), oracle) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("confidence", [1.5, 5, -0.2])
    async def test_out_of_range_confidence_is_dropped(self, fake_oracle, confidence):
        oracle = fake_oracle(
            spellcheck={"issues": [{"original": "akverell", "corrected": "akvarell", "confidence": confidence}]}
        )

        assert await check_with_oracle("akverell på papper", FieldType.DESCRIPTION, SessionContext(), oracle) == []

    @pytest.mark.asyncio
    async def test_non_numeric_confidence_gets_default(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={"issues": [{"original": "akverell", "corrected": "akvarell", "confidence": "hög"}]}
        )

        issues = await check_with_oracle("akverell på papper", FieldType.DESCRIPTION, SessionContext(), oracle)

        assert [i.confidence for i in issues] == [0.9]

    @pytest.mark.asyncio
    async def test_short_text_skips_oracle(self, fake_oracle):
        oracle = fake_oracle(spellcheck={"issues": []})

        assert await check_with_oracle("olja", FieldType.DESCRIPTION, SessionContext(), oracle) == []
        assert oracle.requests == []


class TestAIBrandCheck:
    @pytest.mark.asyncio
    async def test_keeps_confident_brand_fixes(self, fake_oracle):
        oracle = fake_oracle(
            check_brands={
                "issues": [
                    {"original": "Lemonia", "suggested": "Lemania", "confidence": 0.95},
                    {"original": "Hasselblad", "suggested": "Hasselbladh", "confidence": 0.8},
                    {"original": "Seiko", "suggested": "Seikko"},
                ]
            }
        )

        issues = await check_brands_with_oracle(
            "Armbandsur, Lemonia, Hasselblad och Seiko", SessionContext(title_value="ARMBANDSUR"), oracle
        )

        assert [(i.original, i.corrected, i.confidence) for i in issues] == [("Lemonia", "Lemania", 0.95)]
        assert issues[0].source == IssueSource.AI_BRAND
        assert issues[0].type == IssueType.BRAND
        assert issues[0].category == "watches"
        assert issues[0].display_category == "märke"
        assert oracle.requests[0].task == OracleTask.CHECK_BRANDS
        assert oracle.requests[0].title_context == "ARMBANDSUR"

    @pytest.mark.asyncio
    async def test_unknown_brand_category(self, fake_oracle):
        oracle = fake_oracle(
            check_brands={"issues": [{"original": "Hasselbladh", "suggested": "Hasselblad", "confidence": 0.9}]}
        )

        issues = await check_brands_with_oracle("Kamera, Hasselbladh", SessionContext(), oracle)

        assert issues[0].category == "unknown"

    @pytest.mark.asyncio
    async def test_drops_fixes_for_words_not_in_text(self, fake_oracle):
        oracle = fake_oracle(
            check_brands={"issues": [{"original": "Rolexx", "suggested": "Rolex", "confidence": 0.99}]}
        )

        assert await check_brands_with_oracle("Armbandsur, stål", SessionContext(), oracle) == []

    @pytest.mark.asyncio
    async def test_oracle_failure_means_no_issues(self, fake_oracle):
        oracle = fake_oracle(check_brands=OracleTransportError("down"))

        assert await check_brands_with_oracle("Vas, Orefors", SessionContext(), oracle) == []

    @pytest.mark.asyncio
    async def test_no_oracle(self):
        assert await check_brands_with_oracle("Vas, Orefors", SessionContext(), None) == []


class TestSpellcheckEngine:
    @pytest.mark.asyncio
    async def test_merges_sources_ranked_by_confidence(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={
                "issues": [
                    {"original": "krystal", "corrected": "kristal", "confidence": 0.92},
                    {"original": "akverell", "corrected": "akvarell", "confidence": 0.97},
                ]
            },
            check_brands={"issues": []},
        )
        engine = SpellcheckEngine(oracle=oracle)

        issues = await engine.check("Vas i krystal från Orefors, akverell", FieldType.DESCRIPTION)

        assert [(i.original, i.source) for i in issues] == [
            ("akverell", IssueSource.AI_SPELLCHECK),
            ("krystal", IssueSource.AI_SPELLCHECK),
            ("Orefors", IssueSource.BRAND_FUZZY),
        ]

    @pytest.mark.asyncio
    async def test_ai_failure_keeps_other_sources(self, fake_oracle):
        oracle = fake_oracle(spellcheck=RuntimeError("unexpected"), check_brands={"issues": []})
        engine = SpellcheckEngine(oracle=oracle)

        issues = await engine.check("Vas i krystal från Orefors", FieldType.DESCRIPTION)

        assert {i.original for i in issues} == {"krystal", "Orefors"}

    @pytest.mark.asyncio
    async def test_artist_field_words_never_reported(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={"issues": [{"original": "Beijer", "corrected": "Bayer", "confidence": 1.0}]},
            check_brands={"issues": []},
        )
        engine = SpellcheckEngine(oracle=oracle)
        context = SessionContext(artist_field_value="Christian Beijer")

        issues = await engine.check("Akvarell, motiv av Beijer", FieldType.DESCRIPTION, context)

        assert issues == []

    @pytest.mark.asyncio
    async def test_ai_brand_issues_are_merged(self, fake_oracle):
        oracle = fake_oracle(
            spellcheck={"issues": []},
            check_brands={"issues": [{"original": "hasselbladh", "suggested": "Hasselblad", "confidence": 0.92}]},
        )
        engine = SpellcheckEngine(oracle=oracle)

        issues = await engine.check("Kamera från hasselbladh med objektiv", FieldType.DESCRIPTION)

        assert [(i.original, i.corrected, i.source) for i in issues] == [
            ("hasselbladh", "Hasselblad", IssueSource.AI_BRAND)
        ]
        assert set(oracle.tasks()) == {OracleTask.SPELLCHECK, OracleTask.CHECK_BRANDS}

    @pytest.mark.asyncio
    async def test_short_text(self):
        assert await SpellcheckEngine().check("ab") == []

    def test_dictionary_only_is_idempotent(self):
        engine = SpellcheckEngine()
        text = "Skål i sylver, krystal och porlin"

        assert engine.check_dictionary_only(text) == engine.check_dictionary_only(text)
        assert len(engine.check_dictionary_only(text)) == 3
