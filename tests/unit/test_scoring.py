from auction_lint.services.artist_detection import score_candidate


def test_artist_object_type_scores_higher_than_designer_object_type():
    assert score_candidate("Pablo Picasso", "TAVLA") > score_candidate("Bruno Mathsson", "STOL")


def test_base_score_for_unknown_object_type():
    assert score_candidate("Niels Thorsson", "POKAL") == 0.7


def test_artist_object_type_bonus_is_case_insensitive():
    assert score_candidate("Anders Zorn", "etsning") == 0.9


def test_designer_object_type_penalty():
    assert score_candidate("Niels Thorsson", "FAT") == 0.4


def test_missing_object_type():
    assert score_candidate("Niels Thorsson", None) == 0.7
