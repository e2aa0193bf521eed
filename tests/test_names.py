from golf_pool.names import find_match, names_match, normalize_name


def test_normalize_name_strips_case_accents_and_punctuation() -> None:
    assert normalize_name("Ludvig Åberg") == "ludvig aberg"
    assert normalize_name("  J.T.   Poston ") == "jt poston"
    assert normalize_name("Nicolai Højgaard") == "nicolai hojgaard"
    assert normalize_name(None) == ""


def test_normalize_name_reorders_last_first() -> None:
    assert normalize_name("Scheffler, Scottie") == "scottie scheffler"


def test_aberg_matches_across_case_and_diacritics() -> None:
    assert names_match("Ludvig Åberg", "Ludvig Aberg")
    assert names_match("Ludvig Åberg", "LUDVIG ABERG")
    assert names_match("Ludvig Ã…berg", "Ludvig Aberg")


def test_distinct_spelling_is_not_a_match() -> None:
    assert not names_match("Ludvig Åberg", "Ludwig Aberg")
    assert not names_match("Tom Kim", "Tom Kime")


def test_middle_initial_is_optional() -> None:
    assert names_match("Davis Riley", "Davis J. Riley")
    assert not names_match("Davis Riley", "Davis Riley Jones")


def test_empty_names_never_match() -> None:
    assert not names_match("", "")
    assert not names_match("Tom Kim", None)


def test_find_match_returns_first_candidate_in_order() -> None:
    candidates = [("Tom Kim", 1), ("TOM KIM", 2), ("Tony Finau", 3)]
    assert find_match("tom kim", candidates) == 1
    assert find_match("Tony Finau", candidates) == 3
    assert find_match("Jon Rahm", candidates) is None
