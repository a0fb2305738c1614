from fieldengine.resolve.labels import (
    DIFFICULTY,
    PRODUCT_TYPE,
    LabelPair,
    disambiguate,
    first_label,
    pair_labels,
    product_label_pairs,
)


def test_scenario_first_label_per_category():
    names = ["Hard", "Bouquet"]
    cats = ["difficulty", "productType"]
    assert disambiguate(DIFFICULTY, names, cats) == "Hard"
    assert disambiguate(PRODUCT_TYPE, names, cats) == "Bouquet"


def test_same_category_ties_broken_by_array_order():
    names = ["Bouquet", "Medium", "Hard"]
    cats = ["productType", "difficulty", "difficulty"]
    assert disambiguate(DIFFICULTY, names, cats) == "Medium"


def test_no_matching_category_is_none():
    assert disambiguate(DIFFICULTY, ["Bouquet"], ["productType"]) is None
    assert disambiguate(DIFFICULTY, [], []) is None
    assert disambiguate(DIFFICULTY, None, None) is None


def test_misaligned_arrays_truncate_to_shorter():
    names = ["Hard", "Easy", "Bouquet"]
    cats = ["productType", "difficulty"]
    assert pair_labels(names, cats) == [LabelPair("Hard", "productType"), LabelPair("Easy", "difficulty")]
    assert disambiguate(DIFFICULTY, names, cats) == "Easy"
    assert disambiguate(PRODUCT_TYPE, ["Bouquet"], []) is None


def test_comma_joined_strings_are_split():
    pairs = pair_labels("Hard, Bouquet", "difficulty,productType")
    assert pairs == [LabelPair("Hard", "difficulty"), LabelPair("Bouquet", "productType")]


def test_empty_name_counts_as_no_label():
    assert first_label([LabelPair("", "difficulty"), LabelPair("Hard", "difficulty")], DIFFICULTY) is None


def test_product_label_pairs_tolerates_missing_product():
    assert product_label_pairs(None) == []
    assert product_label_pairs({"labelNames": ["Hard"]}) == []
