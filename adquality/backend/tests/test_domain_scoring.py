from app.domain.scoring import (
    completeness_points,
    description_points,
    keyword_points,
    picture_points,
    score_ad,
    score_breakdown,
)
from app.domain.types import PictureQuality, Typology

from conftest import make_ad, words


def test_no_pictures_costs_ten_points():
    ad = make_ad(typology=Typology.CHALET, pictures=())
    assert picture_points(ad, None) == -10
    # tags are ignored when the ad has no pictures at all
    assert picture_points(ad, [PictureQuality.HD]) == -10


def test_hd_pictures_are_worth_twenty_each():
    ad = make_ad(pictures=(1, 2, 3))
    assert picture_points(ad, [PictureQuality.HD] * 3) == 60


def test_non_hd_and_unknown_tags_are_worth_ten():
    ad = make_ad(pictures=(1, 2, 3, 4))
    assert picture_points(ad, [PictureQuality.HD, PictureQuality.SD, None, "4K"]) == 50


def test_pictures_without_tags_score_zero():
    ad = make_ad(pictures=(1,))
    assert picture_points(ad, None) == 0
    assert picture_points(ad, []) == 0


def test_flat_description_word_count_bands():
    def bonus(n: int) -> int:
        return description_points(make_ad(typology=Typology.FLAT, description=words(n))) - 5

    assert bonus(19) == 0
    assert bonus(20) == 10
    assert bonus(49) == 10
    assert bonus(50) == 30
    assert bonus(120) == 30


def test_chalet_needs_more_than_fifty_words():
    def bonus(n: int) -> int:
        return description_points(make_ad(typology=Typology.CHALET, description=words(n))) - 5

    assert bonus(50) == 0
    assert bonus(51) == 20


def test_garage_description_gets_only_base_points():
    assert description_points(make_ad(typology=Typology.GARAGE, description=words(80))) == 5


def test_empty_description_scores_nothing():
    ad = make_ad(typology=Typology.FLAT, description="")
    assert description_points(ad) == 0
    assert keyword_points(ad.description) == 0


def test_keywords_are_case_insensitive_and_additive():
    assert keyword_points("Piso Luminoso y nuevo") == 10
    assert keyword_points("ÁTICO CÉNTRICO") == 10
    assert keyword_points("luminoso nuevo céntrico reformado ático") == 25


def test_keyword_repeated_counts_once():
    assert keyword_points("nuevo nuevo nuevo") == 5


def test_keywords_match_as_substrings_with_punctuation():
    assert keyword_points("Recién reformado.") == 5
    assert keyword_points("superluminosos") == 5
    assert keyword_points("centro") == 0


def test_garage_completeness_depends_only_on_pictures():
    assert completeness_points(make_ad(typology=Typology.GARAGE, pictures=(1,))) == 40
    assert completeness_points(make_ad(typology=Typology.GARAGE, pictures=())) == 0


def test_flat_completeness_needs_description_and_house_size():
    complete = make_ad(typology=Typology.FLAT, pictures=(1,), description="Piso", house_size=80)
    assert completeness_points(complete) == 40
    assert completeness_points(make_ad(typology=Typology.FLAT, pictures=(1,), description="", house_size=80)) == 0
    assert completeness_points(make_ad(typology=Typology.FLAT, pictures=(1,), description="Piso")) == 0


def test_flat_without_pictures_still_counts_as_complete():
    # an empty picture list is still a picture list
    ad = make_ad(typology=Typology.FLAT, pictures=(), description="Piso", house_size=80)
    assert completeness_points(ad) == 40
    assert score_ad(ad, None) == 35  # -10 + 5 + 40


def test_chalet_with_garden_gets_no_completeness_bonus():
    ad = make_ad(
        typology=Typology.CHALET,
        pictures=(1,),
        description="Chalet",
        house_size=200,
        garden_size=500,
    )
    assert completeness_points(ad) == 0


def test_score_clamps_negative_sum_to_zero():
    ad = make_ad(typology=Typology.CHALET, pictures=(), description="")
    breakdown = score_breakdown(ad, None)
    assert breakdown.raw == -10
    assert score_ad(ad, None) == 0


def test_score_clamps_large_sum_to_hundred():
    ad = make_ad(
        typology=Typology.FLAT,
        pictures=(1, 2, 3, 4, 5),
        description=words(60, "luminoso"),
        house_size=90,
    )
    breakdown = score_breakdown(ad, [PictureQuality.HD] * 5)
    assert breakdown.raw > 100
    assert score_ad(ad, [PictureQuality.HD] * 5) == 100


def test_garage_with_one_sd_picture_scores_fifty():
    ad = make_ad(typology=Typology.GARAGE, pictures=(1,), description="")
    assert score_ad(ad, [PictureQuality.SD]) == 50


def test_score_is_deterministic():
    ad = make_ad(typology=Typology.FLAT, pictures=(1,), description="Ático nuevo", house_size=70)
    assert score_ad(ad, ["HD"]) == score_ad(ad, ["HD"]) == 20 + 5 + 10 + 40


def test_flat_with_garden_but_no_house_size_gets_no_completeness_bonus():
    ad = make_ad(
        typology=Typology.FLAT,
        pictures=(1,),
        description="Piso",
        house_size=None,
        garden_size=300,
    )
    assert completeness_points(ad) == 0
    assert score_ad(ad, [PictureQuality.SD]) == 15  # 10 + 5
