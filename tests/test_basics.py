import pytest

from judgekit.basics import (
    can_say,
    classify_animal,
    codename,
    difference,
    fits_tweet,
    game_duration,
    link_clicks,
    power_label,
    previous_number,
    triangles_in_polygon,
)


def test_game_duration_same_hour_is_full_day():
    assert game_duration(5, 5) == 24


@pytest.mark.parametrize("start,end", [(16, 2), (2, 16), (0, 23), (23, 0)])
def test_game_duration_complements(start, end):
    assert game_duration(start, end) + game_duration(end, start) == 24


def test_game_duration_forward():
    assert game_duration(3, 10) == 10 - 3


@pytest.mark.parametrize(
    "words,animal",
    [
        (("vertebrado", "ave", "carnivoro"), "aguia"),
        (("vertebrado", "ave", "onivoro"), "pomba"),
        (("vertebrado", "mamifero", "onivoro"), "homem"),
        (("vertebrado", "mamifero", "herbivoro"), "vaca"),
        (("invertebrado", "inseto", "hematofago"), "pulga"),
        (("invertebrado", "inseto", "herbivoro"), "lagarta"),
        (("invertebrado", "anelideo", "hematofago"), "sanguessuga"),
        (("invertebrado", "anelideo", "onivoro"), "minhoca"),
    ],
)
def test_classify_animal(words, animal):
    assert classify_animal(*words) == animal


def test_classify_animal_unknown():
    with pytest.raises(ValueError):
        classify_animal("vertebrado", "peixe", "onivoro")


@pytest.mark.parametrize("n", [3, 4, 10, 100])
def test_triangles_in_polygon(n):
    assert triangles_in_polygon(n) + 2 == n


@pytest.mark.parametrize("n", [-1, 0, 1, 50])
def test_previous_number(n):
    assert previous_number(n) + 1 == n


def test_fits_tweet_boundary():
    assert fits_tweet("a" * 80) is True
    assert fits_tweet("a" * 81) is False
    assert fits_tweet("") is True


def test_fits_tweet_counts_bytes():
    assert fits_tweet("é" * 40) is True
    assert fits_tweet("é" * 41) is False


@pytest.mark.parametrize("n,m", [(10, 3), (3, 10), (0, 0)])
def test_difference(n, m):
    assert difference(n, m) + m == n
    assert difference(n, m) == -difference(m, n)


@pytest.mark.parametrize("n", [0, 1, 25])
def test_link_clicks(n):
    assert link_clicks(n) == n + n + n + n


@pytest.mark.parametrize(
    "x,y,name",
    [(0, 0, "PROXYCITY"), (1, 0, "P.Y.N.G."), (2, 3, "CRIPTONIZE"), (5, 5, "WIFI ANTENNAS")],
)
def test_codename(x, y, name):
    assert codename(x, y) == name


def test_codename_depends_only_on_sum():
    assert codename(3, 4) == codename(7, 0) == "SALT"


@pytest.mark.parametrize("pair", [(6, 5), (-1, 0)])
def test_codename_out_of_range(pair):
    with pytest.raises(ValueError):
        codename(*pair)


def test_power_label():
    assert power_label(8001) == "Mais de 8000!"
    assert power_label(8000) == "Inseto!"
    assert power_label(1) == "Inseto!"


def test_can_say():
    assert can_say("aaah", "aaaaah") is False
    assert can_say("aaaaah", "aah") is True
    assert can_say("ah", "ah") is True