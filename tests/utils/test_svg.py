# tests/utils/test_svg.py

from slime_sprite.utils.svg import (
    DATA_URI_PREFIX,
    fmt,
    ref,
    rotate_forever,
    sanitize_uid,
    sparkle_points,
    tag,
    to_data_uri,
)


def test_fmt() -> None:
    assert fmt(1.0) == "1"
    assert fmt(2.5) == "2.5"
    assert fmt(0.12345) == "0.123"
    assert fmt(-0.0001) == "0"
    assert fmt(-3) == "-3"


def test_tag_attributes_and_children() -> None:
    assert tag("circle", cx=10, cy=2.50, r=1, fill="white") == (
        '<circle cx="10" cy="2.5" r="1" fill="white"/>'
    )
    assert tag("g", "<a/>", stroke_width=2, in_="blur", opacity=None) == (
        '<g stroke-width="2" in="blur"><a/></g>'
    )


def test_ref() -> None:
    assert ref("bg_fire_common_0") == "url(#bg_fire_common_0)"


def test_rotate_forever() -> None:
    out = rotate_forever(50, 18, "12s")
    assert 'from="0 50 18"' in out
    assert 'to="360 50 18"' in out
    assert 'repeatCount="indefinite"' in out


def test_sparkle_points() -> None:
    assert sparkle_points(0, 0, 10) == "0,-10 3,-3 10,0 3,3 0,10 -3,3 -10,0 -3,-3"


def test_sanitize_uid() -> None:
    assert sanitize_uid("fire_epic_42") == "fire_epic_42"
    assert sanitize_uid("ic_fire-x_epic_-3") == "ic_fire-x_epic_-3"
    assert sanitize_uid('f"ire <x>/y') == "f_ire__x__y"


def test_data_uri_matches_encode_uri_component() -> None:
    uri = to_data_uri("<a b='c'>!~*()é</a>")
    assert uri.startswith(DATA_URI_PREFIX)
    assert uri[len(DATA_URI_PREFIX):] == "%3Ca%20b%3D'c'%3E!~*()%C3%A9%3C%2Fa%3E"
