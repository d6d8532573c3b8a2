from slime_sprite.document import EMPTY, Fragment, Layer, SpriteDocument
from slime_sprite.types import LayerName
from slime_sprite.utils.svg import DATA_URI_PREFIX


def make_document() -> SpriteDocument:
    return SpriteDocument(
        view_box="0 0 10 10",
        width=20,
        height=20.0,
        defs=('<filter id="a"/>', '<filter id="b"/>'),
        layers=(
            Layer(LayerName.BODY, '<circle r="1"/>'),
            Layer(LayerName.EYES, ""),
            Layer(LayerName.ACCESSORIES, '<rect width="1"/>'),
        ),
    )


def test_to_svg() -> None:
    assert make_document().to_svg() == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10" width="20" height="20" '
        'overflow="visible"><defs><filter id="a"/><filter id="b"/></defs>'
        '<circle r="1"/><rect width="1"/></svg>'
    )


def test_to_data_uri() -> None:
    uri = make_document().to_data_uri()
    assert uri.startswith(DATA_URI_PREFIX + "%3Csvg%20xmlns%3D%22http%3A%2F%2Fwww.w3.org")
    assert uri.endswith("%3C%2Fsvg%3E")


def test_layer_lookup() -> None:
    doc = make_document()
    assert doc.layer_names == (LayerName.BODY, LayerName.EYES, LayerName.ACCESSORIES)
    assert doc.layer(LayerName.BODY).markup == '<circle r="1"/>'
    assert doc.layer(LayerName.BLUSH) is None


def test_empty_fragment() -> None:
    assert EMPTY == Fragment(defs="", markup="")
    assert Fragment("<a/>", "<b/>").defs == "<a/>"
