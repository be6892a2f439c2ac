from person_notes.services.formatting import (
    collapse_whitespace,
    fix_photo_url,
    sanitize_for_metadata,
    strip_markup,
)


def test_sanitize_for_metadata_removes_colons_and_trims():
    assert sanitize_for_metadata("  Star Wars: Episode IV  ") == "Star Wars Episode IV"
    assert sanitize_for_metadata("a:b:c") == "abc"


def test_sanitize_for_metadata_empty_input():
    assert sanitize_for_metadata("") == ""
    assert sanitize_for_metadata(None) == ""
    assert sanitize_for_metadata(" : ") == ""


def test_strip_markup_removes_tags_and_decodes_entities():
    text = "<p>Фильм &laquo;Изгой&raquo; &mdash; <i>хит</i>&hellip;</p>"
    assert strip_markup(text) == "Фильм «Изгой» — хит…"


def test_strip_markup_drops_unknown_entities():
    assert strip_markup("Tom&#39;s &foo; film &amp; more") == "Toms  film & more"


def test_strip_markup_strips_tags_before_decoding():
    # &lt;b&gt; must decode to visible text, while real tags vanish
    assert strip_markup("<b>bold</b> &lt;b&gt;") == "bold <b>"
    assert strip_markup('<a title="&laquo;x&raquo;">link</a>') == "link"


def test_strip_markup_blank():
    assert strip_markup("") == ""
    assert strip_markup("   <br/>  ") == ""


def test_collapse_whitespace():
    out = collapse_whitespace("line one\n\nline   two\t\tthree \r\n")
    assert out == "line one line two three"
    assert "\n" not in out and "  " not in out


def test_fix_photo_url_collapses_doubled_scheme_idempotently():
    fixed = fix_photo_url("https:https://image.test/p.jpg")
    assert fixed == "https://image.test/p.jpg"
    assert fix_photo_url(fixed) == fixed


def test_fix_photo_url_leaves_other_urls():
    assert fix_photo_url("http://image.test/p.jpg") == "http://image.test/p.jpg"
    assert fix_photo_url("covers/p.jpg") == "covers/p.jpg"
    assert fix_photo_url(None) == ""


def test_fix_photo_url_trims_before_repair():
    assert fix_photo_url("  https:https://image.test/p.jpg\n") == "https://image.test/p.jpg"
    assert fix_photo_url("   ") == ""
