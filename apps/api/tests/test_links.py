import pytest

from person_notes.services.formatting import build_link, normalize_folder


def test_build_link_id_and_folder_strips_colon():
    assert build_link("A:B", person_id=1, folder_path="F") == '"[[F/1|AB]]"'


@pytest.mark.parametrize(
    "person_id, folder, expected",
    [
        (7, "People", '"[[People/7|Ann]]"'),
        (7, "", '"[[7|Ann]]"'),
        (7, None, '"[[7|Ann]]"'),
        (None, "People", '"[[People/Ann]]"'),
        (None, "   ", '"[[Ann]]"'),
        (None, None, '"[[Ann]]"'),
    ],
)
def test_build_link_shapes(person_id, folder, expected):
    assert build_link(" Ann ", person_id=person_id, folder_path=folder) == expected


def test_build_link_empty_name_returns_none():
    assert build_link("", person_id=1, folder_path="F") is None
    assert build_link(" : ", person_id=1) is None
    assert build_link(None) is None


def test_trailing_slash_in_folder_is_dropped():
    assert normalize_folder("Actors/") == "Actors"
    assert build_link("Ann", person_id=3, folder_path="Notes/Actors/") == '"[[Notes/Actors/3|Ann]]"'
