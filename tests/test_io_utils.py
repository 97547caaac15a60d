import pytest

from app.services.io_utils import read_json, write_json


def test_read_json_missing_file(tmp_path):
    assert read_json(tmp_path / "absent.json") is None


def test_write_json_creates_parent_and_indents(tmp_path):
    target = tmp_path / "nested" / "players.json"

    write_json(target, [{"uuid": "abc"}])

    assert read_json(target) == [{"uuid": "abc"}]
    assert b"\n  " in target.read_bytes()


def test_write_json_unserializable_keeps_previous_content(tmp_path):
    target = tmp_path / "players.json"
    write_json(target, [{"uuid": "abc"}])
    before = target.read_bytes()

    with pytest.raises(TypeError):
        write_json(target, [{"uuid": object()}])

    assert target.read_bytes() == before
    assert sorted(p.name for p in tmp_path.iterdir()) == ["players.json"]
