"""Tests for JSON / YAML interchange."""

import json

import pytest

from pycfgparser import CfgDocument, IniDocument
from pycfgparser.export import InvalidInterchange, JsonParser, YamlParser


@pytest.fixture
def ini():
    doc = IniDocument()
    doc.lines.append_comment("# lost in translation")
    doc["name"] = "Demo"
    doc["debug"] = True
    doc["count"] = 3
    return doc


@pytest.fixture
def cfg():
    doc = CfgDocument()
    doc.add_section("B")["x"] = 1.5
    doc.add_section("A")["y"] = "why"
    return doc


@pytest.mark.parametrize("handler", [JsonParser, YamlParser])
def test_ini_round_trip(tmp_path, ini, handler):
    h = handler(tmp_path / "out")
    h.write(ini)
    back = h.read_ini()
    assert back.to_dict() == {"name": "Demo", "debug": "true", "count": "3"}
    assert list(back) == ["name", "debug", "count"]


@pytest.mark.parametrize("handler", [JsonParser, YamlParser])
def test_cfg_round_trip(tmp_path, cfg, handler):
    h = handler(tmp_path / "out")
    h.write(cfg)
    back = h.read_cfg()
    assert back.sections() == ["B", "A"]
    assert back.to_dict() == {"B": {"x": "1.5"}, "A": {"y": "why"}}


def test_json_layout(tmp_path, ini):
    path = tmp_path / "o.json"
    JsonParser(path).write(ini)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "name": "Demo", "debug": "true", "count": "3"}


def test_yaml_scalars_become_text(tmp_path):
    path = tmp_path / "in.yaml"
    path.write_text("a: yes\nb: 10\nc:\n", encoding="utf-8")
    doc = YamlParser(path).read_ini()
    assert doc.to_dict() == {"a": "true", "b": "10", "c": ""}
    assert doc.dumps() == "a = true\nb = 10\nc = \n"


def test_yaml_empty_section(tmp_path):
    path = tmp_path / "in.yaml"
    path.write_text("A:\nB:\n  k: v\n", encoding="utf-8")
    doc = YamlParser(path).read_cfg()
    assert doc.sections() == ["A", "B"]
    assert len(doc["A"]) == 0


def test_nested_value_rejected(tmp_path):
    path = tmp_path / "in.json"
    path.write_text('{"a": [1, 2]}', encoding="utf-8")
    with pytest.raises(InvalidInterchange):
        JsonParser(path).read_ini()


def test_cfg_needs_mappings(tmp_path):
    path = tmp_path / "in.json"
    path.write_text('{"A": "flat"}', encoding="utf-8")
    with pytest.raises(InvalidInterchange):
        JsonParser(path).read_cfg()


def test_broken_json(tmp_path):
    path = tmp_path / "in.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(InvalidInterchange):
        JsonParser(path).read_ini()
