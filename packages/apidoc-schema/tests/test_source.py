from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from apidoc_schema.apidoc.source import expand_file, expand_source, parse_element
from apidoc_schema.core.context import RunContext


def test_parse_element_keeps_comment_prefix() -> None:
    parsed = parse_element(" * @apiParam (body) {schema} schemas/sample.json")
    assert parsed is not None
    prefix, element = parsed
    assert prefix == " * "
    assert element.source_name == "apiParam"
    assert element.content == "(body) {schema} schemas/sample.json"


@pytest.mark.parametrize("line", ["function x() {}", " * @api", " * plain text", ""])
def test_parse_element_rejects_non_tags(line: str) -> None:
    assert parse_element(line) is None


def test_expand_source_replaces_schema_tags(fixtures_root: Path) -> None:
    text = (fixtures_root / "sources/handler.js").read_text(encoding="utf-8")
    out = expand_source(text, fixtures_root).splitlines()
    assert out[:3] == ["/**", " * @api {post} /users Create user", " * @apiName CreateUser"]
    assert out[3] == " * @apiParam (body) {integer{1..}} id User id"
    assert out[8] == " * @apiParam (body) {string{2..32}}  nickname "
    assert out[10] == " * @apiParam (body) {array{1..3}} [tags] Tags"
    assert out[11:] == [" * @apiSuccess {Number} id Created id", " */", "function createUser(req, res) {}"]


def test_expand_source_without_schema_tags_is_identity(fixtures_root: Path) -> None:
    text = (fixtures_root / "sources/plain.js").read_text(encoding="utf-8")
    assert expand_source(text, fixtures_root) == text


def test_expand_source_keeps_crlf_endings(fixtures_root: Path) -> None:
    text = "/**\r\n * @apiSuccess {schema} schemas/with_refs.yaml\r\n */\r\n"
    out = expand_source(text, fixtures_root)
    assert out == "/**\r\n * @apiSuccess {string} name \r\n * @apiSuccess {string}  city City\r\n * @apiSuccess {string / ^[0-9]{5}$} [ zip] \r\n */\r\n"


def test_expand_source_last_line_without_newline(fixtures_root: Path) -> None:
    out = expand_source("# @apiParam {schema} schemas/with_refs.yaml", fixtures_root)
    assert out.split("\n") == ["# @apiParam {string} name ", "# @apiParam {string}  city City", "# @apiParam {string / ^[0-9]{5}$} [ zip] "]


def test_expand_file_in_place(fixtures_root: Path, tmp_path: Path) -> None:
    shutil.copytree(fixtures_root, tmp_path / "fx")
    ctx = RunContext.from_args("t-src", str(tmp_path / "fx"), "text")
    target = tmp_path / "fx/sources/handler.js"
    changed, text = expand_file(target, ctx, in_place=True)
    assert changed
    assert target.read_text(encoding="utf-8") == text
    changed_again, _ = expand_file(target, ctx, in_place=True)
    assert not changed_again
