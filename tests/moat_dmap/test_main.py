"""
Test the command line
"""

# ruff:noqa:D103 pylint: disable=missing-function-docstring
from __future__ import annotations

import asyncclick as click
import msgpack
import pytest

from moat.dmap._main import cli

_json = b'{"root": {"title": "example json", "contents": ["c1", "c2", "c3"]}}'


@pytest.fixture
def jfile(tmp_path):
    fn = tmp_path / "data.json"
    fn.write_bytes(_json)
    return str(fn)


async def run(*args):
    return await cli.main(args=list(args), standalone_mode=False)


@pytest.mark.anyio
async def test_get(jfile, capsys):
    await run("get", jfile, "root.contents:1")
    assert capsys.readouterr().out == "'c2'\n"

    await run("get", "-f", "json", jfile, "root.contents")
    assert capsys.readouterr().out == '[\n  "c1",\n  "c2",\n  "c3"\n]\n'

    await run("get", "-f", "repr", jfile)
    assert capsys.readouterr().out.startswith("{'root': {")


@pytest.mark.anyio
async def test_get_missing(jfile, capsys):
    with pytest.raises(SystemExit) as exc:
        await run("get", jfile, "root.contents:5")
    assert exc.value.code == 1
    assert "index 5 out of range at path root.contents:5" in capsys.readouterr().err


@pytest.mark.anyio
async def test_get_decoder(tmp_path, capsys):
    fn = tmp_path / "data.mp"
    fn.write_bytes(msgpack.packb({"a": {1: "one"}}))
    await run("get", "-d", "msgpack", str(fn), "a:1")
    assert capsys.readouterr().out == "'one'\n"

    cf = tmp_path / "cfg.yaml"
    cf.write_text("dmap:\n  codec: msgpack\n  format: repr\n", encoding="utf-8")
    await run("-c", str(cf), "get", str(fn), "a")
    assert capsys.readouterr().out == "ScalarMap({1: 'one'})\n"


@pytest.mark.anyio
async def test_exists(jfile, capsys):
    await run("exists", jfile, "root.title")
    assert capsys.readouterr().out == "True\n"

    with pytest.raises(SystemExit) as exc:
        await run("exists", jfile, "root.title.x")
    assert exc.value.code == 1
    assert capsys.readouterr().out == "False\n"


@pytest.mark.anyio
async def test_path(capsys):
    await run("path", "-d", "root.contents:1")
    assert capsys.readouterr().out == "['root', 'contents', 1] key key index\n"

    await run("path", "-e", "'a',1,2.5")
    assert capsys.readouterr().out == "a:1:2:.5\n"

    with pytest.raises(click.UsageError):
        await run("path", "-d", "a..b")
    with pytest.raises(click.UsageError):
        await run("path", "root")


@pytest.mark.anyio
async def test_cfg(capsys):
    await run("cfg", "dmap.codec")
    assert capsys.readouterr().out == "'json'\n"

    await run("cfg", "dmap.codec", "dmap.format")
    assert capsys.readouterr().out == "'json'\n---\n'yaml'\n"

    await run("cfg", "dmap")
    assert "codec: json" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        await run("cfg", "nope")
    assert "Unknown: nope" in capsys.readouterr().err


@pytest.mark.anyio
async def test_bad_decoder(jfile, tmp_path, capsys):
    with pytest.raises(click.BadParameter) as exc:
        await run("get", "-d", "xml", jfile, "root")
    assert exc.value.exit_code == 2

    await run("get", "-d", "JSON", jfile, "root.title")
    assert capsys.readouterr().out == "'example json'\n"

    cf = tmp_path / "cfg.yaml"
    cf.write_text("dmap:\n  codec: xml\n", encoding="utf-8")
    with pytest.raises(click.UsageError) as exc:
        await run("-c", str(cf), "get", jfile, "root")
    assert "dmap.codec" in str(exc.value)
    assert exc.value.exit_code == 2


@pytest.mark.anyio
async def test_bad_path(jfile):
    with pytest.raises(click.BadParameter):
        await run("get", jfile, "root..title")
    with pytest.raises(click.BadParameter):
        await run("cfg", "dmap.")


@pytest.mark.anyio
async def test_bad_input(tmp_path, capsys):
    fn = tmp_path / "bad.json"
    fn.write_bytes(b'{"a":')
    with pytest.raises(SystemExit) as exc:
        await run("get", str(fn), "a")
    assert exc.value.code == 1
    assert "cannot decode as json" in capsys.readouterr().err

    fn = tmp_path / "bad.mp"
    fn.write_bytes(b"\x92\x01")
    with pytest.raises(SystemExit) as exc:
        await run("exists", "-d", "msgpack", str(fn), "a")
    assert exc.value.code == 1
    assert "cannot decode as msgpack" in capsys.readouterr().err


@pytest.mark.anyio
async def test_tuple_keys(tmp_path, capsys):
    fn = tmp_path / "data.yaml"
    fn.write_text("a:\n  ? [1, 2]\n  : x\n  b: !bin abc\n", encoding="utf-8")

    await run("get", "-d", "yaml", str(fn), "a:1,2")
    assert capsys.readouterr().out == "'x'\n"

    await run("get", "-d", "yaml", str(fn), "a")
    out = capsys.readouterr().out
    assert "x" in out
    assert "!bin" in out
    assert "abc" in out

    with pytest.raises(SystemExit) as exc:
        await run("get", "-d", "yaml", "-f", "json", str(fn), "a")
    assert exc.value.code == 1
    assert "Cannot represent as JSON" in capsys.readouterr().err
