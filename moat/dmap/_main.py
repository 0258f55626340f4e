"""
Command line access to data files.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from copy import deepcopy

import asyncclick as click
import simplejson as json
from attrs import define, field

from .codec import NoCodecError, codec_names, get_codec
from .config import load_cfg
from .exc import DMapError
from .node import DMap, parse_stream
from .path import P, Path, path_eval
from .yaml import yprint

__all__ = ["cli", "cmd"]

logger = logging.getLogger(__name__)


@define
class Obj:
    "Command context"

    cfg: DMap
    verbose: int = 1
    codec: str = field(default=None)
    format: str = field(default=None)


class PathParam(click.ParamType):
    "A path in dotted notation"

    name = "path"

    def convert(self, value, param, ctx):  # noqa: D102
        try:
            return P(value)
        except SyntaxError as exc:
            self.fail(str(exc), param, ctx)


_decoder = click.Choice(codec_names, case_sensitive=False)


def setup_logging(cfg: DMap, verbose: int):
    """
    Configure logging from the config's "logging" section.

    The root level depends on the verbosity.
    """
    if cfg.exists("logging"):
        lcfg = deepcopy(cfg.get_map_ii("logging"))
    else:
        lcfg = {}
    lcfg.setdefault("version", 1)
    lcfg.setdefault("root", {})["level"] = (
        "DEBUG" if verbose > 2 else "INFO" if verbose > 1 else "WARNING" if verbose else "ERROR"
    )
    logging.config.dictConfig(lcfg)
    logging.captureWarnings(verbose > 0)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--verbose", count=True, help="Be more verbose. Can be used multiple times.")
@click.option("-q", "--quiet", count=True, help="Be less verbose. Opposite of '--verbose'.")
@click.option(
    "-c",
    "--cfg",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Configuration file (YAML). Can be used multiple times.",
)
@click.pass_context
async def cli(ctx, verbose, quiet, cfg):
    """
    Access data in JSON, YAML or msgpack files by path.

    Paths use the MoaT dotted notation: "root.contents:1" addresses
    element 1 of the "contents" list within "root". Use "path -d" to
    check how your path is interpreted.
    """
    verbose = max(0, 1 + verbose - quiet)
    cfg = load_cfg(*cfg)
    setup_logging(cfg, verbose)
    codec = cfg.get("dmap", "codec").value
    try:
        get_codec(codec)
    except NoCodecError:
        raise click.UsageError(f"Config: unknown codec {codec!r} in dmap.codec") from None
    ctx.obj = Obj(
        cfg=cfg,
        verbose=verbose,
        codec=codec,
        format=cfg.get("dmap", "format").value,
    )


def _load(obj, decoder, file):
    codec = get_codec(decoder or obj.codec)
    name = getattr(file, "name", "?")
    logger.debug("Reading %s as %s", name, codec.name)
    try:
        return parse_stream(file, codec)
    except codec.errors as exc:
        print(f"{name}: cannot decode as {codec.name}: {exc}", file=sys.stderr)
        sys.exit(1)


def _emit(value, fmt):
    if fmt == "yaml":
        yprint(value, sys.stdout)
    elif fmt == "json":
        try:
            res = json.dumps(value, indent="  ")
        except (TypeError, ValueError) as exc:
            print(f"Cannot represent as JSON: {exc}", file=sys.stderr)
            sys.exit(1)
        print(res)
    elif fmt == "repr":
        print(repr(value))
    else:
        raise click.UsageError(f"Unknown output format: {fmt!r}")


@cli.command("get")
@click.option("-d", "--decoder", type=_decoder, help="Source format")
@click.option("-f", "--format", "fmt", type=click.Choice(["yaml", "json", "repr"]), help="Output format")
@click.argument("file", type=click.File("rb"))
@click.argument("path", type=PathParam(), required=False, default=":")
@click.pass_obj
async def get_(obj, decoder, fmt, file, path):
    """
    Print the data at PATH in FILE.

    FILE may be "-" for stdin. PATH defaults to the whole file.
    """
    data = _load(obj, decoder, file)
    try:
        res = data.get(*path)
    except DMapError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    _emit(res.value, fmt or obj.format)


@cli.command("exists")
@click.option("-d", "--decoder", type=_decoder, help="Source format")
@click.argument("file", type=click.File("rb"))
@click.argument("path", type=PathParam())
@click.pass_obj
async def exists_(obj, decoder, file, path):
    """
    Check whether there's data at PATH in FILE.

    Prints True or False. The exit code is 1 if the path doesn't exist.
    """
    data = _load(obj, decoder, file)
    res = data.exists(*path)
    print(res)
    if not res:
        sys.exit(1)


@cli.command("path", help=Path.__doc__, no_args_is_help=True)
@click.option(
    "-e",
    "--encode",
    is_flag=True,
    help="evaluate a Python expr and encode to a pathstr",
)
@click.option("-d", "--decode", is_flag=True, help="decode a path to a list")
@click.argument("path", nargs=-1)
async def path_(encode, decode, path):
    """Explain/test DMap paths"""
    if not encode and not decode:
        raise click.UsageError("Need -e or -d option.")
    elif not decode:
        try:
            path = path_eval(" ".join(path))
        except Exception as exc:  # pylint:disable=broad-exception-caught
            raise click.UsageError(f"Cannot evaluate: {exc!r}") from None
        if not isinstance(path, (list, tuple)):
            path = (path,)
        print(Path(*path))
    elif encode:
        raise click.UsageError("encode and decode at the same time??")
    else:
        for p in path:
            try:
                p = P(p)  # noqa:PLW2901
            except SyntaxError as exc:
                raise click.UsageError(str(exc)) from None
            print(repr(list(p)), " ".join(k.value for k in p.kinds()))


@cli.command("cfg")
@click.argument("path", nargs=-1, type=PathParam())
@click.pass_obj
async def cfg_(obj, path):
    """Emit the current configuration as YAML.

    You can limit the output by path elements.
    E.g., "cfg dmap.codec" prints 'json'.

    Dump the whole config with "cfg :" or without arguments.
    """
    delim = False
    for p in path or (P(":"),):
        if delim:
            print("---")
        try:
            v = obj.cfg.get(*p)
        except DMapError as exc:
            print("Unknown:", p, exc, file=sys.stderr)
            sys.exit(1)
        yprint(v.value, sys.stdout)
        delim = True


def cmd():
    "The command line entry point"
    return cli(_anyio_backend="trio")  # pylint: disable=unexpected-keyword-arg
