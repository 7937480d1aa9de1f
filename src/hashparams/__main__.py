import argparse
import json
import logging
import pathlib
import sys

import yaml

from . import __version__ as hashparamsVersion
from .core.classes import SynchronizerOptions, structure, unstructure
from .core.codec import ARRAY_SEPARATOR, createLink, decode, encode, getViewPath
from .core.store import ParameterStore
from .core.values import typeCast
from .locations.memory import MemoryLocation

logger = logging.getLogger(__name__)

levelNamesMapping = logging.getLevelNamesMapping()

sortedlevelNames = [
    name for name, value in sorted(levelNamesMapping.items(), key=lambda item: item[1])
]


def yaml_or_json(path):
    path = pathlib.Path(path)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"File not found: {path!r}")
    contents = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(contents)
    else:
        return yaml.safe_load(contents)


def key_value(text):
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    if ARRAY_SEPARATOR in value:
        return key, [typeCast(item) for item in value.split(ARRAY_SEPARATOR)]
    return key, typeCast(value)


def location_url(url):
    try:
        return MemoryLocation.fromURL(url)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid URL {url!r}: {e}")


def fragment_or_url(text):
    if "://" in text:
        text = location_url(text).getHash()
    return text.removeprefix("#")


def decodeCommand(args, options):
    fragment = args.fragment
    result = {
        "viewPath": getViewPath(fragment),
        "params": unstructure(decode(fragment)),
    }
    print(json.dumps(result, indent=2))


def encodeCommand(args, options):
    print(encode(dict(args.params)))


def linkCommand(args, options):
    print(createLink(args.path, dict(args.params)))


def setCommand(args, options):
    location = args.url
    store = ParameterStore(location, options=options)
    store.update(dict(args.params))
    print(location.href)


def removeCommand(args, options):
    location = args.url
    store = ParameterStore(location, options=options)
    for key in args.keys:
        if not store.has(key):
            logger.info(f"parameter {key!r} was not set")
        store.remove(key)
    print(location.href)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        prog="hashparams",
        description="Read and write typed parameters in URL fragments",
    )
    parser.add_argument(
        "--config",
        type=yaml_or_json,
        help="A YAML or JSON file with synchronizer options",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=sortedlevelNames,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=hashparamsVersion,
        help="Show the version number and exit",
    )

    subParsers = parser.add_subparsers(required=True)

    decodeParser = subParsers.add_parser("decode", help="Decode a fragment or URL")
    decodeParser.add_argument("fragment", type=fragment_or_url)
    decodeParser.set_defaults(command=decodeCommand)

    encodeParser = subParsers.add_parser("encode", help="Build a parameter string")
    encodeParser.add_argument("params", nargs="*", type=key_value)
    encodeParser.set_defaults(command=encodeCommand)

    linkParser = subParsers.add_parser("link", help="Build a fragment link")
    linkParser.add_argument("path")
    linkParser.add_argument("params", nargs="*", type=key_value)
    linkParser.set_defaults(command=linkCommand)

    setParser = subParsers.add_parser("set", help="Set parameters on a URL")
    setParser.add_argument("url", type=location_url)
    setParser.add_argument("params", nargs="+", type=key_value)
    setParser.set_defaults(command=setCommand)

    removeParser = subParsers.add_parser("remove", help="Remove parameters from a URL")
    removeParser.add_argument("url", type=location_url)
    removeParser.add_argument("keys", nargs="+")
    removeParser.set_defaults(command=removeCommand)

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(name)-17s %(levelname)-8s %(message)s",
        level=levelNamesMapping[args.log_level],
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    options = structure(args.config or {}, SynchronizerOptions)
    args.command(args, options)


if __name__ == "__main__":
    main()
