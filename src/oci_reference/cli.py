#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from oci_reference import Digest, Reference, __version__, logger

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def format_json(data: Any) -> str:
    return json.dumps(data, indent=4)


def describe_reference(reference: Reference) -> dict[str, Any]:
    return {
        "registry": reference.registry,
        "repository": reference.repository,
        "tag": reference.tag,
        "digest": reference.digest,
        "resolved_registry": reference.resolve_registry(),
        "namespace": reference.namespace,
        "whole": reference.whole(),
        "fs_name": reference.fs_name,
    }


def describe_digest(digest: Digest) -> dict[str, Any]:
    return {
        "algorithm": str(digest.algorithm),
        "encoded": digest.encoded,
        "hexlen": digest.algorithm.digest_hexlen,
        "digest": str(digest),
    }


def main():
    parser = argparse.ArgumentParser(
        prog="oci-reference",
        description="Parse and normalize container image references and digests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
    oci-reference busybox
    oci-reference --json --mirror mirror.gcr.io kiwix/kiwix-tools:3.3.0
    oci-reference --digest sha256:6c3c624b58dbbcd3c0dd82b4c53f04194d1247c6eebdaab7c610cf7d66709b3b""",
    )

    parser.add_argument("-V", "--version", action="version", version=__version__)

    parser.add_argument(
        help="value to parse. An image reference in the "
        "[registry/]repository[:tag][@digest] format "
        "or, with --digest, an algorithm:encoded digest",
        dest="value",
    )

    parser.add_argument(
        "--digest",
        help="parse value as a standalone digest instead of an image reference",
        action="store_true",
        dest="digest",
    )

    parser.add_argument(
        "--mirror",
        help="registry mirror to resolve the reference through",
        dest="mirror",
    )

    parser.add_argument(
        "--json",
        help="print all parsed components as JSON",
        action="store_true",
        dest="json",
    )

    parser.add_argument(
        "--debug",
        help="Enable debug output",
        action="store_true",
        dest="debug",
    )

    args = parser.parse_args()
    if args.debug:
        logger.setLevel(logging.DEBUG)

    try:
        if args.digest:
            digest = Digest.parse(args.value)
            output = format_json(describe_digest(digest)) if args.json else str(digest)
        else:
            reference = Reference.parse(args.value)
            if args.mirror:
                reference.set_mirror_registry(args.mirror)
            output = (
                format_json(describe_reference(reference))
                if args.json
                else reference.whole()
            )
        print(output)
        sys.exit(0)
    except ValueError as exc:
        logger.error(str(exc))
        if args.debug:
            logger.exception(exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
