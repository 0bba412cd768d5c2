# Copyright 2026 The Multihashing Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The main entry-point for the multihashing package."""

import base64
import binascii
import logging
import pathlib
import sys

import click

import multihashing
from multihashing import _registry


# Decorator for the commonly used argument for the file to hash.
_path_argument = click.argument("path", type=pathlib.Path, metavar="PATH")


# Decorator for the commonly used argument for an encoded multihash.
_multihash_argument = click.argument("multihash", type=str, metavar="MULTIHASH")


# Decorator for the commonly used option to select the text encoding of
# multihash values.
_format_option = click.option(
    "--format",
    "encoding",
    type=click.Choice(["hex", "base64"], case_sensitive=False),
    default="hex",
    show_default=True,
    help="Text encoding of multihash values.",
)


# Decorator for the commonly used option to set the file chunk size.
_chunk_size_option = click.option(
    "--chunk_size",
    type=click.IntRange(min=1),
    metavar="BYTES",
    default=multihashing.hashing.DEFAULT_CHUNK_SIZE,
    show_default=True,
    help="Amount of the file to read at once.",
)


def _format_multihash(value: bytes, encoding: str) -> str:
    if encoding.lower() == "base64":
        return base64.b64encode(value).decode("ascii")
    return value.hex()


def _parse_multihash(value: str, encoding: str) -> bytes:
    try:
        if encoding.lower() == "base64":
            return base64.b64decode(value, validate=True)
        return bytes.fromhex(value)
    except (ValueError, binascii.Error) as err:
        raise click.BadParameter(
            f"not a {encoding} encoded value: {err}", param_hint="MULTIHASH"
        ) from err


@click.group(
    context_settings=dict(help_option_names=["-h", "--help"]),
    epilog=(
        "Hash functions can be named by their hashlib name (e.g., sha256) or "
        "by their multihash name (e.g., sha2_256)."
    ),
)
@click.version_option(multihashing.__version__, "--version")
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="WARNING",
    show_default=True,
    metavar="LEVEL",
    envvar="MULTIHASHING_LOG_LEVEL",
    help="Set the logging level. This can also be set via the "
    "MULTIHASHING_LOG_LEVEL env var.",
)
def main(log_level: str) -> None:
    """Create, decode and verify multihash values.

    Use each subcommand's `--help` option for details on each mode.
    """
    logging.basicConfig(
        format="%(message)s", level=getattr(logging, log_level.upper())
    )


@main.command(name="hash")
@_path_argument
@click.option(
    "--hash_function",
    type=str,
    metavar="NAME",
    default="sha2_256",
    show_default=True,
    help="The hash function to use.",
)
@click.option(
    "--length",
    type=click.IntRange(min=0),
    metavar="BYTES",
    help="Truncate the digest to this many bytes.",
)
@_chunk_size_option
@_format_option
def _hash(
    path: pathlib.Path,
    hash_function: str,
    length: int | None,
    chunk_size: int,
    encoding: str,
) -> None:
    """Hash a file.

    Hashes the contents of the file at PATH and prints the resulting
    multihash. With `--length`, the digest is truncated to its first BYTES
    bytes.
    """
    try:
        multihash = (
            multihashing.hashing.Config()
            .use_hash_function(hash_function)
            .set_truncation_length(length)
            .set_chunk_size(chunk_size)
            .hash_file(path)
        )
    except (multihashing.MultihashError, OSError) as err:
        click.echo(f"Hashing failed with error: {err}", err=True)
        sys.exit(1)

    click.echo(_format_multihash(multihash, encoding))


@main.command(name="decode")
@_multihash_argument
@_format_option
def _decode(multihash: str, encoding: str) -> None:
    """Decode a multihash.

    Prints the hash function code and name, the digest length and the digest
    (in hex) of MULTIHASH.
    """
    value = _parse_multihash(multihash, encoding)
    try:
        decoded = multihashing.decode(value)
    except multihashing.MultihashError as err:
        click.echo(f"Decoding failed with error: {err}", err=True)
        sys.exit(1)

    click.echo(f"code: 0x{decoded.code:02x}")
    click.echo(f"name: {decoded.name}")
    click.echo(f"length: {decoded.length}")
    click.echo(f"digest: {decoded.digest_hex}")


@main.command(name="verify")
@_multihash_argument
@_path_argument
@_chunk_size_option
@_format_option
def _verify(
    multihash: str, path: pathlib.Path, chunk_size: int, encoding: str
) -> None:
    """Verify a file against a multihash.

    Rehashes the file at PATH with the hash function and length recorded in
    MULTIHASH. Exits with a non-zero status if they don't match.
    """
    value = _parse_multihash(multihash, encoding)
    try:
        matches = multihashing.verify_file(value, path, chunk_size=chunk_size)
    except (multihashing.MultihashError, OSError) as err:
        click.echo(f"Verification failed with error: {err}", err=True)
        sys.exit(1)

    if not matches:
        click.echo("Verification failed: digest mismatch", err=True)
        sys.exit(1)

    click.echo("Verification succeeded")


@main.command(name="algorithms")
def _algorithms() -> None:
    """List the supported hash functions."""
    for algorithm in _registry.algorithms():
        status = "" if algorithm.implemented else " (unimplemented)"
        click.echo(
            f"0x{algorithm.code:02x} {algorithm.name} "
            f"[{algorithm.native_id}] {algorithm.default_length}{status}"
        )
