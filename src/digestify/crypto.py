"""Hex digests of text for scripts.

Each function hashes the UTF-8 bytes of a string and returns the digest as
a lowercase hexadecimal string, most significant byte first.  Nothing else
is done to the input: no trimming, case folding or Unicode normalisation.

The functions can be imported by name or used through the module::

    from digestify.crypto import md5, sha1
    md5("abc")  # '900150983cd24fb0d6963f7d28e17f72'

    from digestify import crypto
    crypto.sha1("abc")  # 'a9993e364706816aba3e25717850c26c9cd0d89d'

These digests are conveniences for checksums, cache keys and request
signing schemes that demand them.  MD5 and SHA-1 are broken against an
adversary and must **not** be used for security purposes.
"""

from __future__ import annotations

import hashlib

from Cryptodome.Hash import RIPEMD160, SHA512

from digestify.errors import DigestifyEncodingError, DigestifyInputTypeError

__all__ = [
    "md5",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512_224",
    "sha512_256",
    "ripemd160",
]


def encode_input(text: str) -> bytes:
    """Return the UTF-8 bytes of *text*.

    Raises
    ------
    DigestifyInputTypeError
        If *text* is not a ``str``.
    DigestifyEncodingError
        If *text* contains code points UTF-8 cannot represent (lone
        surrogates).
    """
    if not isinstance(text, str):
        raise DigestifyInputTypeError(
            f"digest input must be str, not {type(text).__name__}",
            context={"expected": "str", "received": type(text).__name__},
        )
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DigestifyEncodingError(
            f"digest input is not encodable as UTF-8 at position {exc.start}",
            context={
                "encoding": exc.encoding,
                "start": exc.start,
                "end": exc.end,
                "reason": exc.reason,
            },
            cause=exc,
        ) from exc


# ---------------------------------------------------------------------------
# hashlib-backed digests (algorithms_guaranteed)
# ---------------------------------------------------------------------------

def md5(text: str) -> str:
    """Return the hex-encoded MD5 digest of *text*.

    Parameters
    ----------
    text:
        Arbitrary string to hash.  Encoded as UTF-8.

    Returns
    -------
    str
        A 32-character lowercase hexadecimal string.

    Examples
    --------
    >>> md5("")
    'd41d8cd98f00b204e9800998ecf8427e'
    >>> md5("hello world")
    '5eb63bbbe01eeed093cb22bb8f5acdc3'
    """
    return hashlib.md5(encode_input(text), usedforsecurity=False).hexdigest()


def sha1(text: str) -> str:
    """Return the hex-encoded SHA-1 digest of *text*.

    Parameters
    ----------
    text:
        Arbitrary string to hash.  Encoded as UTF-8.

    Returns
    -------
    str
        A 40-character lowercase hexadecimal string.

    Examples
    --------
    >>> sha1("")
    'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    >>> sha1("hello world")
    '2aae6c35c94fcfb415dbe95f408b9ce91ee846ed'
    """
    return hashlib.sha1(encode_input(text), usedforsecurity=False).hexdigest()


def sha224(text: str) -> str:
    """Return the hex-encoded SHA-224 digest of *text* (56 characters)."""
    return hashlib.sha224(encode_input(text)).hexdigest()


def sha256(text: str) -> str:
    """Return the hex-encoded SHA-256 digest of *text* (64 characters).

    >>> sha256("abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    return hashlib.sha256(encode_input(text)).hexdigest()


def sha384(text: str) -> str:
    """Return the hex-encoded SHA-384 digest of *text* (96 characters)."""
    return hashlib.sha384(encode_input(text)).hexdigest()


def sha512(text: str) -> str:
    """Return the hex-encoded SHA-512 digest of *text* (128 characters)."""
    return hashlib.sha512(encode_input(text)).hexdigest()


# ---------------------------------------------------------------------------
# pycryptodomex-backed digests
#
# OpenSSL builds may omit these, so hashlib.new() cannot be relied on.
# ---------------------------------------------------------------------------

def sha512_224(text: str) -> str:
    """Return the hex-encoded SHA-512/224 digest of *text* (56 characters)."""
    return SHA512.new(encode_input(text), truncate="224").hexdigest()


def sha512_256(text: str) -> str:
    """Return the hex-encoded SHA-512/256 digest of *text* (64 characters)."""
    return SHA512.new(encode_input(text), truncate="256").hexdigest()


def ripemd160(text: str) -> str:
    """Return the hex-encoded RIPEMD-160 digest of *text* (40 characters)."""
    return RIPEMD160.new(encode_input(text)).hexdigest()
