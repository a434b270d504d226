"""digestify — text digests for load-test and automation scripts.

Public re-exports
-----------------

* **Digest functions:** :func:`md5`, :func:`sha1` and the SHA-2 /
  RIPEMD-160 companions, also reachable as the grouped :mod:`crypto`
  namespace
* **Instrumented client:** :class:`Digester`
* **Configuration:** :class:`DigestifyConfig`
* **Errors:** :class:`DigestifyError`, its subclasses and :class:`ErrorCode`
* **Models:** :class:`Algorithm`

Usage::

    from digestify import md5, sha1

    md5("abc")   # '900150983cd24fb0d6963f7d28e17f72'
    sha1("abc")  # 'a9993e364706816aba3e25717850c26c9cd0d89d'

    from digestify import crypto
    crypto.md5("")  # 'd41d8cd98f00b204e9800998ecf8427e'
"""

from __future__ import annotations

# ── Digest functions ────────────────────────────────────────────────────
from digestify import crypto
from digestify.crypto import (
    md5,
    ripemd160,
    sha1,
    sha224,
    sha256,
    sha384,
    sha512,
    sha512_224,
    sha512_256,
)

# ── Client ──────────────────────────────────────────────────────────────
from digestify.client import Digester

# ── Configuration ───────────────────────────────────────────────────────
from digestify.config import DigestifyConfig

# ── Errors ──────────────────────────────────────────────────────────────
from digestify.errors import (
    DigestifyEncodingError,
    DigestifyError,
    DigestifyInputTypeError,
    ErrorCode,
)

# ── Models ──────────────────────────────────────────────────────────────
from digestify.models import Algorithm

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Digest functions
    "crypto",
    "md5",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512_224",
    "sha512_256",
    "ripemd160",
    # Client
    "Digester",
    # Configuration
    "DigestifyConfig",
    # Errors
    "DigestifyError",
    "DigestifyEncodingError",
    "DigestifyInputTypeError",
    "ErrorCode",
    # Models
    "Algorithm",
]
