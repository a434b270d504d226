"""Algorithm catalogue shared by the facade and the digester."""

from __future__ import annotations

from enum import Enum


class Algorithm(str, Enum):
    """Digest algorithms exposed by :mod:`digestify.crypto`.

    The value is the name of the facade function that computes it.
    """

    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA512_224 = "sha512_224"
    SHA512_256 = "sha512_256"
    RIPEMD160 = "ripemd160"

    @property
    def digest_size(self) -> int:
        """Length of the raw digest in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the lowercase hex string returned by the facade."""
        return 2 * _DIGEST_SIZES[self]


_DIGEST_SIZES: dict[Algorithm, int] = {
    Algorithm.MD5: 16,
    Algorithm.SHA1: 20,
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
    Algorithm.SHA512_224: 28,
    Algorithm.SHA512_256: 32,
    Algorithm.RIPEMD160: 20,
}
