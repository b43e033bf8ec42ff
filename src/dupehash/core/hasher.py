"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content file hashing with pluggable hash algorithms.

The HasherImpl class streams a file through the algorithm chosen at construction
and returns the digest together with the untouched path.
"""

import hashlib
import logging

import xxhash

from dupehash.core.models import FileProperties, HashingAlgorithm
from dupehash.core.interfaces import Hasher, HashAlgorithm, HashObject

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"
    digest_size = 32

    def new(self) -> HashObject:
        return hashlib.sha256()


class Md5AlgorithmImpl(HashAlgorithm):
    name = "md5"
    digest_size = 16

    def new(self) -> HashObject:
        return hashlib.md5()


class XXHash128AlgorithmImpl(HashAlgorithm):
    name = "xxh128"
    digest_size = 16

    def new(self) -> HashObject:
        return xxhash.xxh128()


_ALGORITHMS = {
    HashingAlgorithm.SHA256: Sha256AlgorithmImpl,
    HashingAlgorithm.MD5: Md5AlgorithmImpl,
    HashingAlgorithm.XXH128: XXHash128AlgorithmImpl,
}


def create_algorithm(algorithm: HashingAlgorithm) -> HashAlgorithm:
    """Returns the implementation for a HashingAlgorithm member."""
    try:
        return _ALGORITHMS[algorithm]()
    except KeyError:
        raise ValueError(f"Unexpected hashing algorithm: {algorithm!r}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    The algorithm is fixed for the lifetime of the instance.
    """

    def __init__(self, algorithm: HashAlgorithm):
        self._algorithm = algorithm

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    def process_file(self, path: str) -> FileProperties:
        """
        Computes the digest of the whole file.
        Raises OSError if the file cannot be opened or read; no partial result is returned.
        """
        hash_object = self._algorithm.new()
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                hash_object.update(chunk)
        digest = hash_object.digest()
        logger.debug(f"{self._algorithm.name} {digest.hex()} {path}")
        return FileProperties(path=path, digest=digest)
