"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming file hashing with pluggable hash algorithms.

This implementation ensures predictable behavior:
- Files are read in fixed-size chunks, memory use does not grow with file size
- Read failures propagate to the caller (no silent empty digests)
- The digest is always the lower-case hex form of the algorithm output
"""

import hashlib
import logging
from typing import Optional

from dupreport.core.interfaces import HashAlgorithm, Hasher
from dupreport.core.models import ReportConfig

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    def new(self):
        return hashlib.sha256()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Folds the file into the accumulator chunk by chunk.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = ReportConfig.HASH_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_full_hash(self, file_path: str) -> str:
        """
        Computes the digest of the entire file.

        Raises:
            OSError: If the file cannot be opened or a read fails partway,
                     including a file that disappeared after it was scanned.
        """
        digest = self.algorithm.new()
        with open(file_path, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                digest.update(chunk)
        result = digest.hexdigest()
        logger.debug(f"{self.algorithm.name} {result} {file_path}")
        return result


_default_hasher = HasherImpl()


def hash_file(file_path: str, chunk_size: int = ReportConfig.HASH_CHUNK_SIZE) -> str:
    """SHA-256 hex digest of a file, streamed in chunk_size pieces."""
    if chunk_size == _default_hasher.chunk_size:
        return _default_hasher.compute_full_hash(file_path)
    return HasherImpl(chunk_size=chunk_size).compute_full_hash(file_path)
