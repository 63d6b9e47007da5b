"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
presentation layers (terminal, Qt) and hash algorithms can be swapped freely.

Key Components:
---------------
- ProgressReporter: Passive observer called by the pipeline at lifecycle points.
- HashAlgorithm: Factory for an incremental hash object (e.g., SHA-256).
- Hasher: Interface for computing the full content digest of a file.
"""

from typing import Optional, Protocol


class ProgressReporter(Protocol):
    """
    Lifecycle hooks the pipeline calls while scanning and hashing.

    The pipeline never inspects return values and does not rate-limit its calls;
    implementations are responsible for throttling their own visible output.
    """

    def start_scanning(self) -> None:
        """Directory scanning begins."""
        ...

    def update_scanning(self, files_found: int) -> None:
        """Running count of files accepted into size buckets."""
        ...

    def end_scanning(self, total_files: int) -> None:
        """Directory scanning finished with the final file count."""
        ...

    def start_hashing(self, total_files: int) -> None:
        """Hashing of candidate files begins."""
        ...

    def update_hashing(self, completed: int, total: int, current_file: Optional[str] = None) -> None:
        """One more candidate finished hashing (successfully or not)."""
        ...

    def end_hashing(self) -> None:
        """All candidates have been processed."""
        ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different collision-resistant functions (SHA-256, BLAKE2b)
    without affecting the rest of the pipeline.
    """
    name: str

    def new(self):
        """Returns a fresh hashlib-style object supporting update() and hexdigest()."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def compute_full_hash(self, file_path: str) -> str: ...
