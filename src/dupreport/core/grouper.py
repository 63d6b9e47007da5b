"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Turns the size index into hashing candidates and hash results into duplicate groups.
Insertion order is preserved everywhere so report output follows discovery order.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar
from dupreport.core.models import HashGroups, HashResult, SizeGroups

T = TypeVar("T")


class FileGrouperImpl:
    """Order-preserving grouping helpers used by the report builder."""

    @staticmethod
    def extract_candidates(size_groups: SizeGroups) -> List[str]:
        """
        Concatenate, in bucket-then-member order, every size bucket with 2+ files.
        A file with a unique size cannot have a duplicate and is never hashed.
        """
        candidates = []
        for files in size_groups.values():
            if len(files) >= 2:
                candidates.extend(files)
        return candidates

    @staticmethod
    def group_by_hash(results: Iterable[Optional[HashResult]]) -> HashGroups:
        """
        Groups hash results by digest. Empty slots (failed files) are skipped.
        Unlike the size index, single-member groups are kept; callers filter them.
        """
        return FileGrouperImpl._group_by(
            (r for r in results if r is not None),
            key_func=lambda r: r.hash,
            value_func=lambda r: r.file_path,
        )

    @staticmethod
    def duplicate_groups(hash_groups: HashGroups) -> HashGroups:
        """Only the groups that actually contain duplicates (2+ files)."""
        return {key: files for key, files in hash_groups.items() if len(files) >= 2}

    @staticmethod
    def _group_by(
            items: Iterable[T],
            key_func: Callable[[T], Any],
            value_func: Callable[[T], Any]
    ) -> Dict[Any, List[Any]]:
        """
        Helper method to group items by any computed key.
        Keys keep first-seen order and members keep iteration order.
        """
        groups: Dict[Any, List[Any]] = {}
        for item in items:
            groups.setdefault(key_func(item), []).append(value_func(item))
        return groups
