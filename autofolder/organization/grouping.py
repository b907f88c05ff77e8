"""
Prefix-based grouping of file names.

Clusters files incrementally by the longest common prefix of their names
(extension excluded). A group's key always equals the prefix shared by all
of its current members, so later files can shrink the key of a group that
was formed earlier.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

logger = logging.getLogger(__name__)

# Minimum shared prefix length for two names to end up in the same group
MIN_PREFIX_LENGTH = 3

# Characters trimmed from the end of a discovered prefix
BOUNDARY_CHARS = "-_ .()"

PathLike = Union[str, Path]


@dataclass
class FileGroup:
    """A cluster of files sharing a name prefix."""

    index: int
    key: str
    members: List[PathLike] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)


def common_prefix(a: str, b: str) -> str:
    """
    Longest common prefix of two strings, trimmed of boundary punctuation.

    Comparison is ordinal and case-sensitive. An empty result means there is
    no meaningful match.

    Args:
        a: First string
        b: Second string

    Returns:
        Shared prefix without trailing ``-``, ``_``, space, ``.``, ``(`` or ``)``
    """
    length = 0
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            break
        length += 1

    return a[:length].rstrip(BOUNDARY_CHARS)


def base_name(path: PathLike) -> str:
    """File name without its extension."""
    return Path(path).stem


def build_groups(paths: Iterable[PathLike]) -> List[FileGroup]:
    """
    Cluster paths into groups by shared name prefix.

    Groups are kept in creation order and identified by a stable index, so
    re-keying a group never moves it.

    Args:
        paths: Paths in discovery order

    Returns:
        Groups in creation order, members in discovery order
    """
    groups: List[FileGroup] = []

    for path in paths:
        name = base_name(path)
        matched = None

        for group in groups:
            prefix = common_prefix(group.key, name)
            if len(prefix) >= MIN_PREFIX_LENGTH:
                if len(prefix) < len(group.key):
                    logger.debug(f"Re-keying group '{group.key}' to '{prefix}'")
                    group.key = prefix
                matched = group
                break

        if matched is None:
            # Names too short to match anything can still coincide exactly
            for group in groups:
                if group.key == name:
                    matched = group
                    break

        if matched is None:
            matched = FileGroup(index=len(groups), key=name)
            groups.append(matched)

        matched.members.append(path)

    return groups


def group_files_by_prefix(paths: Iterable[PathLike]) -> Dict[str, List[PathLike]]:
    """
    Group file paths by the common prefix of their base names.

    Args:
        paths: File paths, already filtered, in discovery order

    Returns:
        Ordered mapping of group key to the original paths in that group
    """
    grouped: Dict[str, List[PathLike]] = {}
    for group in build_groups(paths):
        grouped.setdefault(group.key, []).extend(group.members)
    return grouped
