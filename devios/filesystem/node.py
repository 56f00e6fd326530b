"""
Node Module

Implements the node abstraction for the virtual file system.
A node is either a file holding per-locale text lines or a directory
holding named children; both carry permission and ownership metadata.

Author: Deviser
Version: 1.0.0
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Iterator, List

from devios.i18n import Locale, DEFAULT_LOCALE


class NodeType(Enum):
    """Types of nodes."""
    FILE = 1
    DIRECTORY = 2


PERMISSION_TEMPLATE = "rwxrwxrwx"
DEFAULT_FILE_PERMISSIONS = "rw-r--r--"
DEFAULT_DIR_PERMISSIONS = "rwxr-xr-x"


def validate_permissions(permissions: str) -> None:
    """
    Check a permission string such as ``rwxr-xr-x``.

    Raises:
        ValueError: If it is not 9 characters of r/w/x/- in triplet order
    """
    if not isinstance(permissions, str) or len(permissions) != len(PERMISSION_TEMPLATE):
        raise ValueError(f"Permissions must be exactly 9 characters: {permissions!r}")

    for position, (char, expected) in enumerate(zip(permissions, PERMISSION_TEMPLATE)):
        if char not in (expected, '-'):
            raise ValueError(
                f"Invalid permission character {char!r} at position {position} in {permissions!r}"
            )


def validate_name(name: str) -> None:
    """Child names are non-empty and contain no path separator."""
    if not isinstance(name, str) or not name:
        raise ValueError("Node name must be a non-empty string")
    if '/' in name:
        raise ValueError(f"Node name must not contain '/': {name!r}")


@dataclass
class Node:
    """
    A file or directory in the virtual file system.

    One dataclass tagged by ``node_type``: files use ``lines``,
    directories use ``children``. The unused field stays empty.

    Files keep one list of lines per locale. The default locale variant is
    mandatory and is returned for any locale without its own variant.
    """

    node_type: NodeType
    permissions: str
    owner: str
    group: str
    lines: dict[Locale, List[str]] = field(default_factory=dict)
    children: dict[str, 'Node'] = field(default_factory=dict)
    modified_at: float = field(default_factory=time.time)

    def __post_init__(self):
        validate_permissions(self.permissions)

        if self.node_type == NodeType.FILE:
            if self.children:
                raise ValueError("A file cannot have children")
            if DEFAULT_LOCALE not in self.lines:
                raise ValueError(f"A file needs a {DEFAULT_LOCALE.value} content variant")
            for locale, variant in self.lines.items():
                if not isinstance(locale, Locale):
                    raise ValueError(f"Content variant key must be a Locale: {locale!r}")
                if not all(isinstance(line, str) for line in variant):
                    raise ValueError("File content must be a list of strings")
        else:
            if self.lines:
                raise ValueError("A directory cannot have content lines")
            for name in self.children:
                validate_name(name)

    @classmethod
    def file(
        cls,
        lines: List[str],
        owner: str,
        group: str,
        permissions: str = DEFAULT_FILE_PERMISSIONS,
        translations: Optional[dict[Locale, List[str]]] = None
    ) -> 'Node':
        """
        Build a file node.

        Args:
            lines: Default-locale content
            owner: Owning user
            group: Owning group
            permissions: rwx string
            translations: Extra per-locale variants
        """
        variants = {DEFAULT_LOCALE: list(lines)}
        for locale, variant in (translations or {}).items():
            variants[locale] = list(variant)
        return cls(NodeType.FILE, permissions, owner, group, lines=variants)

    @classmethod
    def directory(
        cls,
        children: dict[str, 'Node'],
        owner: str,
        group: str,
        permissions: str = DEFAULT_DIR_PERMISSIONS
    ) -> 'Node':
        """Build a directory node."""
        return cls(NodeType.DIRECTORY, permissions, owner, group, children=dict(children))

    @property
    def is_directory(self) -> bool:
        return self.node_type == NodeType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.node_type == NodeType.FILE

    def content(self, locale: Locale) -> List[str]:
        """
        Get the file lines for a locale.

        Returns an empty list for directories.
        """
        if not self.is_file:
            return []
        return list(self.lines.get(locale, self.lines[DEFAULT_LOCALE]))

    def child(self, name: str) -> Optional['Node']:
        """Get a direct child by name."""
        if not self.is_directory:
            return None
        return self.children.get(name)

    def walk(self, path: str = '~') -> Iterator[tuple[str, 'Node']]:
        """Yield ``(path, node)`` for this node and every descendant."""
        yield path, self
        for name in sorted(self.children):
            yield from self.children[name].walk(f"{path}/{name}")

    def snapshot(self) -> tuple:
        """
        Structural, comparable representation of this subtree.

        Two snapshots are equal exactly when the subtrees have the same
        shape, metadata and content.
        """
        return (
            self.node_type.name,
            self.permissions,
            self.owner,
            self.group,
            self.modified_at,
            tuple(
                (locale.value, tuple(variant))
                for locale, variant in sorted(self.lines.items(), key=lambda item: item[0].value)
            ),
            tuple(
                (name, self.children[name].snapshot())
                for name in sorted(self.children)
            ),
        )
