"""
Virtual File System (VFS) Module

Read-only view over the portfolio tree:
- Canonical path lookup
- Path resolution against a current directory
- Sorted directory listings with hidden-entry filtering
- Structural snapshots for comparison

The tree shape is fixed at construction. Commands that would create or
modify entries only validate their preconditions.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, Any, Iterable, List

from .node import Node
from .path_resolver import PathResolver, ResolvedPath, ROOT
from .content import build_tree
from devios.logger import get_logger


class VirtualFileSystem:
    """
    Virtual File System.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> vfs.lookup('~/about/bio.txt').is_file
        True
        >>> [name for name, _ in vfs.readdir(vfs.root)]
        ['about', 'contact', 'projects', 'skills', 'resume.pdf']
    """

    def __init__(self, root: Optional[Node] = None, owner: str = 'deviser', group: str = 'users'):
        self._logger = get_logger('filesystem')
        self._root = root if root is not None else build_tree(owner, group)

        if not self._root.is_directory:
            raise ValueError("The filesystem root must be a directory")

        stats = self.get_stats()
        self._logger.debug(
            "Virtual filesystem initialized",
            context={'files': stats['files'], 'directories': stats['directories']}
        )

    @property
    def root(self) -> Node:
        return self._root

    def resolve(self, path: str, cwd: str = ROOT) -> Optional[ResolvedPath]:
        """
        Resolve a path expression relative to ``cwd``.

        Args:
            path: Path expression
            cwd: Canonical current directory

        Returns:
            ResolvedPath or None if not found
        """
        return PathResolver.resolve(self._root, path, cwd)

    def lookup(self, path: str) -> Optional[Node]:
        """
        Get the node at an absolute path.

        Args:
            path: Canonical ``~``-rooted path (``/`` is accepted too)

        Returns:
            Node or None if not found
        """
        if not PathResolver.is_absolute(path):
            return None

        resolved = self.resolve(path)
        return resolved.node if resolved else None

    @staticmethod
    def list_children(directory: Node) -> dict[str, Node]:
        """
        Get the children of a directory.

        Raises:
            ValueError: If the node is a file
        """
        if not directory.is_directory:
            raise ValueError("Not a directory")
        return dict(directory.children)

    @staticmethod
    def readdir(
        directory: Node,
        show_hidden: bool = False,
        hide: Iterable[str] = ()
    ) -> List[tuple[str, Node]]:
        """
        List a directory, directories first, then by name.

        Args:
            directory: Directory node
            show_hidden: Include names starting with '.'
            hide: Names to leave out regardless of ``show_hidden``

        Returns:
            List of ``(name, node)`` pairs
        """
        hidden = set(hide)
        entries = [
            (name, node)
            for name, node in VirtualFileSystem.list_children(directory).items()
            if name not in hidden and (show_hidden or not name.startswith('.'))
        ]
        entries.sort(key=lambda entry: (not entry[1].is_directory, entry[0]))
        return entries

    def snapshot(self) -> tuple:
        """Structural representation of the whole tree."""
        return self._root.snapshot()

    def get_stats(self) -> dict[str, Any]:
        """Get filesystem statistics."""
        files = 0
        directories = 0
        for _, node in self._root.walk():
            if node.is_directory:
                directories += 1
            else:
                files += 1

        return {
            'files': files,
            'directories': directories,
        }
