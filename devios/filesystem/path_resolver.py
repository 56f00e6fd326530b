"""
Path Resolver Module

Handles path resolution in the virtual file system. Paths are rooted at
the home sentinel ``~``; ``/`` is an alias for it.

Author: Deviser
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional, List

from .node import Node


ROOT = '~'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return '/'.join([ROOT] + self.components)
        return '/'.join(self.components) if self.components else '.'


@dataclass
class ResolvedPath:
    """
    Outcome of a successful resolution.

    Attributes:
        segments: Components below the root, ``..`` already applied
        node: The node the path names
    """
    segments: List[str]
    node: Node

    @property
    def path(self) -> str:
        """Canonical form, e.g. ``~/about/bio.txt``."""
        return PathResolver.format(self.segments)

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ROOT


class PathResolver:
    """
    Resolves path expressions against a tree.

    Handles:
    - Absolute paths (``/x``, ``~``, ``~/x``)
    - Relative paths against a current directory
    - . and .. components (.. stops at the root)

    Resolution only reads the tree and never touches session state.
    """

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith('/') or path == ROOT or path.startswith(ROOT + '/')

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        A leading ``~`` is the root sentinel, not a component.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = PathResolver.is_absolute(path)
        if path == ROOT or path.startswith(ROOT + '/'):
            path = path[len(ROOT):]

        # Split and filter empty components
        components = [c for c in path.split('/') if c and c != '.']

        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def normalize(components: List[str]) -> List[str]:
        """Apply .. components; popping past the root is a no-op."""
        result: List[str] = []

        for component in components:
            if component == '..':
                if result:
                    result.pop()
            else:
                result.append(component)

        return result

    @staticmethod
    def format(segments: List[str]) -> str:
        """Render root-relative segments in canonical ``~/a/b`` form."""
        return '/'.join([ROOT] + list(segments))

    @staticmethod
    def absolute_components(path: str, cwd: str = ROOT) -> List[str]:
        """Components of ``path`` from the root, before normalization."""
        parsed = PathResolver.parse(path)

        if parsed.is_absolute:
            return parsed.components

        return PathResolver.parse(cwd).components + parsed.components

    @staticmethod
    def resolve(root: Node, path: str, cwd: str = ROOT) -> Optional[ResolvedPath]:
        """
        Resolve a path relative to a current working directory.

        Every intermediate component must name a directory; a file may
        only appear as the final component.

        Args:
            root: Tree root directory
            path: Path expression
            cwd: Canonical current directory

        Returns:
            ResolvedPath, or None if any component fails to match
        """
        segments: List[str] = []
        trail: List[Node] = [root]

        for component in PathResolver.absolute_components(path, cwd):
            current = trail[-1]

            if not current.is_directory:
                return None

            if component == '..':
                if segments:
                    segments.pop()
                    trail.pop()
                continue

            child = current.child(component)
            if child is None:
                return None

            segments.append(component)
            trail.append(child)

        return ResolvedPath(segments=segments, node=trail[-1])

    @staticmethod
    def top_levels(path: str, cwd: str = ROOT) -> set[str]:
        """
        Names entered directly below the root while walking a path.

        ``about/..`` passes through ``about`` even though it resolves to
        the root, so ``about`` is included.

        Args:
            path: Path expression
            cwd: Canonical current directory

        Returns:
            Set of first-level names visited
        """
        segments: List[str] = []
        visited: set[str] = set()

        for component in PathResolver.absolute_components(path, cwd):
            if component == '..':
                if segments:
                    segments.pop()
                continue

            segments.append(component)
            if len(segments) == 1:
                visited.add(component)

        return visited
