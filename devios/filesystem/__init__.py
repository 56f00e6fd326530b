"""
DeviOS Virtual File System Module

Provides the in-memory portfolio file system:
- Hierarchical directory structure
- Per-locale file content
- rwx owner/group/other permissions
- Path resolution
"""

from .node import Node, NodeType, validate_permissions, validate_name
from .path_resolver import PathResolver, ParsedPath, ResolvedPath, ROOT
from .permissions import PermissionEvaluator, Actor, AccessKind
from .vfs import VirtualFileSystem
from .content import build_tree

__all__ = [
    # Node
    'Node',
    'NodeType',
    'validate_permissions',
    'validate_name',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    'ResolvedPath',
    'ROOT',
    # Permissions
    'PermissionEvaluator',
    'Actor',
    'AccessKind',
    # VFS
    'VirtualFileSystem',
    'build_tree',
]
