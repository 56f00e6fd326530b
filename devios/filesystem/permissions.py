"""
Permission Evaluator

Classic rwx-triplet access checks for virtual file system nodes.

Author: Deviser
Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

from .node import Node


class AccessKind(Enum):
    """Access being requested, valued by its offset inside a triplet."""
    READ = 0
    WRITE = 1
    EXECUTE = 2

    @property
    def letter(self) -> str:
        return "rwx"[self.value]


@dataclass(frozen=True)
class Actor:
    """
    Identity used for permission evaluation.

    Attributes:
        name: User name compared against node owners
        groups: Group memberships compared against node groups
        privileged: Bypasses every check when True
    """
    name: str
    groups: FrozenSet[str] = field(default_factory=frozenset)
    privileged: bool = False


class PermissionEvaluator:
    """
    Decides whether an actor may access a node.

    A privileged actor is always allowed. Otherwise exactly one triplet is
    consulted, first match wins: owner if the actor owns the node, group if
    the actor belongs to the node's group, other in every remaining case.
    """

    OWNER = 0
    GROUP = 3
    OTHER = 6

    @staticmethod
    def triplet_offset(node: Node, actor: Actor) -> int:
        """Index of the first character of the triplet that applies."""
        if actor.name == node.owner:
            return PermissionEvaluator.OWNER
        if node.group in actor.groups:
            return PermissionEvaluator.GROUP
        return PermissionEvaluator.OTHER

    @staticmethod
    def check(node: Node, actor: Actor, kind: AccessKind) -> bool:
        """
        Check a single access.

        Args:
            node: Target node
            actor: Who is asking
            kind: Read, write or execute

        Returns:
            True if access is allowed
        """
        if actor.privileged:
            return True

        offset = PermissionEvaluator.triplet_offset(node, actor)
        return node.permissions[offset + kind.value] != '-'

    @staticmethod
    def can_read(node: Node, actor: Actor) -> bool:
        return PermissionEvaluator.check(node, actor, AccessKind.READ)

    @staticmethod
    def can_write(node: Node, actor: Actor) -> bool:
        return PermissionEvaluator.check(node, actor, AccessKind.WRITE)

    @staticmethod
    def can_execute(node: Node, actor: Actor) -> bool:
        return PermissionEvaluator.check(node, actor, AccessKind.EXECUTE)
