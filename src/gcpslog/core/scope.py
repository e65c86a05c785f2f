"""Scope chain: immutable accumulation of groups and bound attributes.

Each ``with_group`` / ``with_attrs`` call returns a new leaf pointing at its
parent. Nodes are never mutated, so two loggers branching from a common
ancestor never observe each other's bindings and nodes can be shared between
threads without locking.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from gcpslog.core.models import Attr


@dataclass(frozen=True)
class ScopeNode:
    """One link of a scope chain.

    A node either opens a group (``name`` set, no attrs) or binds attributes
    to the innermost group opened before it (``name`` empty).

    Attributes:
        parent: Previous node, None for the root.
        name: Group opened by this node, empty if none.
        attrs: Attributes bound by this node.
    """

    parent: "ScopeNode | None" = None
    name: str = ""
    attrs: tuple[Attr, ...] = ()

    def nodes(self) -> list["ScopeNode"]:
        """Return the chain from root to this node."""
        chain: list[ScopeNode] = []
        node: ScopeNode | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    @property
    def groups(self) -> tuple[str, ...]:
        """Group path from the root to this node."""
        return tuple(n.name for n in self.nodes() if n.name)

    def levels(self) -> list[tuple[tuple[str, ...], list[Attr]]]:
        """Split the chain into nesting levels.

        Returns:
            One ``(group path, attrs)`` pair per level, root first. The last
            entry is the innermost group, where call-site attributes go.
        """
        path: tuple[str, ...] = ()
        levels: list[tuple[tuple[str, ...], list[Attr]]] = [(path, [])]
        for node in self.nodes():
            if node.name:
                path = (*path, node.name)
                levels.append((path, []))
            levels[-1][1].extend(node.attrs)
        return levels


_ROOT = ScopeNode()


def root() -> ScopeNode:
    """Return the empty chain."""
    return _ROOT


def with_group(chain: ScopeNode, name: str) -> ScopeNode:
    """Return a chain whose later bindings nest under ``name``.

    An empty name returns ``chain`` itself.
    """
    if not name:
        return chain
    return ScopeNode(parent=chain, name=name)


def with_attrs(chain: ScopeNode, attrs: Iterable[Attr]) -> ScopeNode:
    """Return a chain with ``attrs`` bound to its innermost group.

    Binding nothing returns ``chain`` itself.
    """
    bound = tuple(attrs)
    if not bound:
        return chain
    return ScopeNode(parent=chain, attrs=bound)
