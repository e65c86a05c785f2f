"""Tests for the scope chain."""

import pytest

from gcpslog.core.models import Attr
from gcpslog.core.scope import ScopeNode, root, with_attrs, with_group


@pytest.mark.core
class TestScopeChain:
    """Tests for root(), with_group() and with_attrs()."""

    def test_root_is_empty(self) -> None:
        chain = root()
        assert chain.parent is None
        assert chain.name == ""
        assert chain.attrs == ()
        assert chain.levels() == [((), [])]

    def test_empty_group_name_is_noop(self) -> None:
        chain = with_attrs(root(), [Attr("a", 1)])
        assert with_group(chain, "") is chain

    def test_empty_attrs_is_noop(self) -> None:
        chain = with_group(root(), "g")
        assert with_attrs(chain, []) is chain

    def test_with_group_returns_new_leaf(self) -> None:
        parent = root()
        chain = with_group(parent, "g")
        assert chain is not parent
        assert chain.parent is parent
        assert chain.groups == ("g",)
        assert parent.groups == ()

    def test_with_attrs_accepts_any_iterable(self) -> None:
        chain = with_attrs(root(), (Attr(k, v) for k, v in {"a": 1, "b": 2}.items()))
        assert chain.attrs == (Attr("a", 1), Attr("b", 2))

    def test_nodes_are_immutable(self) -> None:
        chain = with_attrs(root(), [Attr("a", 1)])
        with pytest.raises(AttributeError):
            chain.attrs = ()  # type: ignore[misc]

    def test_levels_associate_attrs_with_innermost_group(self) -> None:
        chain = root()
        chain = with_attrs(chain, [Attr("top", 1)])
        chain = with_group(chain, "a")
        chain = with_attrs(chain, [Attr("x", 1)])
        chain = with_attrs(chain, [Attr("y", 2)])
        chain = with_group(chain, "b")

        assert chain.levels() == [
            ((), [Attr("top", 1)]),
            (("a",), [Attr("x", 1), Attr("y", 2)]),
            (("a", "b"), []),
        ]

    def test_branches_share_ancestor_without_interference(self) -> None:
        base = with_group(root(), "g")
        left = with_attrs(base, [Attr("left", 1)])
        right = with_attrs(base, [Attr("right", 2)])

        assert left.levels()[-1] == (("g",), [Attr("left", 1)])
        assert right.levels()[-1] == (("g",), [Attr("right", 2)])
        assert base.levels()[-1] == (("g",), [])

    def test_levels_returns_fresh_lists(self) -> None:
        chain = with_attrs(root(), [Attr("a", 1)])
        chain.levels()[0][1].append(Attr("b", 2))
        assert chain.levels() == [((), [Attr("a", 1)])]

    def test_nodes_walk_root_to_leaf(self) -> None:
        chain = with_group(with_attrs(root(), [Attr("a", 1)]), "g")
        nodes = chain.nodes()
        assert nodes[0] is root()
        assert nodes[-1] is chain
        assert all(isinstance(node, ScopeNode) for node in nodes)
