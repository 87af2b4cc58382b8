"""Tests for the person graph index and lineage traversal."""

from app.services.lineage import (
    PersonGraph,
    get_ancestors,
    get_descendants,
    get_lineage,
    is_descendant,
)
from conftest import make_person


def ids(persons):
    return [p.id for p in persons]


# ============================================================================
# Graph Model
# ============================================================================

class TestPersonGraph:
    """Tests for PersonGraph lookups."""

    def test_children_and_parents(self, chain):
        graph = PersonGraph(chain)
        assert ids(graph.children_of("grandparent")) == ["parent"]
        assert ids(graph.parents_of("child")) == ["parent"]
        assert graph.get("nobody") is None

    def test_dangling_parent_ids_skipped(self):
        orphan = make_person(id="orphan", parentIds=["deleted"])
        graph = PersonGraph([orphan])
        assert graph.parents_of("orphan") == []
        assert graph.parents_of("nobody") == []

    def test_of_reuses_graph(self, chain):
        graph = PersonGraph(chain)
        assert PersonGraph.of(graph) is graph


# ============================================================================
# Ancestors
# ============================================================================

class TestGetAncestors:
    """Tests for upward breadth-first traversal."""

    def test_no_parents(self):
        person = make_person(id="alone")
        assert get_ancestors("alone", [person]) == []

    def test_direct_parents(self):
        parent1 = make_person(id="parent1")
        parent2 = make_person(id="parent2")
        child = make_person(id="child", parentIds=["parent1", "parent2"])
        assert ids(get_ancestors("child", [parent1, parent2, child])) == ["parent1", "parent2"]

    def test_chain_in_discovery_order(self, chain):
        assert ids(get_ancestors("child", list(chain))) == ["parent", "grandparent"]

    def test_unknown_person(self):
        assert get_ancestors("does-not-exist", [make_person(id="exists")]) == []

    def test_shared_ancestor_listed_once(self):
        # Both parents descend from the same root
        root = make_person(id="root")
        a = make_person(id="a", parentIds=["root"])
        b = make_person(id="b", parentIds=["root"])
        child = make_person(id="child", parentIds=["a", "b"])
        assert ids(get_ancestors("child", [root, a, b, child])) == ["a", "b", "root"]

    def test_dangling_reference(self):
        child = make_person(id="child", parentIds=["gone", "parent"])
        parent = make_person(id="parent")
        assert ids(get_ancestors("child", [child, parent])) == ["parent"]

    def test_cycle_terminates(self):
        a = make_person(id="a", parentIds=["b"])
        b = make_person(id="b", parentIds=["a"])
        # Start is reached again through the cycle, but only once
        assert ids(get_ancestors("a", [a, b])) == ["b", "a"]


# ============================================================================
# Descendants
# ============================================================================

class TestDescendants:
    """Tests for downward traversal."""

    def test_is_descendant_chain(self, chain):
        assert is_descendant("child", "grandparent", chain)
        assert is_descendant("parent", "grandparent", chain)
        assert not is_descendant("grandparent", "child", chain)

    def test_is_descendant_not_self(self, chain):
        assert not is_descendant("parent", "parent", chain)

    def test_is_descendant_unknown_ids(self, chain):
        assert not is_descendant("nobody", "grandparent", chain)
        assert not is_descendant("child", "nobody", chain)

    def test_is_descendant_fan_out(self):
        root = make_person(id="root")
        kids = [make_person(id=f"kid{i}", parentIds=["root"]) for i in range(5)]
        grandkid = make_person(id="grandkid", parentIds=["kid4"])
        assert is_descendant("grandkid", "root", [root, *kids, grandkid])

    def test_is_descendant_cycle_terminates(self):
        a = make_person(id="a", parentIds=["b"])
        b = make_person(id="b", parentIds=["a"])
        assert not is_descendant("c", "a", [a, b])
        assert is_descendant("a", "a", [a, b])

    def test_get_descendants(self, chain):
        assert ids(get_descendants("grandparent", chain)) == ["parent", "child"]
        assert get_descendants("child", chain) == []
        assert get_descendants("nobody", chain) == []


# ============================================================================
# Leveled Lineage
# ============================================================================

class TestGetLineage:
    """Tests for generation-grouped lineage."""

    def test_middle_of_chain(self, chain):
        lineage = get_lineage("parent", chain)
        assert lineage.person.id == "parent"
        assert [ids(level) for level in lineage.ancestors] == [["grandparent"]]
        assert [ids(level) for level in lineage.descendants] == [["child"]]

    def test_generations(self):
        g1 = make_person(id="g1")
        g2 = make_person(id="g2")
        p1 = make_person(id="p1", parentIds=["g1", "g2"])
        p2 = make_person(id="p2")
        me = make_person(id="me", parentIds=["p1", "p2"])
        kid = make_person(id="kid", parentIds=["me"])
        lineage = get_lineage("me", [g1, g2, p1, p2, me, kid])
        assert [ids(level) for level in lineage.ancestors] == [["p1", "p2"], ["g1", "g2"]]
        assert [ids(level) for level in lineage.descendants] == [["kid"]]

    def test_unknown_person(self, chain):
        assert get_lineage("nobody", chain) is None

    def test_cycle_excludes_self(self):
        a = make_person(id="a", parentIds=["b"])
        b = make_person(id="b", parentIds=["a"])
        lineage = get_lineage("a", [a, b])
        assert [ids(level) for level in lineage.ancestors] == [["b"]]
        assert [ids(level) for level in lineage.descendants] == [["b"]]
