import pytest

from linkedqueue.linked_list import ListNode, SequenceContainer


def walk_nodes(q: SequenceContainer) -> list[ListNode]:
    """Collect the nodes of `q` head first, stopping after count + 1 steps."""
    nodes = []
    current = q.head
    while current is not None and len(nodes) <= q.count:
        nodes.append(current)
        current = current.next
    return nodes


def assert_well_formed(q: SequenceContainer) -> None:
    if q.count == 0:
        assert q.head is None
        assert q.tail is None
        return

    assert q.head is not None
    assert q.tail is not None
    nodes = walk_nodes(q)
    assert len(nodes) == q.count
    assert nodes[-1] is q.tail
    assert q.tail.next is None
    assert len({id(node) for node in nodes}) == q.count
    if q.count == 1:
        assert q.head is q.tail


@pytest.fixture
def check_invariants():
    return assert_well_formed


@pytest.fixture
def nodes_of():
    return walk_nodes


@pytest.fixture
def abc_queue():
    q = SequenceContainer()
    for value in ("a", "b", "c"):
        assert q.insert_tail(value)
    return q
