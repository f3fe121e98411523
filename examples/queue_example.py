from linkedqueue.queue_ops import create, destroy, insert_back, insert_front, remove_front, reverse, size, sort
from linkedqueue.utils import buffer_to_str


def show(q, label: str):
    print(f"{label}: [{' '.join(q)}] size={size(q)}")


def fifo_then_reverse():
    q = create()
    for text in ("a", "b", "c"):
        insert_back(q, text)
    show(q, "after insert_back")

    reverse(q)
    show(q, "after reverse")

    buf = bytearray(16)
    remove_front(q, buf)
    print(f"removed: {buffer_to_str(buf)}")
    show(q, "after remove_front")

    insert_front(q, "z")
    show(q, "after insert_front")

    destroy(q)
    show(q, "after destroy")


def empty_remove():
    q = create()
    ok = remove_front(q)
    print(f"remove on empty: ok={ok} size={size(q)}")


def truncated_remove():
    q = create()
    insert_back(q, "truncated value")
    buf = bytearray(8)
    remove_front(q, buf, len(buf))
    print(f"removed into 8 bytes: {buffer_to_str(buf)!r}")


def sorted_queue():
    q = create()
    for text in ("pear", "apple", "fig", "apple"):
        insert_back(q, text)
    sort(q)
    show(q, "after sort")


fifo_then_reverse()
empty_remove()
truncated_remove()
sorted_queue()
