import pytest

from edados.stack import Stack


def test_push_pop_is_lifo():
    s = Stack()
    for item in "abc":
        s.push(item)
    assert [s.pop(), s.pop(), s.pop()] == ["c", "b", "a"]
    assert s.is_empty()


def test_peek_does_not_remove():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.peek() == 2
    assert len(s) == 2
    assert s.pop() == 2
    assert s.peek() == 1


def test_peek_empty_returns_none():
    assert Stack().peek() is None


def test_pop_empty_raises():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    s.push(1)
    s.pop()
    with pytest.raises(IndexError):
        s.pop()


def test_len_tracks_pushes_and_pops():
    s = Stack()
    for i in range(25):
        s.push(i)
    assert len(s) == 25
    for _ in range(10):
        s.pop()
    assert len(s) == 15
    assert not s.is_empty()


def test_str_empty_and_filled():
    s = Stack()
    assert str(s) == "Pilha vazia!"
    s.push("a")
    s.push("b")
    assert str(s) == "a b "


def test_holds_arbitrary_objects():
    s = Stack()
    first, second = object(), object()
    s.push(first)
    s.push(second)
    assert s.pop() is second
    assert s.pop() is first