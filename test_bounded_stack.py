import copy

import pytest

from bounded_stack import BoundedStack, EmptyStackError, InsufficientSizeError, StackError


def test_push_pop_lifo():
    stack = BoundedStack()
    for i in range(5):
        stack.push(i)
    assert stack.size() == 5
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert stack.empty()


def test_top_and_second_from_top():
    stack = BoundedStack()
    stack.push('a')
    assert stack.top() == 'a'
    stack.push('b')
    assert stack.top() == 'b'
    assert stack.second_from_top() == 'a'
    stack.pop()
    assert stack.top() == 'a'


def test_empty_stack_errors():
    stack = BoundedStack()
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.top()


@pytest.mark.parametrize("size", [0, 1])
def test_second_from_top_needs_two(size):
    stack = BoundedStack(range(size))
    with pytest.raises(InsufficientSizeError):
        stack.second_from_top()


def test_errors_share_base():
    assert issubclass(EmptyStackError, StackError)
    assert issubclass(InsufficientSizeError, StackError)
    assert issubclass(StackError, IndexError)


def test_copies_are_independent():
    stack = BoundedStack([1, 2])
    for other in (stack.copy(), copy.copy(stack)):
        other.push(3)
        assert stack.size() == 2
        assert other.size() == 3
        stack.pop()
        stack.push(2)
        assert other.to_list() == [1, 2, 3]


def test_clear_and_to_list():
    stack = BoundedStack()
    stack.push(1)
    stack.push(2)
    assert stack.to_list() == [1, 2]
    assert len(stack) == 2
    stack.clear()
    assert stack.empty()
    assert stack.to_list() == []
