import pytest

from dsakit.stacks import (
    ArrayStack,
    LinkedStack,
    find_celebrity,
    has_duplicate_parentheses,
    insert_at_bottom,
    is_balanced,
    next_greater,
    previous_smaller,
    reverse_stack,
    reverse_string,
    stock_span,
)


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_lifo_order(cls):
    st = cls()
    for value in (1, 2, 3, 4):
        st.push(value)
    assert st.peek() == 4
    assert st.pop() == 4
    assert st.peek() == 3
    assert [st.pop() for _ in range(3)] == [3, 2, 1]
    assert st.is_empty()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_underflow_raises(cls):
    st = cls()
    with pytest.raises(IndexError):
        st.pop()
    with pytest.raises(IndexError):
        st.peek()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_len_tracks_pushes_and_pops(cls):
    st = cls()
    assert len(st) == 0
    st.push(10)
    st.push(20)
    assert len(st) == 2
    st.pop()
    assert len(st) == 1
    assert not st.is_empty()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_constructor_values_pushed_in_order(cls):
    st = cls([1, 2, 3])
    assert st.peek() == 3
    assert len(st) == 3


def test_find_celebrity_source_example():
    knows = [[0, 1, 0], [0, 0, 0], [1, 1, 0]]
    assert find_celebrity(knows) == 1


def test_find_celebrity_none_when_everyone_knows_each_other():
    knows = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert find_celebrity(knows) is None


def test_find_celebrity_invariant():
    knows = [[0, 0, 1, 0], [1, 0, 1, 1], [0, 0, 0, 0], [1, 0, 1, 0]]
    celeb = find_celebrity(knows)
    assert celeb == 2
    assert all(knows[celeb][i] == 0 for i in range(4))
    assert all(knows[i][celeb] == 1 for i in range(4) if i != celeb)


def test_find_celebrity_empty():
    assert find_celebrity([]) is None


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("((a+b))", True),
        ("(a+b)", False),
        ("((a+b)+(c+d))", False),
        ("(((a)))", True),
        ("()", True),
    ],
)
def test_has_duplicate_parentheses(expression, expected):
    assert has_duplicate_parentheses(expression) is expected


def test_insert_at_bottom():
    stack = [1, 2, 3, 4]
    insert_at_bottom(stack, 5)
    assert stack == [5, 1, 2, 3, 4]
    assert stack.pop() == 4


def test_insert_at_bottom_of_empty():
    stack = []
    insert_at_bottom(stack, 7)
    assert stack == [7]


def test_reverse_stack_twice_restores():
    original = [1, 2, 3, 4, 5]
    stack = list(original)
    reverse_stack(stack)
    assert stack == [5, 4, 3, 2, 1]
    reverse_stack(stack)
    assert stack == original


def test_next_greater_worked_example():
    assert next_greater([4, 5, 2, 10, 8]) == [5, 10, 10, None, None]


def test_next_greater_invariant():
    items = [6, 8, 0, 1, 3]
    result = next_greater(items)
    assert result == [8, None, 1, 3, None]


def test_previous_smaller_worked_example():
    assert previous_smaller([3, 1, 0, 8, 6]) == [None, None, None, 0, 0]


def test_previous_smaller_on_increasing_input():
    items = [1, 2, 3, 4]
    assert previous_smaller(items) == [None, 1, 2, 3]


def test_reverse_string():
    assert reverse_string("abc") == "cba"
    assert reverse_string("") == ""


def test_reverse_string_round_trip():
    text = "Hello, stack!"
    assert reverse_string(reverse_string(text)) == text


def test_stock_span_worked_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_increasing_prices():
    prices = [1, 2, 3, 4, 5]
    assert stock_span(prices) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[{()[]}]", True),
        ("([)]", False),
        ("(((", False),
        ("", True),
        ("}", False),
        ("a(b)c", True),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected