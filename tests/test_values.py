import pytest

from lspy.values import (
    Builtin,
    Cons,
    LispError,
    Symbol,
    car,
    cdr,
    cons,
    from_iterable,
    is_truthy,
    iterate,
    set_car,
    set_cdr,
)


def test_car():
    pair = cons(1, 2)
    assert car(pair) == 1


def test_cdr():
    pair = cons(1, 2)
    assert cdr(pair) == 2


def test_int_is_not_cons():
    with pytest.raises(LispError):
        car(5)


def test_cons_leaves_arguments_untouched():
    head = Cons(1, None)
    pair = cons(head, None)
    assert pair.car is head
    assert head == Cons(1, None)


def test_null_is_not_cons():
    with pytest.raises(LispError):
        cdr(None)


def test_nulls():
    pair = cons(None, None)
    assert pair == Cons(None, None)
    assert pair.car is None and pair.cdr is None


def test_overflow_1():
    with pytest.raises(LispError):
        cons(1)


def test_overflow_2():
    with pytest.raises(LispError):
        cons()


def test_push():
    pair = Cons()
    assert car(pair) is None
    assert cdr(pair) is None


def test_set_car():
    pair = Cons()
    set_car(pair, 5)
    assert car(pair) == 5
    assert cdr(pair) is None


def test_set_cdr():
    pair = Cons()
    set_cdr(pair, 5)
    assert cdr(pair) == 5
    assert car(pair) is None


def test_set_car_on_non_pair_raises():
    with pytest.raises(LispError):
        set_car(3, 5)


def test_symbol_differs_from_string():
    assert Symbol("x") != "x"
    assert Symbol("x") == Symbol("x")
    assert str(Symbol("abc")) == "abc"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        (0, False),
        (1, True),
        (-3, True),
        ("", False),
        ("a", True),
        (Symbol("x"), True),
        (Cons(), True),
    ],
)
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected


def test_builtin_has_no_truth_value():
    with pytest.raises(LispError):
        is_truthy(Builtin("+", lambda a, b: a + b))


def test_builtin_call():
    add = Builtin("+", lambda a, b: a + b)
    assert add(2, 3) == 5


def test_builtin_equality_by_function():
    def fn(a):
        return a

    def other(a):
        return -a

    first = Builtin("id", fn)
    second = Builtin("id", fn)
    assert (first == second) is True
    assert (first == Builtin("id", other)) is False
    assert second(7) == 7


def test_from_iterable_builds_list():
    lst = from_iterable([1, 2, 3])
    assert lst == Cons(1, Cons(2, Cons(3, None)))


def test_from_iterable_empty_is_null():
    assert from_iterable([]) is None


def test_from_iterable_with_tail():
    assert from_iterable([1, 2], 3) == Cons(1, Cons(2, 3))


def test_iterate_round_trip():
    items = [1, "two", Symbol("three"), None]
    assert list(iterate(from_iterable(items))) == items


def test_iterate_improper_list_raises():
    with pytest.raises(LispError):
        list(iterate(Cons(1, 2)))


def test_iterate_null_is_empty():
    assert list(iterate(None)) == []