import pytest

from pcclist.anylist import BadAnyCast, List, ValueRef


def test_default_construct():
    lst = List()
    assert lst.size() == 0
    lst.append(1)
    assert lst.size() == 1
    lst.clear()
    assert lst.size() == 0
    assert len(lst) == 0


def test_variadic_ctor():
    lst = List(10, "foo", 2.5)
    assert lst.size() == 3
    assert lst[0].cast(int) == 10
    assert lst[1].cast(str) == "foo"
    assert lst[2].cast(float) == pytest.approx(2.5)


def test_append_string():
    lst = List()
    lst.append("bar")
    assert lst.size() == 1
    assert lst[0].cast(str) == "bar"


def test_assignment():
    lst = List(1, 2.0)
    lst[0] = 42
    lst[1].assign(3.14)
    assert lst[0] == 42
    assert lst[1].cast(float) == pytest.approx(3.14)


def test_assignment_changes_type():
    lst = List(1)
    lst[0] = "text"
    assert lst.get(0, str) == "text"
    with pytest.raises(BadAnyCast):
        lst.get(0, int)


def test_remove():
    lst = List(1, 2, 3)
    lst.remove(1)
    assert lst.size() == 2
    assert lst[0] == 1
    assert lst[1] == 3
    with pytest.raises(IndexError):
        lst.remove(5)


def test_insert():
    lst = List("a", "c")
    lst.insert(1, "b")
    assert lst.size() == 3
    assert lst[1] == "b"
    assert [v.value for v in lst] == ["a", "b", "c"]
    with pytest.raises(IndexError):
        lst.insert(5, 10)


def test_insert_at_end():
    lst = List(1)
    lst.insert(1, 2)
    assert [v.value for v in lst] == [1, 2]


def test_out_of_range():
    lst = List(1)
    for idx in (1, 100, -1):
        with pytest.raises(IndexError) as excinfo:
            lst[idx]
        assert "index out of range" in str(excinfo.value)
    assert lst.size() == 1
    assert lst.get(0, int) == 1


def test_out_of_range_message():
    lst = List()
    with pytest.raises(IndexError, match="operator\\[\\]: index out of range"):
        lst[0]
    with pytest.raises(IndexError, match="get: index out of range"):
        lst.get(0, int)


def test_bad_any_cast():
    lst = List(1, 2.0)
    with pytest.raises(BadAnyCast):
        lst.get(1, int)
    with pytest.raises(BadAnyCast):
        lst.get(0, float)


def test_bad_cast_is_type_error():
    lst = List(1)
    with pytest.raises(TypeError):
        lst[0].cast(str)


def test_get_and_try_get():
    lst = List("hi", 7)
    assert lst.get(0, str) == "hi"
    assert lst.get(1, int) == 7
    assert lst.try_get(0, str) == "hi"
    assert lst.try_get(1, float) is None
    assert lst.try_get(9, int) is None


def test_unprintable():
    class Pod:
        def __init__(self, a):
            self.a = a

    lst = List()
    lst.append(Pod(5))
    assert "Pod" in str(lst[0])


def test_printing_known_types():
    lst = List(42, "hello", 3.14)
    assert [str(v) for v in lst] == ["42", "hello", "3.14"]


def test_equality_wrong_type_raises():
    lst = List(1)
    with pytest.raises(BadAnyCast):
        lst[0] == "1"
    assert lst[0] == 1
    assert lst.get(0, int) == 1


def test_inequality():
    lst = List(1, 2)
    assert lst[0] != 2
    assert not (lst[0] != 1)
    assert 2 == lst[1]


def test_iteration_gives_live_refs():
    lst = List(1, 2, 3)
    for ref in lst:
        ref.assign(ref.cast(int) * 10)
    assert [lst.get(i, int) for i in range(3)] == [10, 20, 30]


def test_valueref_direct():
    slots = ["x"]
    ref = ValueRef(slots, 0)
    ref.assign("y")
    assert slots == ["y"]
    assert ref.value == "y"


def test_non_integer_index():
    lst = List(1)
    with pytest.raises(TypeError):
        lst["0"]
    assert lst.size() == 1
    assert lst.get(0, int) == 1