from lotools.func import partial


def test_partial_one_argument():
    def add(x, y):
        return str(int(x) + y)

    f = partial(add, 5)
    assert f(10) == "15"
    assert f(-5) == "0"


def test_partial_two_arguments():
    def add(x, y, z):
        return str(int(x) + y + z)

    f = partial(add, 5)
    assert f(10, 9) == "24"
    assert f(-5, 8) == "8"


def test_partial_three_arguments():
    def add(x, y, z, a):
        return str(int(x) + y + z + int(a))

    f = partial(add, 5)
    assert f(10, 9, -3) == "21"
    assert f(-5, 8, 7) == "15"


def test_partial_four_arguments():
    def add(x, y, z, a, b):
        return str(int(x) + y + z + int(a) + int(b))

    f = partial(add, 5)
    assert f(10, 9, -3, 0) == "21"
    assert f(-5, 8, 7, -1) == "14"


def test_partial_five_arguments():
    def add(x, y, z, a, b, c):
        return str(int(x) + y + z + int(a) + int(b) + c)

    f = partial(add, 5)
    assert f(10, 9, -3, 0, 5) == "26"
    assert f(-5, 8, 7, -1, 7) == "21"


def test_partial_binds_first_argument_only():
    f = partial(lambda a, b: (a, b), "first")
    assert f("second") == ("first", "second")