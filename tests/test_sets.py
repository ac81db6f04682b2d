import pytest

from unfuzzy.sets import (
    BellSet,
    GammaSet,
    LSet,
    PiBellSet,
    PiSet,
    SetKind,
    SingletonSet,
    SSet,
    TriangleSet,
    ZSet,
    set_type_name,
)


def grid(lo, hi, steps=200):
    return [lo + (hi - lo) * k / steps for k in range(steps + 1)]


ALL_SETS = [
    LSet("l", 0, 3, 6),
    TriangleSet("t", 0, 5, 10),
    PiSet("p", 0, 2, 6, 8),
    GammaSet("g", 2, 6, 10),
    ZSet("z", 0, 3, 9),
    BellSet("b", 0, 5, 10),
    PiBellSet("pb", 0, 2, 6, 8),
    SSet("s", 2, 6, 10),
    SingletonSet("one", 4, 5),
]


@pytest.mark.parametrize(
    "kind,name",
    [
        (SetKind.L, "Type L"),
        (SetKind.TRIANGLE, "Triangle"),
        (SetKind.PI, "Type PI"),
        (SetKind.GAMMA, "Type Gamma"),
        (SetKind.Z, "Type Z"),
        (SetKind.BELL, "Bell"),
        (SetKind.PI_BELL, "PI-Bell"),
        (SetKind.S, "Type S"),
        (SetKind.SINGLETON, "Singleton"),
    ],
)
def test_set_type_names(kind, name):
    assert set_type_name(kind) == name
    assert set_type_name(int(kind)) == name


def test_unknown_type_name_is_empty():
    assert set_type_name(9) == ""
    assert set_type_name(-1) == ""


def test_membership_bounded():
    sets = [
        LSet("l", 0, 3, 6),
        TriangleSet("t", 0, 5, 10),
        PiSet("p", 0, 2, 6, 8),
        GammaSet("g", 2, 6, 10),
        ZSet("z", 0, 3, 9),
        BellSet("b", 0, 5, 10),
        PiBellSet("pb", 0, 2, 6, 8),
        SSet("s", 2, 6, 10),
        SingletonSet("one", 4, 5),
    ]
    for fuzzy_set in sets:
        for x in grid(-5, 15):
            ux = fuzzy_set.membership(x)
            assert 0.0 <= ux <= 1.0


def test_triangle_peak_and_edges():
    t = TriangleSet("t", 0, 5, 10)
    assert t.membership(5) == 1.0
    assert t.membership(0) == 0.0
    assert t.membership(10) == 0.0
    for d in (1.0, 2.5, 4.0):
        assert t.membership(5 - d) == pytest.approx(t.membership(5 + d))


def test_small_values_snap_to_zero():
    t = TriangleSet("t", 0, 10000, 20000)
    assert t.membership(0.5) == 0.0
    assert t.membership(5000) > 0.0


def test_l_and_z_are_non_increasing():
    for s in (LSet("l", 0, 3, 6), ZSet("z", 0, 3, 9)):
        values = [s.membership(x) for x in grid(-2, 12)]
        assert all(a >= b - 1e-12 for a, b in zip(values, values[1:]))
        assert values[0] == 1.0
        assert values[-1] == 0.0


def test_gamma_and_s_are_non_decreasing():
    for s in (GammaSet("g", 2, 6, 10), SSet("s", 2, 6, 10)):
        values = [s.membership(x) for x in grid(0, 12)]
        assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))
        assert values[0] == 0.0
        assert s.membership(6) == 1.0
        assert s.membership(11) == 1.0


def test_bell_symmetric_with_unit_peak():
    b = BellSet("b", 0, 5, 10)
    assert b.membership(5) == 1.0
    for d in (0.5, 2.0, 3.7):
        assert b.membership(5 - d) == pytest.approx(b.membership(5 + d))


@pytest.mark.parametrize("cls", [PiSet, PiBellSet])
def test_plateau_sets(cls):
    s = cls("p", 0, 2, 6, 8)
    for x in grid(2, 5.99, 20):
        assert s.membership(x) == 1.0
    assert s.membership(-1) == 0.0
    assert s.membership(8) == 0.0


def test_singleton():
    s = SingletonSet("one", 4, 5)
    assert s.membership(4) == 1.0
    assert s.membership(5) == 0.0
    assert s.membership(3.9) == 0.0
    assert s.peak == pytest.approx(4.5)
    assert s.delta == pytest.approx(1)


def test_key_points_per_shape():
    assert LSet("l", 0, 3, 6).key_points() == [3, 6]
    assert TriangleSet("t", 0, 5, 10).key_points() == [0, 5, 10]
    assert PiSet("p", 0, 2, 6, 8).key_points() == [0, 2, 6, 8]
    assert GammaSet("g", 2, 6, 10).key_points() == [2, 6]
    assert ZSet("z", 0, 3, 9).key_points() == [3, 9]
    assert SSet("s", 2, 6, 10).key_points() == [2, 6]
    assert SingletonSet("one", 4, 5).key_points() == [4, 5]


def test_set_key_point_round_trip():
    p = PiBellSet("pb", 0, 2, 6, 8)
    p.set_key_point(2, 7)
    assert p.second_cut == 7
    assert p.key_points() == [0, 2, 7, 8]
    z = ZSet("z", 0, 3, 9)
    z.set_key_point(0, 4)
    assert z.first_cut == 4
    assert z.minimum == 0


def test_set_key_point_out_of_range_ignored():
    t = TriangleSet("t", 0, 5, 10)
    t.set_key_point(3, 99)
    t.set_key_point(-1, 99)
    assert t.key_points() == [0, 5, 10]


def test_check_key_point_clamps_between_neighbours():
    p = PiSet("p", 0, 2, 6, 8)
    assert p.check_key_point(1, -3) == 0
    assert p.check_key_point(1, 9) == 6
    assert p.check_key_point(1, 4) == 4
    assert p.check_key_point(0, 5) == 2


def test_check_key_point_last_points_not_clamped_above():
    t = TriangleSet("t", 0, 5, 10)
    assert t.check_key_point(1, 20) == 20
    assert t.check_key_point(2, 1) == 5


def test_check_key_point_bad_index():
    with pytest.raises(IndexError):
        TriangleSet("t", 0, 5, 10).check_key_point(5, 1)


def test_cpp_code():
    assert TriangleSet("t", 0, 5, 10).cpp_code() == "    cd=new ConjuntoTriangulo(0,5,10);"
    assert PiSet("p", 0, 2, 6, 8).cpp_code() == "    cd=new ConjuntoPi(0,2,6,8);"
    assert LSet("l", 0, 3, 6).cpp_code() == "    cd=new ConjuntoL(0,3,6);"
    assert GammaSet("g", 2, 6, 10).cpp_code() == "    cd=new ConjuntoGamma(2,6,10);"


def test_singleton_cpp_code_uses_peak_and_delta():
    s = SingletonSet("one", 4, 6)
    assert s.cpp_code() == "    cd=new ConjuntoSinglenton(5,2);"


def test_c_code_singleton_exact():
    expected = (
        " " * 24 + "if(x<(4))\n"
        + " " * 28 + "ux=0;\n"
        + " " * 24 + "if(x<(6)&&x>=(4))\n"
        + " " * 28 + "ux=1;\n"
        + " " * 24 + "if(x>=(6))\n"
        + " " * 28 + "ux=0;\n"
        + " " * 24 + "if(ux<0.0001)\n"
        + " " * 28 + "ux=0;"
    )
    assert SingletonSet("one", 4, 6).c_code() == expected


def test_c_code_endings():
    assert TriangleSet("t", 0, 5, 10).c_code().endswith("ux=0;\n")
    assert LSet("l", 0, 3, 6).c_code().endswith("ux=0;")
    gamma = GammaSet("g", 2, 6, 10).c_code()
    assert "ux=1;\r\n" in gamma
    assert "if(ux<0.0001)\r\n" in gamma
    assert "\r\n" in SSet("s", 2, 6, 10).c_code()


def test_c_code_contains_midpoints():
    code = BellSet("b", 0, 5, 10).c_code()
    assert "if(x<(2.5)&&x>=(0))" in code
    assert "if(x<(7.5)&&x>=(5))" in code
    assert code.count("{") == code.count("}")


def test_equality():
    assert TriangleSet("t", 0, 5, 10) == TriangleSet("t", 0, 5, 10)
    assert TriangleSet("t", 0, 5, 10) != BellSet("t", 0, 5, 10)
    assert TriangleSet("t", 0, 5, 10) != TriangleSet("u", 0, 5, 10)


def test_kind_attribute():
    assert [s.kind for s in ALL_SETS] == [
        SetKind.L,
        SetKind.TRIANGLE,
        SetKind.PI,
        SetKind.GAMMA,
        SetKind.Z,
        SetKind.BELL,
        SetKind.PI_BELL,
        SetKind.S,
        SetKind.SINGLETON,
    ]