import io

import pytest

from frogs import units
from frogs.cli import (
    differentiation_demo,
    expressions_demo,
    main,
    matrix_demo,
    units_demo,
    vectors_demo,
)


def run(demo):
    out = io.StringIO()
    demo(out)
    return out.getvalue().splitlines()


def value_after(lines, prefix):
    matches = [line[len(prefix):] for line in lines if line.startswith(prefix)]
    assert matches, prefix
    return matches


def test_units_demo():
    lines = run(units_demo)
    assert lines[1] == "* This example shows how to use physical quantities *"
    assert len(lines[0]) == len(lines[1]) == len(lines[2])
    assert set(lines[0]) == {"*"}
    assert f"d = {units.km(20)}" in lines
    assert f"t = {units.minutes(30)}" in lines
    assert f"v = {units.km(20) / units.minutes(30)}" in lines
    assert "t in minutes = 30" in lines


def test_expressions_demo_changes_with_variables():
    lines = run(expressions_demo)
    assert f"x = {units.m(2000)}" in lines
    velocities = value_after(lines, "Velocity now = ")
    assert len(velocities) == 2
    assert velocities[0] != velocities[1]
    expression = value_after(lines, "Velocity expression = ")[0]
    assert "Sqrt(" in expression
    assert expression.endswith("/ t)")


def test_differentiation_demo():
    lines = run(differentiation_demo)
    distances = value_after(lines, "distance(")
    accelerations = value_after(lines, "acceleration(")
    assert len(distances) == 5
    assert len({line.split(" = ")[1] for line in accelerations}) == 1
    assert "acceleration(0 seconds) = 0.4 m/s2" in lines
    assert f"distance({units.sec(0)}) = {units.m(20)}" in lines
    assert f"velocity({units.sec(0)}) = {units.mps(10)}" in lines


def test_vectors_demo():
    out = io.StringIO()
    vectors_demo(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 5
    result = lines[-1]
    assert result.startswith(
        "From [10 meters, 10 meters, 10 meters] to "
        "[20 meters, 30 meters, 40 meters] in 0.5 seconds is "
    )
    assert result.endswith("[20 m/s, 40 m/s, 60 m/s]")


def test_matrix_demo():
    out = io.StringIO()
    matrix_demo(out)
    lines = out.getvalue().splitlines()
    before = lines[lines.index("Shape before transformation:") + 1]
    after = lines[lines.index("Shape after transformation:") + 1]
    matrix = lines[lines.index("The transformation matrix:") + 1]
    assert before.count("][") == 3
    assert after.count("][") == 3
    assert before != after
    assert matrix.startswith("[[")
    assert matrix.count("], [") == 3


def test_main_runs_one_demo(capsys):
    assert main(["vectors"]) == 0
    captured = capsys.readouterr().out
    assert "* This example shows how to use vectors *" in captured
    assert "matrices" not in captured


def test_main_runs_all_by_default(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    for text in ("physical quantities", "mathematical expressions",
                 "differentiate expressions", "use vectors", "use matrices"):
        assert f"This example shows how to {text}" in captured or text in captured


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["bogus"])