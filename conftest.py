import pytest

from physvec.entities.array_vector import ArrayVector
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector3d import Vector3D


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions with
# all values in the below sets. For example, a function with the
# parameter name n_steps will be run once per listed step count.
# The key type for this dictionary is a tuple which allows aliasing
# such that multiple parameter names share the same test value sets.
parameter_values = {
    ("n_steps",): {"quick": [200], "full": [200, 5000]},
    ("oscillator_type",): {
        "quick": [Vector3D],
        "full": [Vector2D, Vector3D, ArrayVector],
    },
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])


@pytest.fixture
def trace_dir(tmp_path):
    return tmp_path / "traces"
