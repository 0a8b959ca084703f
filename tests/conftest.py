import pytest

from threebody.data_models import Body


@pytest.fixture
def viewport():
    return (800, 600)


@pytest.fixture
def make_body():
    """Build a Body; radius defaults to the mass."""
    def _make(id, position, velocity=(0.0, 0.0), mass=5.0, radius=None, color=(255, 0, 0, 255)):
        return Body(
            id=id,
            mass=mass,
            radius=mass if radius is None else radius,
            position=position,
            velocity=velocity,
            color=color,
        )
    return _make
