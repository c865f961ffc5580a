import pytest

BIOLOGY = (
    "Photosynthesis is the process plants use to convert light into energy. "
    "Plants need water and sunlight to grow. "
    "Chlorophyll is a green pigment that captures light for photosynthesis. "
    "The mitochondria is the powerhouse of the cell. "
    "Cells use energy from the mitochondria to build proteins. "
    "Carbon dioxide enters the leaf through small pores called stomata. "
    "Water moves from the roots to the leaves through the xylem. "
    "Energy stored in glucose feeds the cell during the night."
)


@pytest.fixture
def biology():
    return BIOLOGY
