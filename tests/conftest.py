import numpy as np
import pytest
from PIL import Image

# Terminal size used wherever a test needs automatic sizing
TERMINAL = (80, 24)


def solid(width, height, colour):
    return Image.new("RGB", (width, height), colour)


def checkerboard(size, square=4):
    arr = np.zeros((size, size, 3), dtype=np.uint8)
    for y in range(size):
        for x in range(size):
            if (x // square + y // square) % 2 == 0:
                arr[y, x] = 255
    return Image.fromarray(arr)


@pytest.fixture
def white_image():
    return solid(8, 16, (255, 255, 255))


@pytest.fixture
def black_image():
    return solid(8, 16, (0, 0, 0))


@pytest.fixture
def red_image():
    return solid(8, 16, (255, 0, 0))


@pytest.fixture
def no_env():
    """Empty environment so NO_COLOR on the test host cannot leak in."""
    return {}


def truncated_png(path, size=200):
    """Write a noisy PNG and cut it in half so only decoding can detect the damage."""
    rng = np.random.default_rng(0)
    Image.fromarray(rng.integers(0, 256, size=(size, size, 3), dtype=np.uint8)).save(path)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    return path
