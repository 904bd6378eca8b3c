import numpy as np

from braillepic.dither import floyd_steinberg


def _grid(rows):
    return np.array(rows, dtype=np.uint8)


def test_same_input_gives_same_output():
    rng = np.random.default_rng(1)
    grid = rng.integers(0, 256, size=(16, 12, 3), dtype=np.uint8)
    first = floyd_steinberg(grid, 100)
    second = floyd_steinberg(grid, 100)
    assert first.tobytes() == second.tobytes()


def test_input_grid_is_not_modified():
    rng = np.random.default_rng(2)
    grid = rng.integers(0, 256, size=(8, 8, 3), dtype=np.uint8)
    original = grid.copy()
    result = floyd_steinberg(grid, 100)
    np.testing.assert_array_equal(grid, original)
    assert not np.shares_memory(grid, result)


def test_output_is_black_and_white_gray():
    rng = np.random.default_rng(4)
    grid = rng.integers(0, 256, size=(10, 10, 3), dtype=np.uint8)
    result = floyd_steinberg(grid, 128)
    assert result.shape == grid.shape
    assert result.dtype == np.uint8
    assert set(np.unique(result)) <= {0, 255}
    np.testing.assert_array_equal(result[..., 0], result[..., 1])
    np.testing.assert_array_equal(result[..., 0], result[..., 2])


def test_solid_images_are_unchanged():
    white = np.full((4, 4, 3), 255, dtype=np.uint8)
    black = np.zeros((4, 4, 3), dtype=np.uint8)
    np.testing.assert_array_equal(floyd_steinberg(white, 20), white)
    np.testing.assert_array_equal(floyd_steinberg(black, 20), black)


def test_error_pushes_right_neighbour_over_threshold():
    # lum(200, 0, 0) = 59 -> black, error 59; right gets int(59 * 7/16) = 25
    # on its red channel: 180 + 25 = 205 gray, which is above 100.
    grid = _grid([[(200, 0, 0), (180, 0, 0)]])
    result = floyd_steinberg(grid, 100)
    np.testing.assert_array_equal(result, _grid([[(0, 0, 0), (255, 255, 255)]]))


def test_first_pixel_uses_full_luminance():
    # lum(180, 0, 0) = 53
    grid = _grid([[(180, 0, 0)]])
    result = floyd_steinberg(grid, 100)
    np.testing.assert_array_equal(result, _grid([[(0, 0, 0)]]))


def test_neighbours_are_rewritten_from_red_channel():
    # zero error still turns the neighbour into gray(180)
    grid = _grid([[(0, 0, 0), (180, 0, 0)]])
    result = floyd_steinberg(grid, 100)
    np.testing.assert_array_equal(result, _grid([[(0, 0, 0), (255, 255, 255)]]))


def test_error_pushes_pixel_below():
    # below gets int(59 * 5/16) = 18: 180 + 18 = 198
    grid = _grid([[(200, 0, 0)], [(180, 0, 0)]])
    result = floyd_steinberg(grid, 100)
    np.testing.assert_array_equal(result, _grid([[(0, 0, 0)], [(255, 255, 255)]]))


def test_negative_error_is_clamped():
    grid = _grid([[(200, 200, 200), (10, 10, 10)]])
    result = floyd_steinberg(grid, 128)
    np.testing.assert_array_equal(result, _grid([[(255, 255, 255), (0, 0, 0)]]))


def test_mid_gray_dithers_to_about_half_white():
    grid = np.full((32, 32, 3), 128, dtype=np.uint8)
    result = floyd_steinberg(grid, 127)
    white_fraction = (result[..., 0] == 255).mean()
    assert 0.4 < white_fraction < 0.6


def test_empty_grid():
    grid = np.zeros((0, 0, 3), dtype=np.uint8)
    assert floyd_steinberg(grid, 20).shape == (0, 0, 3)
