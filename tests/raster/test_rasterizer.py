import numpy as np
import pytest

from heatgrid.errors import DimensionMismatch, InvalidArgument, ValueOutOfRange
from heatgrid.gradients.builders import build_linear_gradient
from heatgrid.gradients.presets import GRADIENT_HEAT
from heatgrid.gradients.table import GradientTable
from heatgrid.raster.geometry import GridGeometry
from heatgrid.raster.rasterizer import as_data_series, color_indices, rasterize
from heatgrid.types.bound_type import OutOfRangePolicy
from ..utils import assert_block_color

BLACK_WHITE_2 = build_linear_gradient((0, 0, 0), (255, 255, 255), 2)
BLACK_WHITE_500 = build_linear_gradient((0, 0, 0), (255, 255, 255), 500)


def test_single_cell_block():
    geo = GridGeometry(rows=1, cols=1, cell_width=2, cell_height=2)
    buf = rasterize([0.0], geo, BLACK_WHITE_2)
    assert (buf.width, buf.height) == (2, 2)
    assert list(buf.data) == [0, 0, 0, 255] * 4


def test_two_entry_table_maps_high_values_to_first_entry():
    geo = GridGeometry(rows=1, cols=2, cell_width=1, cell_height=1)
    buf = rasterize([0.0, 0.99], geo, BLACK_WHITE_2)
    # floor(0.99 * (2 - 1)) == 0
    assert buf.pixel(0, 0) == (0, 0, 0, 255)
    assert buf.pixel(1, 0) == (0, 0, 0, 255)


def test_large_table_maps_high_values_near_the_end():
    geo = GridGeometry(rows=1, cols=2, cell_width=1, cell_height=1)
    buf = rasterize([0.0, 0.99], geo, BLACK_WHITE_500)
    # floor(0.99 * 499) == 494, 494 / 500 * 255 == 251.94 -> 251
    assert buf.pixel(0, 0) == (0, 0, 0, 255)
    assert buf.pixel(1, 0) == (251, 251, 251, 255)


def test_row_major_cell_layout():
    table = GradientTable([[k * 20, 255 - k * 20, k] for k in range(11)])
    geo = GridGeometry(rows=2, cols=3, cell_width=2, cell_height=3)
    data = [0.05, 0.15, 0.25, 0.35, 0.45, 0.55]
    buf = rasterize(data, geo, table)

    assert (buf.width, buf.height) == (6, 6)
    for k in range(6):
        assert_block_color(buf, geo, k, (k * 20, 255 - k * 20, k))


def test_every_pixel_is_opaque():
    geo = GridGeometry(rows=3, cols=4, cell_width=3, cell_height=2)
    data = np.linspace(0.0, 0.999, geo.size)
    buf = rasterize(data, geo, GRADIENT_HEAT)
    assert len(buf) == geo.width * geo.height * 4
    assert np.all(buf.as_array()[..., 3] == 255)


def test_channels_are_truncated_on_write():
    table = GradientTable([[127.9, 0.99, 254.5]])
    geo = GridGeometry(rows=1, cols=1, cell_width=1, cell_height=1)
    buf = rasterize([0.5], geo, table)
    assert buf.pixel(0, 0) == (127, 0, 254, 255)


def test_channels_outside_byte_range_are_clipped():
    table = GradientTable([[-20.0, 300.0, 128.0]])
    geo = GridGeometry(rows=1, cols=1, cell_width=1, cell_height=1)
    buf = rasterize([0.0], geo, table)
    assert buf.pixel(0, 0) == (0, 255, 128, 255)


def test_default_gradient_is_heat():
    geo = GridGeometry(rows=2, cols=2, cell_width=2, cell_height=2)
    data = [0.1, 0.4, 0.6, 0.9]
    assert rasterize(data, geo) == rasterize(data, geo, GRADIENT_HEAT)


def test_plain_color_list_as_gradient():
    geo = GridGeometry(rows=1, cols=2, cell_width=1, cell_height=1)
    buf = rasterize([0.0, 0.99], geo, [[10, 20, 30], [40, 50, 60], [70, 80, 90]])
    assert buf.pixel(0, 0) == (10, 20, 30, 255)
    assert buf.pixel(1, 0) == (40, 50, 60, 255)


def test_rasterize_is_idempotent():
    geo = GridGeometry(rows=5, cols=7, cell_width=3, cell_height=4)
    data = list(np.random.default_rng(7).random(geo.size))
    first = rasterize(data, geo, GRADIENT_HEAT)
    second = rasterize(data, geo, GRADIENT_HEAT)
    assert first.tobytes() == second.tobytes()
    assert first.data is not second.data


def test_two_dimensional_array_is_flattened_row_major():
    table = GradientTable([[k * 20, 0, 0] for k in range(11)])
    geo = GridGeometry(rows=2, cols=2, cell_width=1, cell_height=1)
    field = np.array([[0.05, 0.15], [0.25, 0.35]])
    buf = rasterize(field, geo, table)
    assert [buf.pixel(x, y)[0] for y in range(2) for x in range(2)] == [0, 20, 40, 60]


@pytest.mark.parametrize("length", [0, 3, 5])
def test_dimension_mismatch(length):
    geo = GridGeometry(rows=2, cols=2, cell_width=1, cell_height=1)
    with pytest.raises(DimensionMismatch, match="rows \\* cols"):
        rasterize([0.5] * length, geo, BLACK_WHITE_2)


def test_dimension_mismatch_is_value_error():
    geo = GridGeometry(rows=2, cols=2, cell_width=1, cell_height=1)
    with pytest.raises(ValueError):
        rasterize([0.5], geo)


@pytest.mark.parametrize("data", [
    "0.5",
    b"\x00",
    {0: 0.5},
    {0.5},
    (x for x in [0.5]),
    0.5,
    None,
    [0.5, "a"],
    [[0.5], [0.5, 0.5]],
])
def test_data_must_be_numeric_sequence(data):
    geo = GridGeometry(rows=1, cols=1, cell_width=1, cell_height=1)
    with pytest.raises(TypeError):
        rasterize(data, geo)


def test_empty_gradient_rejected():
    geo = GridGeometry(rows=1, cols=1, cell_width=1, cell_height=1)
    with pytest.raises(InvalidArgument):
        rasterize([0.5], geo, GradientTable(np.empty((0, 3))))


def test_out_of_range_values_are_clamped_by_default():
    geo = GridGeometry(rows=1, cols=4, cell_width=1, cell_height=1)
    buf = rasterize([-0.5, 1.0, 7.0, float("nan")], geo, BLACK_WHITE_500)
    top = int(499 / 500 * 255)
    assert buf.pixel(0, 0) == (0, 0, 0, 255)
    assert buf.pixel(1, 0) == (top, top, top, 255)
    assert buf.pixel(2, 0) == (top, top, top, 255)
    assert buf.pixel(3, 0) == (0, 0, 0, 255)


@pytest.mark.parametrize("bad", [-0.01, 1.0, 2.0, float("nan"), float("inf")])
def test_out_of_range_values_raise_under_raise_policy(bad):
    geo = GridGeometry(rows=1, cols=2, cell_width=1, cell_height=1)
    with pytest.raises(ValueOutOfRange, match=r"data\[1\]"):
        rasterize([0.5, bad], geo, BLACK_WHITE_500, out_of_range=OutOfRangePolicy.RAISE)


def test_raise_policy_accepts_in_range_values():
    geo = GridGeometry(rows=1, cols=2, cell_width=1, cell_height=1)
    buf = rasterize([0.0, 0.999], geo, BLACK_WHITE_500, out_of_range="raise")
    assert buf.pixel(0, 0) == (0, 0, 0, 255)


def test_color_indices():
    values = np.array([0.0, 0.25, 0.5, 0.999])
    assert list(color_indices(values, 5)) == [0, 1, 2, 3]
    assert list(color_indices(np.array([1.5, -3.0]), 5)) == [4, 0]
    assert color_indices(values, 1).tolist() == [0, 0, 0, 0]


def test_as_data_series():
    assert as_data_series((1, 0.5)).dtype == np.float64
    assert as_data_series(np.zeros((2, 3), dtype=np.int32)).shape == (6,)
    assert as_data_series([]).shape == (0,)


def test_color_indices_clamps_whole_arrays():
    values = np.array([-0.25, 0.0, 0.5, 1.75, 12.0])
    indices = color_indices(values, 9)
    assert indices.dtype == np.intp
    assert indices.tolist() == [0, 0, 4, 8, 8]


def test_many_cells_with_out_of_range_values_and_channels():
    table = GradientTable([[-50.0, 0.0, 128.5], [100.0, 400.0, 255.9]])
    geo = GridGeometry(rows=2, cols=2, cell_width=2, cell_height=1)
    buf = rasterize([-1.0, 0.2, 1.0, 3.0], geo, table)
    assert_block_color(buf, geo, 0, (0, 0, 128))
    assert_block_color(buf, geo, 1, (0, 0, 128))
    assert_block_color(buf, geo, 2, (100, 255, 255))
    assert_block_color(buf, geo, 3, (100, 255, 255))
