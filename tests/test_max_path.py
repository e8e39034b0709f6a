"""
最大路径长度估计的单元测试
"""

import numpy as np
import pytest

from nugeom.core.data_classes import BoundingBox, Medium
from nugeom.core.max_path import estimate_max_path_lengths, max_path_length_for_code
from nugeom.core.path_length import PathLengthTable
from nugeom.core.sampling import (
    BOX_FACES,
    child_streams,
    make_rng,
    sample_inward_direction,
    sample_point_on_face,
)
from nugeom.testing import BoxSceneNavigator, BoxVolume, create_uniform_box_scene, make_carbon

CARBON = 1000060120


class TestFaceSampling:
    """测试包围盒表面抽样"""

    def test_face_order(self):
        assert [f.name for f in BOX_FACES] == ["TOP", "BOTTOM", "LEFT", "RIGHT", "BACK", "FRONT"]

    @pytest.mark.parametrize("face", BOX_FACES, ids=lambda f: f.name)
    def test_points_on_face(self, face, rng):
        """测试抽样点位于对应表面"""
        box = BoundingBox(origin=[1.0, 2.0, 3.0], half_lengths=[0.5, 1.0, 2.0])
        for _ in range(50):
            point = sample_point_on_face(box, face, rng)
            expected = box.origin[face.axis] + face.sign * box.half_lengths[face.axis]
            assert point[face.axis] == pytest.approx(expected)
            assert box.contains(point, tolerance=1e-12)

    @pytest.mark.parametrize("face", BOX_FACES, ids=lambda f: f.name)
    def test_directions_point_inward(self, face, rng):
        """测试方向指向盒内且为单位向量"""
        for _ in range(50):
            direction = sample_inward_direction(face, rng)
            assert np.linalg.norm(direction) == pytest.approx(1.0)
            assert face.sign * direction[face.axis] <= 0.0

    def test_child_streams_are_prefixes(self):
        """测试子随机流只由种子、键和序号决定"""
        short = [g.random() for g in child_streams(5, (1, 2), 3)]
        long = [g.random() for g in child_streams(5, (1, 2), 6)]
        assert short == long[:3]
        assert len(set(long)) == 6


class TestMaxPathLength:
    """测试最大路径长度估计"""

    def test_cube_bounds(self):
        """测试立方体：L*rho <= 估计值 <= sqrt(3)*L*rho"""
        side, density = 2.0, 1.5
        navigator = create_uniform_box_scene(size=side, material=make_carbon(density))
        table = estimate_max_path_lengths(navigator, [CARBON], n_points=10, n_rays=10,
                                          rng=make_rng(7))
        assert side * density <= table[CARBON] <= np.sqrt(3.0) * side * density + 1e-6

    def test_scale_applied(self):
        """测试长度单位换算"""
        navigator = create_uniform_box_scene(size=1.0)
        raw = estimate_max_path_lengths(navigator, [CARBON], n_points=5, n_rays=5,
                                        rng=make_rng(3))[CARBON]
        scaled = estimate_max_path_lengths(navigator, [CARBON], n_points=5, n_rays=5,
                                           rng=make_rng(3), scale=0.01)[CARBON]
        assert scaled == pytest.approx(0.01 * raw)

    def test_materials_scanned_independently(self, two_slab, iron_code, carbon_code):
        table = estimate_max_path_lengths(two_slab, [iron_code, carbon_code],
                                          n_points=5, n_rays=5, rng=make_rng(5))
        # A slab: 5 x 2 x 2 at density 2, B slab at density 1
        assert 0.0 < table[iron_code] <= 2.0 * np.sqrt(25.0 + 4.0 + 4.0) + 1e-6
        assert 0.0 < table[carbon_code] <= np.sqrt(25.0 + 4.0 + 4.0) + 1e-6

    def test_missing_bounding_box_gives_zero(self, slab_line, iron_code):
        """测试无包围盒时返回全零表"""
        table = PathLengthTable([iron_code])
        table.add_path_length(iron_code, 3.0)
        result = estimate_max_path_lengths(slab_line, [iron_code], table=table)
        assert result is table
        assert result.is_empty()

    def test_single_ray_missing(self, two_slab, iron_code):
        length = max_path_length_for_code(two_slab, np.array([-1.0, 5.0, 0.0]),
                                          np.array([1.0, 0.0, 0.0]), iron_code)
        assert length == 0.0


def _rod_scene(density):
    """细长碳棒：1.0 x 0.2 x 0.2"""
    rod = BoxVolume("Rod", BoundingBox(origin=[0.0, 0.0, 0.0], half_lengths=[0.5, 0.1, 0.1]),
                    medium=Medium("Carbon_medium", make_carbon(density)))
    return BoxSceneNavigator(rod)


class TestMaxPathConvergence:
    """测试抽样数增加时估计值的单调性与收敛"""

    @pytest.mark.parametrize("seed", [11, 12])
    def test_non_decreasing_in_points(self, two_slab, iron_code, carbon_code, seed):
        """测试固定种子下增加表面点数不会使估计值下降"""
        previous = {iron_code: 0.0, carbon_code: 0.0}
        for n_points in range(1, 15):
            table = estimate_max_path_lengths(two_slab, [iron_code, carbon_code],
                                              n_points=n_points, n_rays=3, rng=make_rng(seed))
            for code in previous:
                assert table[code] >= previous[code]
                previous[code] = table[code]

    def test_non_decreasing_in_rays(self, two_slab, iron_code):
        """测试固定种子下增加每点射线数不会使估计值下降"""
        previous = 0.0
        for n_rays in range(1, 12):
            table = estimate_max_path_lengths(two_slab, [iron_code], n_points=3,
                                              n_rays=n_rays, rng=make_rng(4))
            assert table[iron_code] >= previous
            previous = table[iron_code]

    def test_adding_material_keeps_estimate(self, two_slab, iron_code, carbon_code):
        """测试各材料的扫描互不影响"""
        alone = estimate_max_path_lengths(two_slab, [carbon_code], n_points=4, n_rays=4,
                                          rng=make_rng(9))
        both = estimate_max_path_lengths(two_slab, [iron_code, carbon_code], n_points=4,
                                         n_rays=4, rng=make_rng(9))
        assert both[carbon_code] == alone[carbon_code]

    def test_rod_converges_to_longest_chord(self):
        """测试细棒的估计值随抽样数增加趋近最长弦长乘密度"""
        density = 2.0
        navigator = _rod_scene(density)
        code = CARBON
        chord = np.sqrt(1.0 + 0.2 ** 2 + 0.2 ** 2) * density

        errors = []
        for n in (1, 5, 30):
            table = estimate_max_path_lengths(navigator, [code], n_points=n, n_rays=n,
                                              rng=make_rng(2024))
            assert table[code] <= chord + 1e-6
            errors.append(chord - table[code])

        assert errors[0] >= errors[1] >= errors[2]
        assert errors[2] <= 0.1 * chord
