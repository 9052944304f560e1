"""
単体テスト: 方向と移動量のテスト
"""

import pytest
from src.hive import Direction, Translation, HORIZONTAL_DIRECTIONS, DirectionError


class TestDirection:
    """方向の代数的な性質を確認するテストクラス"""

    def test_opposite_is_involution(self):
        """opposite を2回適用すると元に戻ることを確認"""
        for direction in Direction:
            assert direction.opposite.opposite == direction

    def test_opposite_of_vertical(self):
        """垂直方向の反対を確認"""
        assert Direction.TOP.opposite == Direction.BOTTOM
        assert Direction.BOTTOM.opposite == Direction.TOP

    def test_opposite_translations_cancel(self):
        """反対方向の移動量の和が0になることを確認"""
        for direction in Direction:
            assert direction.translation + direction.opposite.translation == Translation()

    def test_adjacent_of_up(self):
        """UP の両隣が UPPER_LEFT と UPPER_RIGHT であることを確認"""
        assert Direction.UP.adjacent == [Direction.UPPER_LEFT, Direction.UPPER_RIGHT]

    def test_adjacent_forms_six_cycle(self):
        """時計回りに6回たどると元の方向に戻ることを確認"""
        for start in HORIZONTAL_DIRECTIONS:
            seen = [start]
            current = start.adjacent[1]
            while current != start:
                seen.append(current)
                current = current.adjacent[1]
            assert len(seen) == 6
            assert set(seen) == set(HORIZONTAL_DIRECTIONS)

    def test_adjacent_is_symmetric(self):
        """時計回りの隣の反時計回りの隣は自分自身"""
        for direction in HORIZONTAL_DIRECTIONS:
            assert direction.adjacent[1].adjacent[0] == direction
            assert direction.adjacent[0].adjacent[1] == direction

    def test_adjacent_translations_sum_to_direction(self):
        """両隣の移動量の和が自分の移動量になることを確認"""
        for direction in HORIZONTAL_DIRECTIONS:
            ccw, cw = direction.adjacent
            assert ccw.translation + cw.translation == direction.translation

    def test_adjacent_rejects_vertical(self):
        """垂直方向の adjacent は失敗することを確認"""
        with pytest.raises(DirectionError):
            Direction.TOP.adjacent
        with pytest.raises(DirectionError):
            Direction.BOTTOM.adjacent

    def test_horizontal_translations_are_flat(self):
        """水平方向は高さを変えず、垂直方向は高さだけを変える"""
        for direction in Direction:
            t = direction.translation
            if direction.is_horizontal:
                assert t.z == 0
            else:
                assert (t.x, t.y) == (0, 0)
                assert abs(t.z) == 1

    def test_horizontal_flip(self):
        """左右反転で x だけが反転することを確認"""
        assert Direction.UPPER_RIGHT.horizontal_flip() == Direction.UPPER_LEFT
        assert Direction.LOWER_LEFT.horizontal_flip() == Direction.LOWER_RIGHT
        assert Direction.UP.horizontal_flip() == Direction.UP
        for direction in HORIZONTAL_DIRECTIONS:
            flipped = direction.horizontal_flip().translation
            assert flipped.x == -direction.translation.x
            assert flipped.y == direction.translation.y

    def test_horizontal_flip_rejects_vertical(self):
        """垂直方向の左右反転は ValueError 系の例外になることを確認"""
        with pytest.raises(ValueError):
            Direction.TOP.horizontal_flip()
        with pytest.raises(DirectionError):
            Direction.BOTTOM.horizontal_flip()


class TestTranslation:
    """移動量のテストクラス"""

    def test_addition(self):
        assert Translation(1, 1, 0) + Translation(0, -2, 1) == Translation(1, -1, 1)

    def test_same_column_ignores_elevation(self):
        """高さが違っても水平位置が同じなら同じ列"""
        assert Translation(1, 1, 0).same_column(Translation(1, 1, 2))
        assert not Translation(1, 1, 0).same_column(Translation(1, -1, 0))

    def test_negation(self):
        assert -Translation(1, -1, 1) == Translation(-1, 1, -1)
