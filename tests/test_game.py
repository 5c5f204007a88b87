import unittest

from tetris_board import Grid
from tetris_game import Game, Snapshot
from tetris_piece import OFFSETS, Piece, Shape


class AlwaysRandom:
    """Randomizer stub that keeps returning one catalog index."""
    def __init__(self, index):
        self.index = index

    def next_index(self):
        return self.index


O_INDEX = 4


def make_game(kind=Shape.O, x=4, y=0):
    game = Game(AlwaysRandom(O_INDEX), Grid())
    game.piece = Piece(kind, OFFSETS[kind], x, y)
    return game


class GravityTests(unittest.TestCase):
    def test_o_piece_falls_to_the_floor_and_locks(self):
        game = make_game()
        for _ in range(18):
            self.assertTrue(game.tick())
        self.assertEqual((game.piece.x, game.piece.y), (4, 18))
        self.assertEqual(list(game.grid.filled_cells()), [])

        self.assertFalse(game.tick())
        self.assertEqual(sorted(game.grid.filled_cells()), [(4, 18), (4, 19), (5, 18), (5, 19)])
        # fresh piece at the spawn origin
        self.assertEqual((game.piece.x, game.piece.y), (4, 0))

    def test_piece_lands_on_stack(self):
        game = make_game()
        game.grid.place([(5, 10)])
        while game.tick():
            pass
        self.assertEqual(sorted(game.grid.filled_cells()),
                         [(4, 8), (4, 9), (5, 8), (5, 9), (5, 10)])

    def test_soft_drop_matches_tick(self):
        a, b = make_game(), make_game()
        for _ in range(25):
            a.tick()
            b.soft_drop()
        self.assertEqual(a.snapshot(), b.snapshot())

    def test_lock_clears_completed_row(self):
        game = make_game(x=6)
        game.grid.place([(x, 19) for x in range(10) if x not in (6, 7)])
        game.grid.place([(0, 17)])
        with self.assertLogs("tetris_game", level="INFO") as logs:
            while game.tick():
                pass
        self.assertEqual(logs.output, ["INFO:tetris_game:cleared 1 line(s)"])
        self.assertEqual(sorted(game.grid.filled_cells()), [(0, 18), (6, 19), (7, 19)])

    def test_blocked_spawn_keeps_going(self):
        game = make_game()
        game.grid.place([(4, 2), (5, 2)])
        for _ in range(5):
            self.assertFalse(game.tick())
        self.assertEqual(sorted(game.grid.filled_cells()),
                         [(4, 0), (4, 1), (4, 2), (5, 0), (5, 1), (5, 2)])
        self.assertEqual((game.piece.x, game.piece.y), (4, 0))


class MoveTests(unittest.TestCase):
    def test_move_left_and_right(self):
        game = make_game()
        self.assertTrue(game.move_left())
        self.assertEqual(game.piece.x, 3)
        self.assertTrue(game.move_right())
        self.assertTrue(game.move_right())
        self.assertEqual(game.piece.x, 5)

    def test_move_left_at_wall_is_rejected(self):
        game = make_game(kind=Shape.J, x=0, y=5)
        before = game.snapshot()
        self.assertFalse(game.move_left())
        self.assertEqual(game.snapshot(), before)

    def test_move_right_at_wall_is_rejected(self):
        game = make_game(kind=Shape.I, x=6, y=3)
        self.assertFalse(game.move_right())
        self.assertEqual(game.piece.x, 6)

    def test_move_into_locked_cell_is_rejected(self):
        game = make_game(y=10)
        game.grid.place([(3, 11)])
        self.assertFalse(game.move_left())
        self.assertEqual(game.piece.x, 4)

    def test_move_above_the_grid_is_allowed(self):
        game = make_game(kind=Shape.J, x=4, y=-2)
        game.grid.place([(x, 0) for x in range(3)])
        self.assertTrue(game.move_left())
        self.assertEqual(game.piece.cells(), [(3, -2), (3, -1), (3, 0), (4, 0)])


class RotateTests(unittest.TestCase):
    def test_rotate_commits_when_free(self):
        game = make_game(kind=Shape.I, x=4, y=5)
        self.assertTrue(game.rotate())
        self.assertEqual(game.piece.cells(), [(4, 5), (4, 6), (4, 7), (4, 8)])

    def test_rotate_out_of_the_grid_is_rejected(self):
        game = make_game(kind=Shape.J, x=0, y=5)
        self.assertFalse(game.rotate())
        self.assertEqual(game.piece.offsets, OFFSETS[Shape.J])

    def test_rotate_into_locked_cell_is_rejected(self):
        game = make_game(kind=Shape.I, x=4, y=5)
        game.grid.place([(4, 8)])
        self.assertFalse(game.rotate())
        self.assertEqual(game.piece.offsets, OFFSETS[Shape.I])

    def test_rotate_through_floor_is_rejected(self):
        game = make_game(kind=Shape.I, x=2, y=19)
        self.assertFalse(game.rotate())
        self.assertEqual(game.piece.cells(), [(2, 19), (3, 19), (4, 19), (5, 19)])


class SnapshotTests(unittest.TestCase):
    def test_snapshot_shape(self):
        game = make_game()
        game.grid.place([(0, 19)])
        snap = game.snapshot()
        self.assertIsInstance(snap, Snapshot)
        self.assertEqual(len(snap.grid), 20)
        self.assertTrue(snap.grid[19][0])
        self.assertEqual(snap.piece, ((4, 0), (4, 1), (5, 0), (5, 1)))

    def test_snapshot_is_detached(self):
        game = make_game()
        snap = game.snapshot()
        game.grid.place([(0, 19)])
        game.tick()
        self.assertFalse(snap.grid[19][0])
        self.assertEqual(snap.piece[0], (4, 0))


if __name__ == "__main__":
    unittest.main()
