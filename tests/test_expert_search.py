"""Tests for the expert tier's two-ply search."""

from dotsboxes.ai.components import collect_cold
from dotsboxes.ai.edges import EdgeSnapshot, classify
from dotsboxes.ai.expert_search import ExpertSearch
from dotsboxes.ai.factory import AIFactory
from dotsboxes.ai.heuristics import best_safe_edge, rank_safe_edges
from dotsboxes.models import AIConfig, DifficultyTier
from tests.helpers import board_state, h, v


def _differential(board) -> int:
    scores = board.scores
    player = board.current_player
    return scores[player] - scores[3 - player]


class TestEvaluate:
    def test_root_player_is_fixed_at_construction(self, capture_board) -> None:
        search = ExpertSearch(capture_board)
        assert search.player == 1

    def test_counts_positions(self, chain_board) -> None:
        search = ExpertSearch(chain_board)
        search.evaluate()
        search.evaluate()
        assert search.positions_evaluated == 2

    def test_chain_position_value(self, chain_board) -> None:
        # mover must open the only chain; the opponent takes all four
        scores = chain_board.scores
        player = chain_board.current_player
        expected = scores[player] - scores[3 - player] - 4
        assert ExpertSearch(chain_board).evaluate() == expected


class TestBestCloser:
    def test_prefers_double_capture(self, capture_board) -> None:
        """Should take the pair first: 3 for V(0,1) against 2 for V(1,1)."""
        search = ExpertSearch(capture_board)
        edge = search.best_closer(classify(capture_board))
        assert edge == v(capture_board, 0, 1)

    def test_leaves_board_unchanged(self, capture_board) -> None:
        before = board_state(capture_board)
        ExpertSearch(capture_board).best_closer(classify(capture_board))
        assert board_state(capture_board) == before

    def test_respects_candidate_cap(self, capture_board) -> None:
        search = ExpertSearch(capture_board, max_closer_candidates=1)
        search.best_closer(classify(capture_board))
        assert search.positions_evaluated == 1


class TestBestSafe:
    def test_returns_edge_and_value(self, empty_board) -> None:
        snapshot = classify(empty_board)
        edge, value = ExpertSearch(empty_board).best_safe(snapshot)
        assert edge in snapshot.safes
        assert isinstance(value, int)

    def test_leaves_board_unchanged(self, empty_board) -> None:
        before = board_state(empty_board)
        ExpertSearch(empty_board).best_safe(classify(empty_board))
        assert board_state(empty_board) == before

    def test_without_safes(self, chain_board) -> None:
        search = ExpertSearch(chain_board)
        assert search.best_safe(classify(chain_board)) == (None, None)


class TestConsiderSacrifice:
    def _snapshot(self, safes: int) -> EdgeSnapshot:
        return EdgeSnapshot(free=(), closers=(), safes=tuple(range(safes)))

    def test_skipped_without_safe_value(self, chain_board) -> None:
        search = ExpertSearch(chain_board)
        assert search.consider_sacrifice(self._snapshot(0), None) is None

    def test_skipped_when_safe_edge_is_not_losing(self, chain_board) -> None:
        search = ExpertSearch(chain_board)
        assert search.consider_sacrifice(self._snapshot(0), 0) is None

    def test_skipped_with_many_safes(self, chain_board) -> None:
        search = ExpertSearch(chain_board, sacrifice_safe_threshold=2)
        assert search.consider_sacrifice(self._snapshot(3), -10) is None
        assert search.positions_evaluated == 0

    def test_takes_sacrifice_that_beats_margin(self, chain_board, monkeypatch) -> None:
        search = ExpertSearch(chain_board, sacrifice_margin=2)
        monkeypatch.setattr(search, "_probe", lambda edge: 10)
        edge = search.consider_sacrifice(self._snapshot(1), -5)
        assert edge == v(chain_board, 0, 0)

    def test_improvement_must_exceed_margin(self, chain_board, monkeypatch) -> None:
        search = ExpertSearch(chain_board, sacrifice_margin=2)
        monkeypatch.setattr(search, "_probe", lambda edge: -3)
        assert search.consider_sacrifice(self._snapshot(1), -5) is None

    def test_no_sacrifice_candidates(self, chain_board, monkeypatch) -> None:
        search = ExpertSearch(chain_board, max_sacrifice_candidates=0)
        monkeypatch.setattr(search, "_probe", lambda edge: 10)
        assert search.consider_sacrifice(self._snapshot(1), -5) is None


class TestTwoPlyOnRealPositions:
    """Search outcomes that depend on the opponent's best reply."""

    def test_reply_overturns_one_ply_ranking(self, top_row_board) -> None:
        board = top_row_board
        snapshot = classify(board)
        top_ranked = rank_safe_edges(board, snapshot.safes)[0]
        assert top_ranked == h(board, 0, 1)
        assert best_safe_edge(board, snapshot.safes) == top_ranked

        # After H(0,1) the opponent answers on the right box and leaves a
        # three-box chain for us to open. V(0,2) leaves no safe reply.
        edge, value = ExpertSearch(board).best_safe(snapshot)
        assert edge == v(board, 0, 2)
        assert value == _differential(board) - 1

    def test_top_ranked_edge_value_includes_reply(self, top_row_board) -> None:
        board = top_row_board
        search = ExpertSearch(board)
        undo = board.apply_move(h(board, 0, 1))
        try:
            one_ply = search.evaluate()
            two_ply = search._worst_reply()
        finally:
            board.undo_move(undo)
        base = _differential(board)
        assert one_ply == base + 2
        assert two_ply == base - 3

    def test_expert_and_hard_disagree(self, top_row_board) -> None:
        board = top_row_board
        expert = AIFactory.create(DifficultyTier.EXPERT, AIConfig(rngSeed=1))
        hard = AIFactory.create(DifficultyTier.HARD, AIConfig(rngSeed=1))
        assert expert.select_move(board) == v(board, 0, 2)
        assert hard.select_move(board) == h(board, 0, 1)


class TestSacrificeOnRealPosition:
    def test_position_setup(self, sacrifice_position) -> None:
        board = sacrifice_position
        assert board.current_player == 2
        assert board.scores == {1: 4, 2: 0}
        assert classify(board).safes == (h(board, 0, 1),)
        assert sorted(c.length for c in collect_cold(board)) == [1, 3]

    def test_last_safe_edge_loses(self, sacrifice_position) -> None:
        board = sacrifice_position
        edge, value = ExpertSearch(board).best_safe(classify(board))
        assert edge == h(board, 0, 1)
        assert value == -6

    def test_gives_away_lone_box(self, sacrifice_position) -> None:
        board = sacrifice_position
        before = board_state(board)
        search = ExpertSearch(board)
        snapshot = classify(board)
        _, safe_value = search.best_safe(snapshot)
        assert search.consider_sacrifice(snapshot, safe_value) == h(board, 0, 0)
        assert search._probe(h(board, 0, 0)) == -2
        assert search._probe(v(board, 0, 2)) == -6
        assert board_state(board) == before

    def test_large_margin_keeps_safe_edge(self, sacrifice_position) -> None:
        board = sacrifice_position
        search = ExpertSearch(board, sacrifice_margin=5)
        snapshot = classify(board)
        _, safe_value = search.best_safe(snapshot)
        assert search.consider_sacrifice(snapshot, safe_value) is None

    def test_expert_tier_plays_sacrifice(self, sacrifice_position) -> None:
        ai = AIFactory.create(DifficultyTier.EXPERT, AIConfig(rngSeed=1))
        assert ai.select_move(sacrifice_position) == h(sacrifice_position, 0, 0)
