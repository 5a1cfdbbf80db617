from twentyone.blackjack.constants import GameResult, get_blackjack_value
from twentyone.common.card import Rank


def test_blackjack_values():
    assert get_blackjack_value(Rank.ACE) == 11
    assert get_blackjack_value(Rank.SEVEN) == 7
    for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
        assert get_blackjack_value(rank) == 10


def test_game_result_wins():
    assert GameResult.BLACKJACK.is_win and GameResult.WIN.is_win
    assert not GameResult.PUSH.is_win
