"""
Testing the structured game logger.
"""

from wordl.utils.game_logger import game_logger


def test_sanitized_state_hides_unrevealed_word(game):
    game.submit_guess("world")

    sanitized = game_logger._sanitize_response_data({'success': True, 'state': game.snapshot()})

    assert sanitized['state'] == {
        'state': 'play',
        'attempts': 1,
        'max_attempts': 5,
        'game_over': False,
        'won': False,
        'guesses_count': 1,
        'answer_revealed': False,
    }
    assert 'hello' not in str(sanitized)


def test_sanitized_state_after_win(game):
    game.submit_guess("hello")

    sanitized = game_logger._sanitize_response_data({'state': game.snapshot()})

    assert sanitized['state']['won']
    assert sanitized['state']['answer_revealed']


def test_non_dict_response_is_summarized():
    assert game_logger._sanitize_response_data(['hello']) == {'data_type': 'list'}


def test_log_stats_point_at_todays_file():
    game_logger.logger.info("stats check")

    stats = game_logger.get_log_stats()

    assert stats['log_file'] == str(game_logger.log_file)
    assert stats['file_size_mb'] is not None
