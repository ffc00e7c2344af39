import random

from teamwordle.config.game_settings import DEFAULT_WORDS
from teamwordle.services.word_catalog import WordCatalog, load_word_list


def test_load_word_list_normalizes_and_filters(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('crane\r\nSLATE\nabc\nto-do\n  smile  \nTOOLONG\n12345\n\n', encoding='utf-8')

    assert load_word_list(str(path)) == ['CRANE', 'SLATE', 'SMILE']


def test_load_word_list_missing_file_returns_none(tmp_path):
    assert load_word_list(str(tmp_path / 'nope.txt')) is None
    assert load_word_list(None) is None


def test_both_lists_missing_uses_builtin_words(tmp_path):
    catalog = WordCatalog(str(tmp_path / 'a.txt'), str(tmp_path / 'b.txt'))

    assert catalog.using_fallback
    assert catalog.allowed_list == list(DEFAULT_WORDS)
    assert catalog.answer_list == list(DEFAULT_WORDS)
    assert catalog.draw_answer() in DEFAULT_WORDS


def test_empty_allowed_list_mirrors_answers(tmp_path):
    answers = tmp_path / 'answers.txt'
    answers.write_text('CRANE\nSLATE\n', encoding='utf-8')
    allowed = tmp_path / 'allowed.txt'
    allowed.write_text('not-a-word\n', encoding='utf-8')

    catalog = WordCatalog(str(allowed), str(answers))

    assert catalog.allowed_list == ['CRANE', 'SLATE']
    assert catalog.is_allowed('SLATE')
    assert not catalog.using_fallback


def test_missing_answer_list_mirrors_allowed(tmp_path):
    allowed = tmp_path / 'allowed.txt'
    allowed.write_text('brine\n', encoding='utf-8')

    catalog = WordCatalog(str(allowed), str(tmp_path / 'missing.txt'))

    assert catalog.answer_list == ['BRINE']
    assert catalog.draw_answer() == 'BRINE'


def test_membership_uses_union_of_both_lists():
    catalog = WordCatalog(allowed_words=['SLATE'], answer_words=['CRANE'])

    assert catalog.is_allowed('SLATE')
    assert catalog.is_allowed('CRANE')
    assert catalog.is_allowed('crane')
    assert not catalog.is_allowed('ZZZZZ')
    assert not catalog.is_allowed(None)


def test_draw_answer_only_draws_from_answer_list():
    catalog = WordCatalog(allowed_words=['SLATE', 'BRINE'], answer_words=['CRANE', 'TRACE'],
                          rng=random.Random(3))

    draws = {catalog.draw_answer() for _ in range(50)}

    assert draws <= {'CRANE', 'TRACE'}
    assert len(draws) == 2


def test_statistics_reports_sizes():
    catalog = WordCatalog(allowed_words=['SLATE'], answer_words=['CRANE', 'CRATE'])

    stats = catalog.statistics()

    assert stats['allowed_words'] == 1
    assert stats['answer_words'] == 2
    assert stats['vocabulary_size'] == 3
    assert stats['using_fallback'] is False
    assert ('C', 2) in stats['most_common_letters']


def test_undecodable_lines_are_dropped_individually(tmp_path):
    allowed = tmp_path / 'allowed.txt'
    allowed.write_bytes(b'crane\nslate\n\xff\xfe\ntrace\n')

    catalog = WordCatalog(str(allowed), str(tmp_path / 'missing.txt'))

    assert catalog.allowed_list == ['CRANE', 'SLATE', 'TRACE']
    assert catalog.is_allowed('TRACE')
    assert not catalog.using_fallback
