import pytest

from textify import analysis


def test_character_frequency_counts():
    freq = analysis.get_character_frequency("hello")
    by_char = {row["character"]: row["count"] for row in freq}
    assert by_char["l"] == 2
    assert by_char["h"] == 1


def test_character_frequency_sorted_and_limited():
    freq = analysis.get_character_frequency("aaaaabbbc")
    assert freq[0]["character"] == "a"
    assert freq[0]["count"] == 5
    assert len(analysis.get_character_frequency("abcdefg", False, 3)) == 3


def test_character_frequency_ignores_spaces_and_ties_keep_first_seen_order():
    freq = analysis.get_character_frequency("ba ab\n\t")
    assert [row["character"] for row in freq] == ["b", "a"]
    assert freq[0]["percentage"] == pytest.approx(50.0)
    assert sum(row["percentage"] for row in freq) == pytest.approx(100.0)


def test_character_frequency_case_handling():
    assert len(analysis.get_character_frequency("Aa")) == 1
    assert len(analysis.get_character_frequency("Aa", True)) == 2
    assert analysis.get_character_frequency("") == []


def test_word_frequency():
    freq = analysis.get_word_frequency("the cat and the dog")
    top = freq[0]
    assert top["word"] == "the"
    assert top["count"] == 2
    # relative to all five tokens, not the four distinct words
    assert top["percentage"] == pytest.approx(40.0)


def test_word_frequency_sorted_and_limited():
    freq = analysis.get_word_frequency("a b a c a b")
    assert freq[0]["word"] == "a"
    assert freq[0]["count"] == 3
    assert len(analysis.get_word_frequency("one two three four", limit=2)) == 2
    assert analysis.get_word_frequency("") == []


def test_non_positive_limit_returns_everything():
    assert len(analysis.get_word_frequency("a b a c", limit=-1)) == 3
    assert len(analysis.get_word_frequency("a b a c", limit=0)) == 3
    assert len(analysis.get_character_frequency("abc", limit=-2)) == 3


def test_text_statistics():
    stats = analysis.get_text_statistics("Hello world. This is a test.")
    assert stats["words"] == 6
    assert stats["sentences"] == 2
    assert stats["lines"] == 1
    assert stats["paragraphs"] == 1
    assert stats["characters"] == 28
    assert stats["average_word_length"] == 3.5
    assert stats["average_sentence_length"] == 3.0
    assert stats["longest_word"] == "Hello"
    assert stats["shortest_word"] == "a"
    assert stats["unique_words"] == 6
    assert stats["reading_time"] == "< 1 min read"


def test_text_statistics_unique_words_fold_case():
    stats = analysis.get_text_statistics("The the THE cat.")
    assert stats["words"] == 4
    assert stats["unique_words"] == 2


def test_text_statistics_empty():
    stats = analysis.get_text_statistics("")
    assert stats["words"] == 0
    assert stats["average_word_length"] == 0
    assert stats["average_sentence_length"] == 0
    assert stats["longest_word"] == ""
    assert stats["shortest_word"] == ""


def test_syllable_heuristic():
    assert analysis.count_syllables_in_word("the") == 1
    assert analysis.count_syllables_in_word("reading") == 2
    assert analysis.count_syllables_in_word("make") == 1
    assert analysis.count_syllables_in_word("rhythm") == 1
    assert analysis.count_syllables("the reading") == 3


def test_readability_score():
    score = analysis.calculate_readability_score(
        "The cat sat on the mat. It was a sunny day. Everyone was happy."
    )
    assert 0 < score <= 100
    # very simple text clamps at the top of the range
    assert analysis.calculate_readability_score("The cat sat on the mat.") == 100.0


def test_readability_score_degenerate_inputs():
    assert analysis.calculate_readability_score("") == 0
    # words but no sentence terminator
    assert analysis.calculate_readability_score("no terminal punctuation") == 0


def test_readability_level():
    assert "Very Easy" in analysis.get_readability_level(95)
    assert analysis.get_readability_level(90) == "Very Easy (5th grade)"
    assert analysis.get_readability_level(65) == "Standard (8th-9th grade)"
    assert analysis.get_readability_level(30) == "Difficult (College)"
    assert "Very Difficult" in analysis.get_readability_level(20)


def test_extract_urls():
    urls = analysis.extract_urls(
        "Visit https://example.com and http://test.org/page?x=1 (see https://a.b/c)"
    )
    assert urls == ["https://example.com", "http://test.org/page?x=1", "https://a.b/c"]


def test_extract_emails():
    emails = analysis.extract_emails("Contact test@example.com or admin@test.org.")
    assert emails == ["test@example.com", "admin@test.org"]


def test_extract_hashtags_and_mentions_keep_duplicates():
    assert analysis.extract_hashtags("#awesome and #cool #awesome") == ["#awesome", "#cool", "#awesome"]
    assert analysis.extract_mentions("Hi @john and @jane") == ["@john", "@jane"]
    assert analysis.extract_mentions("") == []


def test_count_occurrences():
    assert analysis.count_occurrences("Hello hello HELLO", "hello", True) == 1
    assert analysis.count_occurrences("Hello hello HELLO", "hello", False) == 3
    assert analysis.count_occurrences("aaaa", "aa") == 2
    assert analysis.count_occurrences("abc", "") == 0


def test_find_all_positions():
    assert analysis.find_all_positions("hello hello world", "hello") == [0, 6]
    assert analysis.find_all_positions("hello world", "xyz") == []
    assert analysis.find_all_positions("aaaa", "aa") == [0, 2]
    assert analysis.find_all_positions("abc", "") == []


def test_find_all_positions_index_original_text():
    # "İ".lower() is two characters long
    text = "İx X"
    positions = analysis.find_all_positions(text, "x")
    assert positions == [1, 3]
    assert [text[p] for p in positions] == ["x", "X"]


def test_positions_agree_with_occurrences():
    cases = [("Hello hello HELLO", "hello"), ("aaaaa", "aa"), ("", "x"), ("abc", ""), ("a.b.c", ".")]
    for text, sub in cases:
        for case_sensitive in (True, False):
            assert len(analysis.find_all_positions(text, sub, case_sensitive)) == \
                analysis.count_occurrences(text, sub, case_sensitive)
