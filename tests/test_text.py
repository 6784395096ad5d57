from hypothesis import given, strategies as st

from drillbook.text import is_palindrome


def test_source_examples():
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("race a car") is False
    assert is_palindrome(" ") is True


def test_empty_string():
    assert is_palindrome("") is True


@given(st.text())
def test_mirrored_text_is_palindrome(s):
    assert is_palindrome(s + s[::-1]) is True


@given(st.text())
def test_result_unchanged_by_reversal(s):
    assert is_palindrome(s) == is_palindrome(s[::-1])


@given(st.text())
def test_case_insensitive(s):
    assert is_palindrome(s.upper()) == is_palindrome(s.lower()) or not s.isascii()


def test_non_ascii_letters_are_ignored():
    assert is_palindrome("a\u00e9a") is True
    assert is_palindrome("\u00e9ab") is False


@given(st.text(alphabet=" ,.:;!?-", min_size=0, max_size=20))
def test_punctuation_only_is_palindrome(s):
    assert is_palindrome(s) is True