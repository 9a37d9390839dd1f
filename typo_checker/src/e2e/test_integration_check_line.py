from pathlib import Path
import pytest
import spelling.candidates as C
from spelling import Dictionary, TypoChecker, TypoInfo

def _seed(tmp: Path) -> str:
    words = tmp / "words.txt"
    words.write_text("hello\nworld\n", encoding="utf-8")
    return str(words)

@pytest.mark.e2e
def test_misspelled_words_get_suggestions(tmp_path: Path):
    checker = TypoChecker(dictionary_file=_seed(tmp_path))
    typos = checker.check_line("helloo warld")
    by_word = {t.word: t for t in typos}
    assert set(by_word) == {"helloo", "warld"}
    assert by_word["helloo"].suggestions[0] == "hello"
    assert "world" in by_word["warld"].suggestions

@pytest.mark.e2e
def test_transposition_needs_distance_two(tmp_path: Path):
    words = _seed(tmp_path)
    near = TypoChecker(dictionary_file=words, levenshtein_distance=1)
    assert near.check_line("helloo wrold") == [TypoInfo("helloo", ("hello", "hellos"))]
    far = TypoChecker(dictionary_file=words, levenshtein_distance=2)
    wrold = far.find_typo("wrold")
    assert wrold is not None and "world" in wrold.suggestions

@pytest.mark.e2e
def test_known_and_derived_words_are_not_typos(tmp_path: Path):
    checker = TypoChecker(dictionary_file=_seed(tmp_path))
    assert checker.check_line("Hello worlds, helloing!") == []

@pytest.mark.e2e
def test_short_words_are_never_checked(tmp_path: Path):
    checker = TypoChecker(dictionary_file=_seed(tmp_path))
    assert checker.check_line("cat helo") == []
    loose = TypoChecker(dictionary_file=_seed(tmp_path), min_word_len=4)
    assert [t.word for t in loose.check_line("cat helo")] == ["helo"]

@pytest.mark.e2e
def test_unknown_word_without_neighbours_is_ignored(tmp_path: Path):
    checker = TypoChecker(dictionary_file=_seed(tmp_path))
    assert checker.find_typo("zzzzzzzz") is None
    assert checker.cache_size == 0

@pytest.mark.e2e
def test_cache_skips_candidate_generation(tmp_path: Path, monkeypatch):
    checker = TypoChecker(dictionary_file=_seed(tmp_path))
    calls = []
    real = C.generate_candidates

    def counting(word, *args, **kwargs):
        calls.append(word)
        return real(word, *args, **kwargs)

    monkeypatch.setattr(C, "generate_candidates", counting)
    first = checker.find_typo("helloo")
    second = checker.find_typo("helloo")
    assert first == second
    assert calls == ["helloo"]
    assert checker.cache_size == 1

    checker.check_line("another line with helloo")
    assert calls == ["helloo", "another"]

@pytest.mark.e2e
def test_cache_is_per_checker(tmp_path: Path):
    words = _seed(tmp_path)
    a = TypoChecker(dictionary_file=words)
    b = TypoChecker(dictionary_file=words)
    a.find_typo("helloo")
    assert a.cache_size == 1 and b.cache_size == 0

@pytest.mark.e2e
@pytest.mark.parametrize("kwargs", [{"min_word_len": 0}, {"levenshtein_distance": 0}])
def test_rejects_bad_options(tmp_path: Path, kwargs):
    with pytest.raises(ValueError):
        TypoChecker(dictionary_file=_seed(tmp_path), **kwargs)

@pytest.mark.e2e
def test_prebuilt_dictionary_skips_word_list_files(tmp_path: Path):
    checker = TypoChecker(dictionary=Dictionary(["hello"]),
                          dictionary_file=tmp_path / "missing.txt",
                          keyword_file=tmp_path / "also-missing.txt")
    assert len(checker.dictionary) == 1
    assert checker.find_typo("helloo") == TypoInfo("helloo", ("hello",))
    assert not hasattr(checker, "keyword_file")
