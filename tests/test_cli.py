import json

import pytest
from click.testing import CliRunner

from cipherlab.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args), obj={})


def test_encrypt_quiet_prints_raw_output(runner):
    result = _invoke(runner, "--quiet", "encrypt", "HELLO WORLD", "--cipher", "keyword", "--key", "SECRET")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "DTIIL WLOIR"


def test_decrypt_vigenere(runner):
    result = _invoke(runner, "-q", "decrypt", "RIJVS", "-C", "vigenere", "-k", "KEY")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "HELLO"


def test_encrypt_with_custom_alphabet(runner):
    result = _invoke(runner, "-q", "--alphabet", "ABCDEFG", "encrypt", "A!C?E", "-C", "vigenere", "-k", "BAD")
    assert result.output.strip() == "B!C?A"


def test_encrypt_json_output(runner):
    result = _invoke(runner, "-q", "-o", "json", "encrypt", "HELLO", "-C", "atbash")
    report = json.loads(result.output)
    assert report["report_metadata"]["tool"] == "encrypt"
    assert report["result"]["output"] == "SVOOL"


def test_bad_key_exits_with_error(runner):
    result = _invoke(runner, "-q", "encrypt", "HELLO", "-C", "caesar", "-k", "three")
    assert result.exit_code == 1


def test_invalid_alphabet_exits_with_error(runner):
    result = _invoke(runner, "-q", "--alphabet", "AAB", "encrypt", "HI", "-C", "atbash")
    assert result.exit_code == 1


def test_crack_keyword_offline_json(runner):
    result = _invoke(runner, "-q", "-o", "json", "crack-keyword", "DTIIL WLOIR", "--offline")
    assert result.exit_code == 0, result.output

    report = json.loads(result.output)
    crack = report["result"]
    assert crack["verdict"] == "confident_crack"
    assert crack["attempts"][0]["keyword"] == "SECRET"
    assert crack["attempts"][0]["result"] == "HELLO WORLD"
    assert crack["wordlist_source"] == "offline"
    assert len(crack["attempts"]) == 10


def test_crack_keyword_with_wordlist_file(runner, tmp_path):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("# club words\nsecret\n\ncode\n", encoding="utf-8")

    result = _invoke(runner, "-q", "-o", "json", "crack-keyword", "DTIIL WLOIR", "--wordlist", str(wordlist))
    crack = json.loads(result.output)["result"]
    assert crack["candidates_tried"] == 2
    assert crack["wordlist_source"] == "file"
    assert crack["attempts"][0]["keyword"] == "SECRET"


def test_unreadable_wordlist_file_exits_with_error(runner, tmp_path):
    wordlist = tmp_path / "words.txt"
    wordlist.write_bytes(b"SECRET\n\xff\xfe\xfa\n")

    result = _invoke(runner, "-q", "crack-keyword", "DTIIL WLOIR", "--wordlist", str(wordlist))
    assert result.exit_code == 1
    assert "Cannot read word list" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_lowercase_alphabet_exits_with_error(runner):
    result = _invoke(runner, "-q", "--alphabet", "abcdefghijklmnopqrstuvwxyz", "encrypt", "HI", "-C", "atbash")
    assert result.exit_code == 1


def test_json_report_written_to_file(runner, tmp_path):
    out = tmp_path / "reports" / "caesar.json"
    result = _invoke(runner, "-q", "-o", "json", "-f", str(out), "crack-caesar", "KHOOR ZRUOG")
    assert result.exit_code == 0, result.output

    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["result"]["shifts"][0]["shift"] == 3


def test_crack_caesar_console_output(runner):
    result = _invoke(runner, "crack-caesar", "KHOOR ZRUOG")
    assert result.exit_code == 0, result.output
    assert "HELLO WORLD" in result.output


def test_crack_railfence_range_options(runner):
    result = _invoke(runner, "-q", "-o", "json", "crack-railfence", "WECRERDSOEEAIVD", "--max-rails", "4")
    rails = [a["rails"] for a in json.loads(result.output)["result"]["rails"]]
    assert sorted(rails) == [2, 3, 4]


def test_vigenere_keylength_short_text(runner):
    result = _invoke(runner, "-q", "-o", "json", "vigenere-keylength", "TOO SHORT")
    report = json.loads(result.output)
    assert "Not enough letters" in report["summary"]["description"]


def test_unknown_cipher_choice_is_rejected(runner):
    result = _invoke(runner, "encrypt", "HELLO", "-C", "enigma")
    assert result.exit_code == 2
