import os

import pytest

from minishell.environment import Environment
from minishell.expander import (
    expand_variables,
    expand_with_quotes,
    is_name_char,
    split_words,
)


@pytest.fixture
def env():
    return Environment.from_environ({"HOME": "/home/user", "NAME": "world"})


@pytest.mark.parametrize("char", ["a", "Z", "0", "9", "_"])
def test_is_name_char_accepts(char):
    assert is_name_char(char) is True


@pytest.mark.parametrize("char", ["-", "$", " ", "", "."])
def test_is_name_char_rejects(char):
    assert is_name_char(char) is False


def test_split_words_on_blanks():
    assert split_words("  ls\t-l   dir ") == ["ls", "-l", "dir"]


def test_split_words_empty_and_none():
    assert split_words("   ") == []
    assert split_words(None) is None


def test_split_words_rejoin_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split_words(" ".join(words)) == words


def test_plain_variable(env):
    assert expand_with_quotes("$HOME", env, 0) == "/home/user"


def test_double_quotes_expand(env):
    assert expand_with_quotes('"hello $NAME"', env, 0) == "hello world"


def test_single_quotes_do_not_expand(env):
    assert expand_with_quotes("'$HOME'", env, 0) == "$HOME"


def test_other_quote_kept_inside_quotes(env):
    assert expand_with_quotes('"it\'s"', env, 0) == "it's"
    assert expand_with_quotes("'say \"x\"'", env, 0) == 'say "x"'


def test_exit_status(env):
    assert expand_with_quotes("$?", env, 42) == "42"


def test_process_id(env):
    assert expand_with_quotes("$$", env, 0) == str(os.getpid())


def test_lone_dollar(env):
    assert expand_with_quotes("$", env, 0) == "$"
    assert expand_with_quotes("a$", env, 0) == "a$"


def test_invalid_name_start_keeps_dollar(env):
    assert expand_with_quotes("$1x", env, 0) == "$1x"


def test_undefined_variable_is_empty(env):
    assert expand_with_quotes("a$UNDEFINEDb", env, 0) == "a"


def test_name_stops_at_non_name_char(env):
    assert expand_with_quotes("$NAME.txt", env, 0) == "world.txt"


def test_export_value_used_when_variable_missing(env):
    env.exports.set("ONLY_EXPORTED", "val")
    assert expand_with_quotes("$ONLY_EXPORTED", env, 0) == "val"


def test_expand_variables_keeps_quotes(env):
    assert expand_variables("'$NAME'", env, 0) == "'world'"


def test_expand_variables_exit_status(env):
    assert expand_variables("code=$?", env, 7) == "code=7"


def test_none_input(env):
    assert expand_with_quotes(None, env, 0) is None
    assert expand_variables(None, env, 0) is None


def test_text_without_specials_unchanged(env):
    text = "plain-text_123"
    assert expand_with_quotes(text, env, 0) == text
    assert expand_variables(text, env, 0) == text