from minishell.builtins import builtin_export, builtin_unset, format_exports
from minishell.environment import Environment


def make_env(**values):
    return Environment.from_environ(values)


def test_format_exports_with_and_without_value():
    env = Environment()
    env.exports.set("A", "1")
    env.exports.set("B", None)
    assert format_exports(env) == ["declare -x B", 'declare -x A="1"']


def test_export_without_arguments_prints_table(capsys):
    env = Environment()
    env.exports.set("NAME", "value")
    assert builtin_export(["export"], env) == 0
    assert capsys.readouterr().out == 'declare -x NAME="value"\n'


def test_export_key_value_sets_both_tables():
    env = Environment()
    builtin_export(["export", "X=hello"], env)
    assert env.variables.get("X") == "hello"
    assert env.exports.get("X") == "hello"


def test_export_joins_following_words():
    env = Environment()
    builtin_export(["export", "X=hello", "world"], env)
    assert env.variables.get("X") == "hello world"
    assert env.exports.get("X") == "hello world"
    assert "world" not in env.exports


def test_export_join_stops_at_next_assignment():
    env = Environment()
    builtin_export(["export", "A=1", "b", "C=2"], env)
    assert env.variables.get("A") == "1 b"
    assert env.variables.get("C") == "2"
    assert "b" not in env.exports


def test_export_empty_value_does_not_join():
    env = Environment()
    builtin_export(["export", "E=", "x"], env)
    assert env.variables.get("E") == ""
    assert env.exports.get("E") == ""
    assert "x" in env.exports
    assert env.exports.get("x") is None
    assert "x" not in env.variables


def test_export_name_only_marks_export():
    env = Environment()
    builtin_export(["export", "NAME"], env)
    assert "NAME" in env.exports
    assert "NAME" not in env.variables


def test_export_name_only_clears_existing_export_value():
    env = make_env(PATH="/bin")
    builtin_export(["export", "PATH"], env)
    assert env.exports.get("PATH") is None
    assert env.variables.get("PATH") == "/bin"


def test_export_invalid_identifier(capsys):
    env = Environment()
    builtin_export(["export", "1abc=2"], env)
    assert capsys.readouterr().out == "bash: export: `1abc': not a valid identifier\n"
    assert "1abc" not in env.variables


def test_export_dollar_identifier(capsys):
    env = Environment()
    builtin_export(["export", "$X=1", "OK=2"], env)
    assert capsys.readouterr().out == "bash: export: `$X': not a valid identifier\n"
    assert env.variables.get("OK") == "2"


def test_export_empty_identifier(capsys):
    env = Environment()
    builtin_export(["export", "=abc"], env)
    assert capsys.readouterr().out == "bash: export: `': not a valid identifier\n"
    assert len(env.exports) == 0


def test_unset_without_arguments(capsys):
    env = Environment()
    assert builtin_unset(["unset"], env) == 0
    assert capsys.readouterr().out == "unset: not enough arguments\n"


def test_unset_removes_from_both_tables():
    env = make_env(A="1", B="2")
    builtin_unset(["unset", "A", "MISSING"], env)
    assert "A" not in env.variables
    assert "A" not in env.exports
    assert env.variables.get("B") == "2"


def test_export_then_unset_round_trip():
    env = Environment()
    builtin_export(["export", "K=v"], env)
    builtin_unset(["unset", "K"], env)
    assert "K" not in env.variables
    assert "K" not in env.exports