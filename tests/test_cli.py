from typer.testing import CliRunner

from userstore import __version__
from userstore.cli import app, main

runner = CliRunner()


def test_add_list_find_remove(users_file, alice):
    name = str(users_file)

    result = runner.invoke(app, ["-operation", "add", "-fileName", name, "-item", alice])
    assert result.exit_code == 0
    assert result.stdout == ""

    result = runner.invoke(app, ["-operation", "list", "-fileName", name])
    assert result.exit_code == 0
    assert result.stdout == f"[{alice}]"

    result = runner.invoke(app, ["--operation", "findById", "--file-name", name, "--id", "1"])
    assert result.exit_code == 0
    assert result.stdout == alice

    result = runner.invoke(app, ["-operation", "remove", "-fileName", name, "-id", "1"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["-operation", "list", "-fileName", name])
    assert result.stdout == ""


def test_file_name_from_environment(users_file, alice):
    env = {"USERSTORE_FILE": str(users_file)}
    result = runner.invoke(app, ["-operation", "add", "-item", alice], env=env)
    assert result.exit_code == 0
    assert users_file.read_text() == f"[{alice}]"


def test_missing_operation_exit_code(users_file):
    result = runner.invoke(app, ["-fileName", str(users_file)])
    assert result.exit_code == 2
    assert "-operation flag has to be specified" in result.stdout


def test_unknown_operation_exit_code(users_file):
    result = runner.invoke(app, ["-operation", "drop", "-fileName", str(users_file)])
    assert result.exit_code == 2
    assert "Operation drop not allowed!" in result.stdout


def test_not_found_exit_code(users_file):
    result = runner.invoke(app, ["-operation", "findById", "-fileName", str(users_file), "-id", "4"])
    assert result.exit_code == 3
    assert "Item with id 4 not found" in result.stdout


def test_duplicate_exit_code(users_file, alice):
    name = str(users_file)
    runner.invoke(app, ["-operation", "add", "-fileName", name, "-item", alice])
    result = runner.invoke(app, ["-operation", "add", "-fileName", name, "-item", alice])
    assert result.exit_code == 4
    assert "Item with id 1 already exists" in result.stdout


def test_malformed_item_exit_code(users_file):
    result = runner.invoke(app, ["-operation", "add", "-fileName", str(users_file), "-item", "{"])
    assert result.exit_code == 65


def test_storage_error_exit_code(tmp_path):
    name = str(tmp_path / "nope" / "users.json")
    result = runner.invoke(app, ["-operation", "list", "-fileName", name])
    assert result.exit_code == 74


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"v{__version__}"


def test_main_returns_exit_code(users_file, capsys):
    assert main(["-operation", "list", "-fileName", str(users_file)]) == 0
    assert main(["-operation", "findById", "-fileName", str(users_file), "-id", "x"]) == 3
    assert "Item with id x not found" in capsys.readouterr().out


def test_verbose_notes_go_to_stderr(users_file, alice, capsys):
    rc = main(["-operation", "add", "-fileName", str(users_file), "-item", alice, "--verbose"])
    assert rc == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "operation=add" in captured.err
    assert "ok" in captured.err
