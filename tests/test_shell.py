import pytest

from scosapps.shell import CommandResult, Shell, parse_command


def test_parse_command_splits_word_and_args():
    assert parse_command("cp   a b") == ("cp", "a b")
    assert parse_command("pwd") == ("pwd", "")


def test_empty_command_succeeds_silently():
    assert Shell().execute_command("") == CommandResult(True, "")


def test_unknown_command():
    result = Shell().execute_command("help")
    assert not result.ok
    assert result.output == "Command not found: help"


def test_starts_at_root_and_pwd():
    shell = Shell()
    assert shell.current_directory == "/"
    assert shell.execute_command("pwd") == CommandResult(True, "/")


def test_ls_lists_current_directory():
    result = Shell().execute_command("ls")
    assert result.ok
    lines = result.output.splitlines()
    assert lines[0] == "Files in /:"
    assert "readme.txt" in lines
    assert "documents/" in lines


def test_ls_with_path_names_it():
    result = Shell().execute_command("ls /system")
    assert result.output.splitlines()[0] == "Files in /system:"


def test_cd_relative_then_up():
    shell = Shell()
    result = shell.execute_command("cd docs")
    assert shell.current_directory == "/docs"
    assert result.output == "Changed to " + shell.current_directory
    shell.execute_command("cd sub")
    assert shell.current_directory.startswith("/docs/")
    shell.execute_command("cd ..")
    assert shell.current_directory == "/docs"
    shell.execute_command("cd ..")
    assert shell.current_directory == "/"


def test_cd_up_at_root_stays():
    shell = Shell()
    result = shell.execute_command("cd ..")
    assert shell.current_directory == "/"
    assert result.ok


def test_cd_absolute_and_home():
    shell = Shell()
    shell.execute_command("cd /system")
    assert shell.current_directory == "/system"
    result = shell.execute_command("cd")
    assert result.output == "Changed to root directory"
    assert shell.current_directory == "/"


@pytest.mark.parametrize(
    "command, usage",
    [
        ("mkdir", "Usage: mkdir <directory>"),
        ("touch", "Usage: touch <filename>"),
        ("cat", "Usage: cat <filename>"),
        ("rm", "Usage: rm <filename>"),
        ("find", "Usage: find <pattern>"),
        ("cp only", "Usage: cp <source> <destination>"),
        ("mv", "Usage: mv <source> <destination>"),
    ],
)
def test_missing_arguments_report_usage(command, usage):
    assert Shell().execute_command(command) == CommandResult(False, usage)


def test_file_commands_echo_their_argument():
    shell = Shell()
    assert shell.execute_command("mkdir docs").output.endswith("docs")
    assert shell.execute_command("touch notes.txt").output.endswith("notes.txt")
    assert shell.execute_command("rm notes.txt").output.startswith("Removed: ")


def test_cat_readme():
    result = Shell().execute_command("cat readme.txt")
    assert result.ok
    assert result.output.startswith("Welcome to SCos!\n")
    assert result.output.endswith("Type 'help' for available commands.")


def test_cat_missing_file():
    result = Shell().execute_command("cat missing.txt")
    assert not result.ok
    assert result.output == "File not found: missing.txt"


def test_cp_and_mv():
    shell = Shell()
    copied = shell.execute_command("cp a.txt b.txt")
    moved = shell.execute_command("mv a.txt b.txt")
    assert copied.ok and moved.ok
    assert copied.output.startswith("Copied a.txt")
    assert moved.output.startswith("Moved a.txt")


def test_find_reports_readme():
    result = Shell().execute_command("find read")
    assert result.output.splitlines() == ["Searching for: read", "Found: readme.txt"]