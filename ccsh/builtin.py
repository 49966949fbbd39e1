import os
from enum import Enum
from ccsh.history import show_history


class Builtin(Enum):
    CD = "cd"
    PWD = "pwd"
    EXIT = "exit"
    HISTORY = "history"


def lookup_builtin(name):
    """Returns: Builtin member, or None when `name` is an external command"""
    try:
        return Builtin(name)
    except ValueError:
        return None


def builtin_cd(args):
    """Change directory"""
    if not args:
        path = os.path.expanduser("~")
    elif not args[0]:
        path = "."
    else:
        path = args[0]

    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"cd: {e}")
        return 1


def builtin_pwd():
    """Print working directory"""
    print(os.getcwd())
    return 0


def builtin_history(history):
    """Show command history"""
    show_history(history)
    return 0


def execute_builtin(builtin, command, history):
    """
    Run a built-in other than `exit`, which the session handles.
    Returns: exit_code
    """
    if builtin is Builtin.CD:
        return builtin_cd(command.arguments)
    elif builtin is Builtin.PWD:
        return builtin_pwd()
    elif builtin is Builtin.HISTORY:
        return builtin_history(history)
    raise ValueError(f"{builtin.value} is handled by the shell session")
