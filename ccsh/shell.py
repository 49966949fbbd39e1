import sys
from ccsh.config import PROMPT, HISTORY_FILE, NO_COMMANDS_MSG, UNKNOWN_COMMAND_MSG
from ccsh.errors import ParseError, PipelineError, HistoryError
from ccsh.history import load_history, save_history
from ccsh.builtin import Builtin, lookup_builtin, execute_builtin
from ccsh.parser import parse_command
from ccsh.executor import execute_pipeline


class ShellSession:
    """
    State of one interactive session: the in-memory history, where it is
    persisted, and the status of the last command.
    """

    def __init__(self, history, history_file=HISTORY_FILE):
        self.history = history
        self.history_file = history_file
        self.last_status = 0

    @classmethod
    def start(cls, history_file=HISTORY_FILE):
        """Load history and open a session. HistoryError here is fatal."""
        return cls(load_history(history_file), history_file)

    def finish(self):
        """Persist history; a failure is reported but never blocks exit"""
        try:
            save_history(self.history, self.history_file)
        except HistoryError as e:
            print(f"Warning: Could not save history: {e}", file=sys.stderr)

    def run_line(self, line):
        """
        One read-eval iteration.
        Returns: False once `exit` was requested, True otherwise
        """
        try:
            cmds = parse_command(line)
        except ParseError as e:
            print(f"ccsh: {e}")
            self.last_status = 2
            self.history.append(line.strip())
            return True

        if not cmds:
            print(NO_COMMANDS_MSG)
            return True

        builtin = lookup_builtin(cmds[0].name)
        if builtin is Builtin.EXIT:
            self.finish()
            self.last_status = 0
            return False

        if builtin is not None:
            self.last_status = execute_builtin(builtin, cmds[0], self.history)
        else:
            self.last_status = self.run_pipeline(cmds)

        self.history.append(line.strip())
        return True

    def run_pipeline(self, cmds):
        # Stages write straight to fd 1
        sys.stdout.flush()
        try:
            execute_pipeline(cmds)
        except PipelineError:
            print(UNKNOWN_COMMAND_MSG)
            return 1
        return 0


def main_loop(session):
    """Main shell loop"""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            line = Builtin.EXIT.value
        except KeyboardInterrupt:
            print()
            continue

        if not session.run_line(line):
            break
