import sys
from ccsh.config import HISTORY_FILE
from ccsh.errors import HistoryError
from ccsh.process_control import init_signal_handlers
from ccsh.shell import ShellSession, main_loop


def main():
    init_signal_handlers()

    try:
        session = ShellSession.start(HISTORY_FILE)
    except HistoryError as e:
        print(f"ccsh: {e}", file=sys.stderr)
        sys.exit(1)

    main_loop(session)
    sys.exit(0)

