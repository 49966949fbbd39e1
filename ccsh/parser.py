from dataclasses import dataclass, field

from ccsh.errors import ParseError

PIPE = "|"


@dataclass(frozen=True)
class Command:
    """One stage of a pipeline: program name plus its arguments."""
    name: str
    arguments: tuple = field(default_factory=tuple)

    @property
    def argv(self):
        return [self.name, *self.arguments]

    def __str__(self):
        return " ".join(self.argv)


def tokenize_command(segment):
    """
    Split one pipe segment on whitespace.
    Returns: (name, arguments)
    """
    tokens = segment.split()
    name = tokens[0].strip()
    arguments = tuple(tok.strip() for tok in tokens[1:])
    return name, arguments


def parse_command(line):
    """
    Parse a raw input line into pipeline stages.
    Returns: list of Command (empty for a blank line)
    """
    if not line.strip():
        return []

    commands = []
    for segment in line.split(PIPE):
        if not segment.strip():
            raise ParseError(line)
        name, arguments = tokenize_command(segment)
        commands.append(Command(name, arguments))

    return commands


def format_pipeline(commands):
    """Join commands back into a single normalized line."""
    return f" {PIPE} ".join(str(cmd) for cmd in commands)
