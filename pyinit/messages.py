from termcolor import colored

###############################################################################
# Status prefixes
###############################################################################

CROSSMARK = '[' + colored("✗", "red") + ']'
INFOMARK  = '[' + colored("i", "blue") + ']'

# Width of the uncolored prefix, used to indent continuation lines
_PREFIX_WIDTH = len("[i]")


def _message(prefix: str, *args) -> None:
    lines = '\n'.join(str(arg) for arg in args).split('\n')
    print(f"{prefix} {lines[0]}")
    for line in lines[1:]:
        print(f"{' ' * _PREFIX_WIDTH} {line}")


# Use CROSSMARK for errors
def error(*msg) -> None: _message(CROSSMARK, *msg)

# Use INFOMARK for information
def info(*msg) -> None: _message(INFOMARK, *msg)


def echo(text: str) -> None:
    """Print text verbatim, without a status prefix (help text, API listings)."""
    print(text)
