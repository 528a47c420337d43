"""BlurHash format constants."""

BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)
BASE83_INDEX = {char: index for index, char in enumerate(BASE83_ALPHABET)}

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# Field widths in base-83 characters
SIZE_FLAG_WIDTH = 1
MAX_AC_WIDTH = 1
AVERAGE_COLOR_WIDTH = 4
AC_WIDTH = 2
HEADER_WIDTH = SIZE_FLAG_WIDTH + MAX_AC_WIDTH + AVERAGE_COLOR_WIDTH

MAX_AC_LEVELS = 166.0
MAX_AC_QUANT = 82
AC_LEVELS = 19
