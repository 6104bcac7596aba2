# Standard alphabets, characters sorted by code point.

BASE_2 = "01"
BASE_10 = "0123456789"
BASE_16 = "0123456789ABCDEF"
BASE_62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE_64 = BASE_62 + "+/"

NUMBERS = BASE_10
HEX = BASE_16

LETTERS_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
LETTERS_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTERS = LETTERS_UPPERCASE + LETTERS_LOWERCASE

URL_UNRESERVED_RFC3986 = (
    "-.0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz~"
)
ASCII = "".join(chr(c) for c in range(ord(" "), ord("~") + 1))
