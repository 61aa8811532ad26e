from enum import Enum


class Division(str, Enum):
    FIRST = "1XI"
    SECOND = "2XI"


class RecordKind(str, Enum):
    PAIRING = "PAIRING"
    BYE = "BYE"
    MALFORMED = "MALFORMED"  # No bye team and no home/away team
