import decimal
import enum


# builtin value types, and the "empty" value each one constructs with no arguments
DEFAULTS = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    decimal.Decimal: decimal.Decimal(0),
    str: "",
    bytes: b"",
    tuple: (),
    list: [],
    dict: {},
    set: set(),
    frozenset: frozenset(),
}


class Presence(enum.StrEnum):
    """Decides which values an Optional treats as absent."""

    # only None is absent
    NONE = "none"

    # None, and the zero value of a builtin value type (0, "", [], ...) are absent
    DEFAULT = "default"

    def is_absent(self, value) -> bool:
        if value is None:
            return True
        if self is not Presence.DEFAULT:
            return False

        # compare against the builtin base, subclasses (enums, namedtuples) may not build without arguments
        for base, default in DEFAULTS.items():
            if isinstance(value, base):
                return value == default
        return False
