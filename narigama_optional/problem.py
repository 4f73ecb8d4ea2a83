"""
Problems raised by misuse of an Optional. Every Problem declares a `title` and a
`kind`, and doubles as the builtin exception it refines.
"""


class ProblemMeta(type):
    """The Problem Metaclass, this will validate your Problems."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        # create the class
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate Problem
        if class_name == "Problem":
            return _cls

        # ensure required fields
        missing = []
        for key in ("title", "kind"):
            if key not in attrs:
                missing.append(key)

        if missing:
            fmt = "Can't build a Problem: {} is missing the field(s): {}"
            raise TypeError(fmt.format(class_name, ", ".join(missing)))

        # constructor
        def __init__(self, detail: str | None = None, context: dict | None = None):
            self.detail = detail or self.title
            self.context = context
            Exception.__init__(self, self.detail)

        # make it printable
        def __str__(self):
            fmt = "<{}(kind='{}', title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.kind, self.title, self.detail)

        # diagnostic view, not a wire format
        def to_dict(self) -> dict:
            data = {
                "kind": self.kind,  # a stable slug for the problem
                "title": self.title,  # a generic one liner about the issue
                "detail": self.detail,  # a more contextual one liner about the issue
            }

            # if provided, additional data for debugging, etc...
            if self.context:
                data["context"] = self.context

            return data

        # bolt methods on and return class
        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.to_dict = to_dict
        return _cls


class Problem(Exception, metaclass=ProblemMeta):
    """The Problem base class, extend this to build new Problems.

    class NotAString(Problem, TypeError):
        title = "A string was required"
        kind = "not-a-string"

    raise NotAString("Expected str, got int")
    """


class InvalidArgument(Problem, ValueError):
    """Raised by Optional.of() when handed None."""

    title = "Value cannot be None."
    kind = "invalid-argument"


class IllegalState(Problem, RuntimeError):
    """Raised when reading the value of an empty Optional."""

    title = "No value present."
    kind = "illegal-state"
