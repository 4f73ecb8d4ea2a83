from loguru import logger

from narigama_optional import optional
from narigama_optional import presence
from narigama_optional import problem
from narigama_optional.optional import Optional
from narigama_optional.presence import Presence
from narigama_optional.problem import IllegalState
from narigama_optional.problem import InvalidArgument


# libraries stay quiet until the application opts in with logger.enable("narigama_optional")
logger.disable("narigama_optional")


__all__ = [
    "IllegalState",
    "InvalidArgument",
    "Optional",
    "Presence",
    "optional",
    "presence",
    "problem",
]
