"""Options for the Sprig front end."""

from pydantic import BaseModel, ConfigDict


class FrontendOptions(BaseModel):
    """Options controlling a single front-end run.

    Options are always passed explicitly; nothing is read from files or
    the environment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_types: bool = False
    """Raise UnknownTypeError for declared types outside the builtin registry."""

    debug_parser: bool = False
    """Build a fresh Lark parser in debug mode instead of the cached one."""


DEFAULT_OPTIONS = FrontendOptions()
