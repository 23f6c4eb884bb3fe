"""Symbol table for Sprig semantic analysis.

Names live in one flat namespace: there is no nesting and no shadowing.
Builtin types are kept in a separate registry that ordinary lookups never
consult.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from sprig.log import get_logger

logger = get_logger(__name__)

BUILTIN_TYPE_NAMES = ("INTEGER", "REAL")
"""Names of the builtin types, in registration order."""


class SymbolKind(Enum):
    """Kind of binding in the symbol table."""

    VARIABLE = auto()
    PARAMETER = auto()
    FUNCTION = auto()
    CLASS = auto()


@dataclass(frozen=True)
class BuiltinSymbol:
    """A builtin type usable in declarations."""

    name: str


@dataclass(frozen=True)
class VarSymbol:
    """A declared name and the builtin type it was resolved to."""

    name: str
    type: BuiltinSymbol | None = None
    """Resolved type; None when the declaration was untyped or unresolvable."""

    kind: SymbolKind = SymbolKind.VARIABLE


def builtin_symbols() -> dict[str, BuiltinSymbol]:
    """Build a fresh builtin registry.

    Returns:
        Mapping of type name to BuiltinSymbol for INTEGER and REAL.

    """
    return {name: BuiltinSymbol(name) for name in BUILTIN_TYPE_NAMES}


@dataclass
class SymbolTable:
    """Flat name-to-symbol mapping plus the builtin type registry."""

    builtins: dict[str, BuiltinSymbol] = field(default_factory=builtin_symbols)
    _symbols: dict[str, VarSymbol] = field(default_factory=dict)

    def define(
        self,
        name: str,
        type_: BuiltinSymbol | None = None,
        *,
        kind: SymbolKind = SymbolKind.VARIABLE,
    ) -> VarSymbol:
        """Bind a name, replacing any earlier binding.

        Duplicate checks are the caller's job.

        Args:
            name: Name to bind.
            type_: Resolved builtin type, if any.
            kind: Kind of binding.

        Returns:
            The created VarSymbol.

        """
        symbol = VarSymbol(name=name, type=type_, kind=kind)
        self._symbols[name] = symbol
        logger.debug(
            "Defined %s %s of type %s",
            kind.name.lower(),
            name,
            type_.name if type_ else None,
        )
        return symbol

    def lookup(self, name: str) -> VarSymbol | None:
        """Look up a declared name.

        Args:
            name: Name to look up.

        Returns:
            The VarSymbol if bound, None otherwise. Builtins are never returned.

        """
        return self._symbols.get(name)

    def lookup_builtin(self, name: str) -> BuiltinSymbol | None:
        """Look up a builtin type by name."""
        return self.builtins.get(name)

    def all_symbols(self) -> dict[str, VarSymbol]:
        """Return a copy of all bindings in definition order."""
        return dict(self._symbols)

    def symbols_of_kind(self, kind: SymbolKind) -> list[VarSymbol]:
        """Return all bindings of one kind."""
        return [s for s in self._symbols.values() if s.kind == kind]

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
