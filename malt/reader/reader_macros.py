"""Windowed reader macros.

A reader macro looks at a fixed-size window of sibling forms and, when the
window matches, collapses it into a single synthesized call form:

    ' x               -> (quote x)
    ^{meta} form      -> (with-meta form {meta})

Rules run as successive full passes over a sequence, in registration order.
"""

from __future__ import annotations

from typing import Optional, Sequence

from malt import Ast
from malt.types.ast import AstList, ListType
from malt.types.symbol import Symbol


class ReaderMacro:
    """Base rule: inspect a `window`-sized slice, optionally return its replacement."""

    window: int = 1

    def rewrite(self, forms: Sequence[Ast]) -> Optional[Ast]:
        raise NotImplementedError

    def expand(self, seq: list[Ast]) -> None:
        """Rewrite `seq` in place until no window matches.

        After each rewrite the scan restarts from the front so that matches
        exposed by a rewrite are not missed.
        """
        w = self.window
        i = 0
        while i <= len(seq) - w:
            replacement = self.rewrite(seq[i:i + w])
            if replacement is None:
                i += 1
                continue
            seq[i:i + w] = [replacement]
            i = 0


class PrefixMacro(ReaderMacro):
    """`<trigger> form` => `(<name> form)`"""

    window = 2

    def __init__(self, trigger: str, name: str):
        self.trigger = Symbol(trigger)
        self.name = Symbol(name)

    def rewrite(self, forms: Sequence[Ast]) -> Optional[Ast]:
        head, form = forms
        if head != self.trigger:
            return None
        return AstList.parens([self.name, form])

    def __repr__(self) -> str:
        return f"PrefixMacro({self.trigger}, {self.name})"


class WithMetaMacro(ReaderMacro):
    """`^{meta} form` => `(with-meta form {meta})`

    The form comes first and the metadata second, the reverse of source
    order. Callers of with-meta depend on this order.
    """

    window = 3
    trigger = Symbol("^")
    name = Symbol("with-meta")

    def rewrite(self, forms: Sequence[Ast]) -> Optional[Ast]:
        head, meta, form = forms
        if head != self.trigger:
            return None
        if not (isinstance(meta, AstList) and meta.list_type is ListType.BRACE):
            return None
        return AstList.parens([self.name, form, meta])

    def __repr__(self) -> str:
        return "WithMetaMacro()"


class ReaderMacros:
    """
    Registry of reader macros, applied as ordered passes over a sequence.
    """

    def __init__(self):
        self.macros: list[ReaderMacro] = []

    def define(self, macro: ReaderMacro) -> None:
        """Register a rule; it runs after every rule registered before it."""
        self.macros.append(macro)

    def expand(self, seq: list[Ast]) -> list[Ast]:
        for macro in self.macros:
            macro.expand(seq)
        return seq


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

PREFIX_FORMS: dict[str, str] = {
    "'": "quote",
    "`": "quasiquote",
    "@": "deref",
    "~": "unquote",
    "~@": "splice-unquote",
}

reader_macros.define(WithMetaMacro())
for _trigger, _name in PREFIX_FORMS.items():
    reader_macros.define(PrefixMacro(_trigger, _name))
