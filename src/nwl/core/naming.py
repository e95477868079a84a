"""
Identifier casing and binding-name derivation.

Word boundaries are `_`, `-` and space. Characters other than the first
letter of each word pass through unchanged, so `to_camel_case` leaves an
already PascalCase name PascalCase.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_SEPARATORS = frozenset("_- ")


def _join_words(name: str, capitalize_first: bool) -> str:
    result: list[str] = []
    capitalize = capitalize_first
    for char in name:
        if char in WORD_SEPARATORS:
            capitalize = True
        elif capitalize:
            result.append(char.upper())
            capitalize = False
        else:
            result.append(char)
    return "".join(result)


def to_pascal_case(name: str) -> str:
    """
    Convert a name to PascalCase.

    Examples:
        >>> to_pascal_case("hello_world")
        'HelloWorld'
        >>> to_pascal_case("user-profile page")
        'UserProfilePage'
    """
    return _join_words(name, capitalize_first=True)


def to_camel_case(name: str) -> str:
    """
    Convert a name to camelCase without lowering the first character.

    Examples:
        >>> to_camel_case("first_name")
        'firstName'
        >>> to_camel_case("Counter")
        'Counter'
    """
    return _join_words(name, capitalize_first=False)


@dataclass(frozen=True)
class Binding:
    """
    Accessor/mutator pair derived from a state name.

    Mirrors the `[value, setValue]` pair returned by a state hook.
    """

    name: str

    @property
    def accessor(self) -> str:
        return to_camel_case(self.name)

    @property
    def mutator(self) -> str:
        return f"set{to_pascal_case(self.name)}"

    def set(self, expression: str) -> str:
        """Call expression assigning `expression` to the bound state."""
        return f"{self.mutator}({expression})"

    def hook(self, initial: str) -> str:
        """Destructuring target for a state hook declaration."""
        return f"[{self.accessor}, {self.mutator}] = useState({initial})"


def component_name(page_name: str) -> str:
    """Component identifier for a page."""
    return to_pascal_case(page_name)


def module_name(page_name: str) -> str:
    """Module (file stem) for a page's component."""
    return component_name(page_name).lower()
