"""
Copyright© 2024 Evert van de Waal

This file is part of uml_model.

uml_model is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

uml_model is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with Foobar; if not, write to the Free Software
Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
"""
from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Self


class Visibility(IntEnum):
    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()
    PACKAGE = auto()

    @property
    def symbol(self) -> str:
        return visibility_symbols[self]

visibility_symbols = {
    Visibility.PUBLIC: '+',
    Visibility.PROTECTED: '#',
    Visibility.PRIVATE: '-',
    Visibility.PACKAGE: '~',
}


class MemberKind(IntEnum):
    FIELD = auto()
    METHOD = auto()


@dataclass(frozen=True)
class Member:
    """ A field or method declared in a class.

        Members are values: two classes declaring `speak(): void` hold equal members, which is how
        overrides are detected. The visibility is not part of that comparison, so a subclass can
        re-declare an inherited member with a different visibility and still be matched against it.
        Members are never changed in place; a class replaces them wholesale.
    """
    name: str
    type: str = ''
    visibility: Visibility = field(default=Visibility.PUBLIC, compare=False)
    kind: MemberKind = MemberKind.METHOD

    @classmethod
    def new_field(cls, name: str, type: str = '', visibility: Visibility = Visibility.PRIVATE) -> Self:
        return cls(name, type, visibility, MemberKind.FIELD)

    @classmethod
    def new_method(cls, name: str, type: str = '', visibility: Visibility = Visibility.PUBLIC) -> Self:
        return cls(name, type, visibility, MemberKind.METHOD)

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    def __str__(self):
        name = f"{self.name}()" if self.kind == MemberKind.METHOD else self.name
        if self.type:
            return f"{self.visibility.symbol} {name}: {self.type}"
        return f"{self.visibility.symbol} {name}"

    def asdict(self):
        return dict(name=self.name, type=self.type, visibility=self.visibility.name, kind=self.kind.name)
