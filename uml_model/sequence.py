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
from typing import List, Protocol, Sequence, TYPE_CHECKING

from .class_entity import ClassEntity
from .overrides import inherited_methods

if TYPE_CHECKING:
    from .class_diagram import ClassDiagram


###############################################################################
## The interface a sequence diagram offers to the class diagram it depends on.
## Python doesn't need interfaces, these are added for documentation and type checking.
class Message(Protocol):
    def mark_inconsistent_if_affected(self, diagram: "ClassDiagram") -> None:
        """ Re-check this message against the class diagram, flagging it when it is no longer supported. """
        ...

class SequenceDiagram(Protocol):
    def get_messages(self) -> Sequence[Message]:
        ...


###############################################################################
## A straightforward sequence diagram model implementing that interface.
@dataclass(eq=False)
class Lifeline:
    """ An object in a sequence diagram: an instance of a class in the class diagram. """
    name: str
    entity: ClassEntity


@dataclass(eq=False)
class SequenceMessage:
    sender: Lifeline
    receiver: Lifeline
    method_name: str
    inconsistent: bool = False
    evaluations: int = 0

    def mark_inconsistent_if_affected(self, diagram: "ClassDiagram") -> None:
        self.evaluations += 1
        self.inconsistent = not self.is_supported_by(diagram)

    def is_supported_by(self, diagram: "ClassDiagram") -> bool:
        """ A message is supported when both classes are in the diagram, are connected when they differ,
            and the receiver declares or inherits the called method.
        """
        sender, receiver = self.sender.entity, self.receiver.entity
        if diagram.index_of(sender) is None or diagram.index_of(receiver) is None:
            return False
        if sender is not receiver and not any(r.connects(sender, receiver) for r in diagram.relationships):
            return False
        if receiver.has_method(self.method_name):
            return True
        inherited = inherited_methods(receiver, diagram) or []
        return any(m.name == self.method_name for m in inherited)


@dataclass(eq=False)
class SequenceDiagramModel:
    name: str = ''
    lifelines: List[Lifeline] = field(default_factory=list)
    messages: List[SequenceMessage] = field(default_factory=list)

    def add_lifeline(self, name: str, entity: ClassEntity) -> Lifeline:
        lifeline = Lifeline(name, entity)
        self.lifelines.append(lifeline)
        return lifeline

    def add_message(self, sender: Lifeline, receiver: Lifeline, method_name: str) -> SequenceMessage:
        msg = SequenceMessage(sender, receiver, method_name)
        self.messages.append(msg)
        return msg

    def get_messages(self) -> List[SequenceMessage]:
        return list(self.messages)

    def inconsistent_messages(self) -> List[SequenceMessage]:
        return [m for m in self.messages if m.inconsistent]
