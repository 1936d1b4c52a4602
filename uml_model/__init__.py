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
"""
Class diagrams, and the consistency of the sequence diagrams that depend on them.

 - Anchor geometry of class boxes in anchors.py
 - Classes and their members in class_entity.py and members.py
 - Override detection in overrides.py
 - Relationships in relationship.py; rebinding an endpoint revalidates the dependent sequence diagrams
 - The class diagram itself in class_diagram.py, with the event dispatcher in dispatcher.py

Everything runs synchronously on the calling thread. None of the mutators are safe to call
from several threads at once without locking by the caller.
"""
from .anchors import AnchorType, compute_anchors
from .class_diagram import ClassDiagram
from .class_entity import ClassEntity
from .config import Configuration
from .dispatcher import EventDispatcher
from .encoding import ExtendibleJsonEncoder, dumps
from .members import Member, MemberKind, Visibility
from .overrides import inherited_methods, overridden_methods
from .point import Point
from .relationship import Relationship, RelationshipKind
from .sequence import Lifeline, Message, SequenceDiagram, SequenceDiagramModel, SequenceMessage

__all__ = [
    "AnchorType",
    "ClassDiagram",
    "ClassEntity",
    "Configuration",
    "EventDispatcher",
    "ExtendibleJsonEncoder",
    "Lifeline",
    "Member",
    "MemberKind",
    "Message",
    "Point",
    "Relationship",
    "RelationshipKind",
    "SequenceDiagram",
    "SequenceDiagramModel",
    "SequenceMessage",
    "Visibility",
    "compute_anchors",
    "dumps",
    "inherited_methods",
    "overridden_methods",
]
