# -----------------------------------------------------------------------------
# MIT License
#
# Copyright (c) 2024 rdfvocab Team
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# -----------------------------------------------------------------------------

"""Statements produced by vocabulary terms."""
from typing import Any, NamedTuple, Tuple

from rdflib import Literal, URIRef
from rdflib.term import Node

from rdfvocab.iri import HasIRI


def as_rdflib_node(value: Any) -> Node:
    """Convert a statement component to an rdflib term.

    Terms and IRIs become URIRefs, rdflib nodes are returned unchanged and anything else becomes a Literal.
    """
    if isinstance(value, Node):
        return value
    if isinstance(value, HasIRI):
        return URIRef(value.get_iri().as_str())
    return Literal(value)


class Statement(NamedTuple):
    """A subject, predicate, object triple."""
    subject: Any
    predicate: Any
    object: Any

    def to_rdflib(self) -> Tuple[Node, Node, Node]:
        """
        Returns:
            the statement as a triple that can be added to an rdflib Graph
        """
        return (as_rdflib_node(self.subject),
                as_rdflib_node(self.predicate),
                as_rdflib_node(self.object))


def make_statement(subject, predicate, object_) -> Statement:
    return Statement(subject, predicate, object_)
