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

"""Vocabulary terms: IRIs carrying the attributes they were declared with."""
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, Mapping, Optional

from rdflib import URIRef

from rdfvocab.iri import HasIRI, IRI, is_valid_iri
from rdfvocab.statement import Statement, make_statement


class AttributeKey(Enum):
    """Attribute keys with a fixed RDFS predicate."""
    LABEL = "label"  #:
    COMMENT = "comment"  #:


AttributeMap = Mapping[Hashable, Any]


def _normalize_key(key: Hashable) -> Hashable:
    if isinstance(key, AttributeKey):
        return key
    if isinstance(key, URIRef):
        return IRI.create(str(key))
    if isinstance(key, str):
        try:
            return AttributeKey(key)
        except ValueError:
            return key
    return key


def normalize_attributes(attributes: Optional[AttributeMap]) -> Dict[Hashable, Any]:
    """Normalize the keys of an attribute map, keeping their order.

    The strings "label" and "comment" become :class:`AttributeKey` members and rdflib URIRefs become IRIs. Other
    keys are kept as they are.
    """
    if not attributes:
        return {}
    return {_normalize_key(k): v for k, v in attributes.items()}


def _values(value) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


class Term(HasIRI):
    """A vocabulary term.

    Terms are created through a :class:`rdfvocab.interner.TermInterner`, so that there is one Term per IRI. The
    attributes are used for finding the label and comment and to generate the RDF definition of the term.
    """
    __slots__ = '_iri', '_attributes'

    _iri: IRI
    _attributes: Dict[Hashable, Any]

    def __init__(self, iri: IRI, attributes: Optional[AttributeMap] = None):
        self._iri = IRI.create(iri)
        self._attributes = normalize_attributes(attributes)

    @property
    def canonical_id(self) -> IRI:
        """The IRI this term is interned under."""
        return self._iri

    @property
    def attributes(self) -> Mapping[Hashable, Any]:
        """Read only view of the attributes of this term."""
        return MappingProxyType(self._attributes)

    def get_iri(self) -> IRI:
        # documented in parent
        return self._iri

    def as_str(self) -> str:
        return self._iri.as_str()

    def label(self):
        """Label of this term, or the empty string."""
        return self._attributes.get(AttributeKey.LABEL, "")

    def comment(self):
        """Comment of this term, or the empty string."""
        return self._attributes.get(AttributeKey.COMMENT, "")

    def is_valid(self) -> bool:
        """Determines if the IRI of this term is valid according to RFC 3987.

        The check is done on every call.
        """
        return is_valid_iri(self.as_str())

    def expand(self) -> Iterator[Statement]:
        """Generate the statements defined by the attributes of this term.

        Label and comment attributes produce rdfs:label and rdfs:comment statements, attributes keyed by an IRI or
        term use that key as predicate. Every element of a list or tuple value gives its own statement,
        None gives none. Other keys produce nothing.

        Returns:
            Statements with this term as subject, in attribute order.
        """
        from rdfvocab.namespaces import RDFS
        attributes = self._attributes
        for key, value in attributes.items():
            if key is AttributeKey.LABEL:
                predicate = RDFS.label
            elif key is AttributeKey.COMMENT:
                predicate = RDFS.comment
            elif isinstance(key, HasIRI):
                predicate = key
            else:
                continue
            for v in _values(value):
                yield make_statement(self, predicate, v)

    def dup(self) -> 'Term':
        """A copy of this term that is not interned."""
        return Term(self._iri, self._attributes)

    def _merge_attributes(self, attributes: AttributeMap):
        merged = dict(self._attributes)
        merged.update(normalize_attributes(attributes))
        self._attributes = merged

    def __str__(self):
        return self.as_str()

    def __repr__(self):
        return f"Term({repr(self.as_str())})"

    def __eq__(self, other):
        if isinstance(other, Term):
            return self._iri == other._iri
        if isinstance(other, IRI):
            return self._iri == other
        return NotImplemented

    def __hash__(self):
        return hash(self._iri)
