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

"""RDF vocabularies.

A :class:`Vocabulary` binds a base IRI and derives its terms by appending local names to it::

    foaf = Vocabulary("http://xmlns.com/foaf/0.1/", prefix="foaf")
    foaf.knows            # Term('http://xmlns.com/foaf/0.1/knows')
    foaf["name"]          # Term('http://xmlns.com/foaf/0.1/name')

Terms that collide with a method name, such as ``members``, are only reachable by indexing. A
:class:`StrictVocabulary` only resolves the terms declared with :meth:`Vocabulary.declare`.
"""
import logging
import threading
from enum import Enum
from typing import Any, ClassVar, Dict, Hashable, Iterator, List, Optional, Union

from rdflib import Graph, URIRef

from rdfvocab.errors import MalformedIdentifierError, NamespaceNotReadyError, UndeclaredTermError, \
    VocabularyError
from rdfvocab.interner import INTERNER, TermInterner
from rdfvocab.iri import HasIRI, IRI
from rdfvocab.registry import REGISTRY, VocabularyRegistry
from rdfvocab.statement import Statement
from rdfvocab.term import AttributeKey, AttributeMap, Term, normalize_attributes
from rdfvocab.utils import oplogging

logger = logging.getLogger(__name__)


class VocabularyPolicy(Enum):
    """How a vocabulary resolves names it does not declare."""
    LENIENT = "lenient"  #: create the term on demand
    STRICT = "strict"  #: fail with UndeclaredTermError


class Vocabulary(HasIRI):
    """A vocabulary that accepts arbitrary terms.

    Undeclared terms are created on demand and interned, but they do not become members of the vocabulary.
    """
    policy: ClassVar[VocabularyPolicy] = VocabularyPolicy.LENIENT

    _base: Optional[IRI]
    _prefix: Optional[str]
    _members: Dict[str, Term]
    _options: Dict[str, Dict[Hashable, Any]]

    def __init__(self, base: Union[IRI, HasIRI, str, None] = None, prefix: Optional[str] = None, *,
                 interner: Optional[TermInterner] = None, registry: Optional[VocabularyRegistry] = None):
        """Create and materialize a new vocabulary

        Args:
            base: base IRI of the vocabulary. If None, the base announced on the registry is used, if any
            prefix: typical prefix associated with this vocabulary. Defaults to the lower-cased class name for
                subclasses
            interner: interner for the terms, defaults to the process-wide one
            registry: registry to add the vocabulary to, defaults to the process-wide one
        """
        if prefix is None and type(self).__module__ != __name__:
            prefix = type(self).__name__.lower()
        self._base = None
        self._prefix = prefix
        self._members = dict()
        self._options = dict()
        self._lock = threading.RLock()
        self._interner = INTERNER if interner is None else interner
        self._registry = REGISTRY if registry is None else registry
        if base is not None:
            self._registry.register(self, base)
        else:
            self._registry.materialize(self)

    @staticmethod
    def create(base: Union[IRI, HasIRI, str], policy: VocabularyPolicy = VocabularyPolicy.LENIENT,
               prefix: Optional[str] = None, **kwargs) -> 'Vocabulary':
        """Create a ready vocabulary with the given resolution policy.

        Args:
            base: base IRI of the vocabulary
            policy: resolution policy
            prefix: typical prefix associated with this vocabulary
            kwargs: passed on to the constructor

        Returns:
            A StrictVocabulary for the strict policy, a Vocabulary otherwise.
        """
        cls = StrictVocabulary if policy is VocabularyPolicy.STRICT else Vocabulary
        return cls(base, prefix, **kwargs)

    @classmethod
    def is_strict(cls) -> bool:
        return cls.policy is VocabularyPolicy.STRICT

    @property
    def base(self) -> Optional[IRI]:
        """The base IRI, or None if the vocabulary was not materialized yet."""
        return self._base

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    def _bind(self, base: IRI):
        with self._lock:
            if self._base is not None:
                raise VocabularyError(f"{self!r} already has a base")
            self._base = base

    def _require_base(self, local_name: Optional[str] = None) -> IRI:
        base = self._base
        if base is None:
            raise NamespaceNotReadyError(self, local_name)
        return base

    def _iri_of(self, local_name: str) -> IRI:
        base = self._require_base(local_name)
        if not local_name:
            raise MalformedIdentifierError(f"Empty term name in {self!r}")
        return IRI(base.as_str(), local_name)

    def declare(self, local_name: Optional[str] = None, options: Optional[AttributeMap] = None, **kwargs) -> Term:
        """Declare a property or class of the vocabulary.

        Called without arguments, returns the term ``property`` of this vocabulary, which is not declared.

        Args:
            local_name: name of the term, appended to the base IRI
            options: attributes of the term. "label" and "comment" keys are turned into rdfs:label and
                rdfs:comment statements on expansion, IRI and Term keys into statements with that predicate
            kwargs: more attributes, merged into options

        Returns:
            The interned term.
        """
        if local_name is None:
            if options or kwargs:
                raise TypeError("declare() got attributes but no term name")
            return self._interner.intern(self._iri_of("property"), {AttributeKey.LABEL: "property"}, merge=False)
        name = str(local_name)
        attributes = {AttributeKey.LABEL: name}
        attributes.update(normalize_attributes(options))
        attributes.update(normalize_attributes(kwargs))
        iri = self._iri_of(name)
        with self._lock:
            term = self._interner.intern(iri, attributes)
            self._members[name] = term
            self._options[name] = attributes
        logger.debug("Declared %s in %r", name, self)
        return term

    def resolve(self, local_name: str) -> Term:
        """Get the term with the given name.

        Args:
            local_name: name of the term

        Returns:
            The declared term, or for lenient vocabularies a new interned term.

        Raises:
            NamespaceNotReadyError: if the vocabulary has no base IRI
            UndeclaredTermError: if a strict vocabulary does not declare the name
        """
        name = str(local_name)
        self._require_base(name)
        with self._lock:
            term = self._members.get(name)
        if term is None:
            term = self._resolve_undeclared(name)
        if logger.isEnabledFor(oplogging.TRACE):
            logger.log(oplogging.TRACE, "Resolved %s in %r", name, self)
        return term

    def _resolve_undeclared(self, local_name: str) -> Term:
        return self._interner.intern(self._iri_of(local_name), {AttributeKey.LABEL: local_name}, merge=False)

    def members(self) -> List[Term]:
        """
        Returns:
            the declared terms, in order of declaration
        """
        with self._lock:
            return list(self._members.values())

    def label_for(self, local_name: str):
        """The label the term was declared with, or the empty string."""
        self.resolve(local_name)
        with self._lock:
            return self._options.get(str(local_name), {}).get(AttributeKey.LABEL, "")

    def comment_for(self, local_name: str):
        """The comment the term was declared with, or the empty string."""
        self.resolve(local_name)
        with self._lock:
            return self._options.get(str(local_name), {}).get(AttributeKey.COMMENT, "")

    def statements(self) -> Iterator[Statement]:
        """Statements of all declared terms."""
        for term in self.members():
            yield from term.expand()

    def to_graph(self, graph: Optional[Graph] = None) -> Graph:
        """Add the statements of all declared terms to an rdflib graph.

        Args:
            graph: graph to add to. A new graph is created if None

        Returns:
            The graph.
        """
        if graph is None:
            graph = Graph()
        if self._prefix:
            graph.bind(self._prefix, URIRef(self._require_base().as_str()))
        for statement in self.statements():
            graph.add(statement.to_rdflib())
        return graph

    def get_iri(self) -> IRI:
        # documented in parent
        return self._require_base()

    def to_iri(self) -> IRI:
        return self.get_iri()

    to_uri = to_iri

    def __getitem__(self, local_name: str) -> Term:
        return self.resolve(local_name)

    def __getattr__(self, name: str) -> Term:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.resolve(name)
        except (UndeclaredTermError, NamespaceNotReadyError) as e:
            raise AttributeError(str(e)) from e

    def __contains__(self, local_name) -> bool:
        with self._lock:
            return str(local_name) in self._members

    def __iter__(self) -> Iterator[Term]:
        return iter(self.members())

    def __len__(self):
        with self._lock:
            return len(self._members)

    def __bool__(self):
        return True

    def __str__(self):
        return "" if self._base is None else self._base.as_str()

    def __repr__(self):
        return f"{type(self).__name__}({repr(str(self))})"

    property = declare
    term = declare


class StrictVocabulary(Vocabulary):
    """A vocabulary in which every term has to be declared before use."""
    policy: ClassVar[VocabularyPolicy] = VocabularyPolicy.STRICT

    def _resolve_undeclared(self, local_name: str) -> Term:
        raise UndeclaredTermError(self, local_name)
