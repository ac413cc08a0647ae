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

"""RDF vocabularies for Python

rdfvocab models RDFS and OWL vocabularies: namespaces whose terms are IRIs made of a base IRI and a local name.
Terms are interned, so that every reference to the same IRI gives the same term, and carry the attributes they
were declared with. A term can expand its attributes into RDF statements.

Vocabularies are either lenient, creating any term on demand, or strict, resolving declared terms only.
"""
__version__ = '0.1.0'

from rdfvocab.errors import VocabularyError, UndeclaredTermError, NamespaceNotReadyError, \
    MalformedIdentifierError, PendingBaseError
from rdfvocab.iri import HasIRI, IRI, is_valid_iri
from rdfvocab.statement import Statement, make_statement
from rdfvocab.term import AttributeKey, Term
from rdfvocab.interner import INTERNER, InternPolicy, TermInterner
from rdfvocab.registry import REGISTRY, VocabularyRegistry
from rdfvocab.vocabulary import StrictVocabulary, Vocabulary, VocabularyPolicy
from rdfvocab.namespaces import OWL, RDF, RDFS, XSD

__all__ = ['VocabularyError', 'UndeclaredTermError', 'NamespaceNotReadyError', 'MalformedIdentifierError',
           'PendingBaseError', 'HasIRI', 'IRI', 'is_valid_iri', 'Statement', 'make_statement', 'AttributeKey',
           'Term', 'INTERNER', 'InternPolicy', 'TermInterner', 'REGISTRY', 'VocabularyRegistry',
           'StrictVocabulary', 'Vocabulary', 'VocabularyPolicy', 'OWL', 'RDF', 'RDFS', 'XSD']
