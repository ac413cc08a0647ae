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

"""Term interning."""
import logging
import threading
from enum import Enum
from typing import Dict, Final, Optional, Union

from rdfvocab.iri import HasIRI, IRI
from rdfvocab.term import AttributeMap, Term

logger = logging.getLogger(__name__)


class InternPolicy(Enum):
    """What happens to the attributes given when a term is interned a second time."""
    FIRST_WINS = "first_wins"  #: the attributes of the first call are kept, later ones are ignored
    MERGE = "merge"  #: later attributes are merged in, overriding values for the same key


class TermInterner:
    """Cache holding the one Term of every IRI.

    Entries are never evicted.
    """
    __slots__ = '_policy', '_terms', '_lock'

    _policy: InternPolicy
    _terms: Dict[str, Term]

    def __init__(self, policy: InternPolicy = InternPolicy.FIRST_WINS):
        """Create a new interner

        Args:
            policy: how attributes of re-interned terms are handled
        """
        self._policy = policy
        self._terms = dict()
        self._lock = threading.Lock()

    @property
    def policy(self) -> InternPolicy:
        return self._policy

    def intern(self, iri: Union[IRI, HasIRI, str], attributes: Optional[AttributeMap] = None,
               merge: bool = True) -> Term:
        """Get the Term for an IRI, creating it on first use.

        Args:
            iri: the IRI of the term
            attributes: attributes of a newly created term
            merge: if False, the attributes are never merged into an existing term whatever the policy

        Returns:
            The cached Term of the IRI.
        """
        iri = iri.get_iri() if isinstance(iri, HasIRI) else IRI.create(iri)
        key = iri.as_str()
        with self._lock:
            term = self._terms.get(key)
            if term is None:
                term = Term(iri, attributes)
                self._terms[key] = term
                logger.debug("Interned %s", key)
            elif merge and attributes and self._policy is InternPolicy.MERGE:
                term._merge_attributes(attributes)
                logger.debug("Merged attributes into %s", key)
        return term

    def get(self, iri: Union[IRI, HasIRI, str]) -> Optional[Term]:
        """The cached Term of an IRI, or None if it was never interned."""
        key = iri.get_iri().as_str() if isinstance(iri, HasIRI) else str(iri)
        with self._lock:
            return self._terms.get(key)

    def __contains__(self, iri) -> bool:
        return self.get(iri) is not None

    def __len__(self):
        with self._lock:
            return len(self._terms)

    def __repr__(self):
        return f"TermInterner({self._policy.name}, {len(self)} terms)"


INTERNER: Final = TermInterner()  #: process-wide interner used by default
