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

"""Registry of all materialized vocabularies."""
import logging
import threading
from typing import TYPE_CHECKING, Final, Iterator, List, Optional, Union

from rdfvocab.errors import MalformedIdentifierError, PendingBaseError, VocabularyError
from rdfvocab.iri import HasIRI, IRI

if TYPE_CHECKING:
    from rdfvocab.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def parse_base(base: Union[IRI, HasIRI, str]) -> IRI:
    """Parse the base IRI of a vocabulary.

    Raises:
        MalformedIdentifierError: if base is not an absolute IRI
    """
    iri = IRI.parse(base)
    if iri is None:
        raise MalformedIdentifierError(f"Not an absolute IRI: {base!r}")
    return iri


class VocabularyRegistry:
    """All vocabularies that received a base IRI, and the slot for an announced base.

    A base IRI can be announced before the vocabulary that will use it is created. The next vocabulary that is
    materialized without a base takes the announced one. Only one announcement can be pending at a time.
    """
    __slots__ = '_vocabularies', '_pending_base', '_lock'

    _vocabularies: List['Vocabulary']
    _pending_base: Optional[IRI]

    def __init__(self):
        self._vocabularies = []
        self._pending_base = None
        self._lock = threading.RLock()

    @property
    def pending_base(self) -> Optional[IRI]:
        """The announced base IRI that no vocabulary has taken yet."""
        with self._lock:
            return self._pending_base

    def announce_base(self, base: Union[IRI, HasIRI, str]) -> IRI:
        """Announce the base IRI of the next vocabulary to be materialized.

        Args:
            base: the base IRI

        Returns:
            The parsed base IRI.

        Raises:
            PendingBaseError: if another announcement has not been consumed yet
            MalformedIdentifierError: if base is not an absolute IRI
        """
        iri = parse_base(base)
        with self._lock:
            if self._pending_base is not None:
                raise PendingBaseError(f"Cannot announce {iri.as_str()}, "
                                       f"{self._pending_base.as_str()} is still pending")
            self._pending_base = iri
        logger.debug("Announced base %s", iri.as_str())
        return iri

    def materialize(self, vocabulary: 'Vocabulary') -> bool:
        """Give the pending base IRI to a vocabulary and register it.

        Args:
            vocabulary: a vocabulary without base

        Returns:
            True if the vocabulary received a base, False if nothing was announced. In the latter case the
            vocabulary stays unregistered until it is materialized again after an announcement.
        """
        with self._lock:
            if vocabulary.base is not None:
                raise VocabularyError(f"{vocabulary!r} already has a base")
            if self._pending_base is None:
                return False
            base, self._pending_base = self._pending_base, None
            vocabulary._bind(base)
            self._vocabularies.append(vocabulary)
        logger.debug("Materialized %r", vocabulary)
        return True

    def register(self, vocabulary: 'Vocabulary', base: Union[IRI, HasIRI, str]) -> None:
        """Announce a base IRI and materialize a vocabulary with it in one step.

        Raises:
            PendingBaseError: if an announcement is pending
            MalformedIdentifierError: if base is not an absolute IRI
        """
        with self._lock:
            if vocabulary.base is not None:
                raise VocabularyError(f"{vocabulary!r} already has a base")
            self.announce_base(base)
            self.materialize(vocabulary)

    def get(self, key: Union[str, HasIRI]) -> Optional['Vocabulary']:
        """Find a registered vocabulary by prefix or by base IRI."""
        key = key.get_iri().as_str() if isinstance(key, HasIRI) else key
        for v in self:
            if v.prefix == key or str(v) == key:
                return v
        return None

    def __iter__(self) -> Iterator['Vocabulary']:
        with self._lock:
            return iter(tuple(self._vocabularies))

    def __contains__(self, vocabulary) -> bool:
        with self._lock:
            return any(v is vocabulary for v in self._vocabularies)

    def __len__(self):
        with self._lock:
            return len(self._vocabularies)

    def __repr__(self):
        return f"VocabularyRegistry({len(self)} vocabularies)"


REGISTRY: Final = VocabularyRegistry()  #: process-wide registry used by default
