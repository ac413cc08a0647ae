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

"""Exceptions raised while resolving vocabulary terms."""
from typing import Optional


class VocabularyError(Exception):
    """Base class of all errors raised by rdfvocab."""
    pass


class UndeclaredTermError(VocabularyError, KeyError):
    """A strict vocabulary was asked for a term it does not declare."""

    def __init__(self, vocabulary, local_name: str):
        self.vocabulary = vocabulary
        self.local_name = local_name
        super().__init__(vocabulary, local_name)

    def __str__(self):
        return f"{self.local_name!r} is not a declared term of {self.vocabulary!r}"


class NamespaceNotReadyError(VocabularyError):
    """The vocabulary has not received its base IRI yet."""

    def __init__(self, vocabulary, local_name: Optional[str] = None):
        self.vocabulary = vocabulary
        self.local_name = local_name
        super().__init__(vocabulary, local_name)

    def __str__(self):
        if self.local_name is None:
            return f"{self.vocabulary!r} has no base IRI"
        return f"cannot resolve {self.local_name!r}: {self.vocabulary!r} has no base IRI"


class MalformedIdentifierError(VocabularyError, ValueError):
    """A string was rejected as an IRI."""
    pass


class PendingBaseError(VocabularyError):
    """A base IRI was announced while another announcement is still pending."""
    pass
