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

"""Built-in vocabularies of the reserved namespaces."""
from typing import Final

from rdfvocab.vocabulary import Vocabulary

OWL: Final = Vocabulary("http://www.w3.org/2002/07/owl#", "owl")  #:
RDFS: Final = Vocabulary("http://www.w3.org/2000/01/rdf-schema#", "rdfs")  #:
RDF: Final = Vocabulary("http://www.w3.org/1999/02/22-rdf-syntax-ns#", "rdf")  #:
XSD: Final = Vocabulary("http://www.w3.org/2001/XMLSchema#", "xsd")  #:

RESERVED_BASES: Final = frozenset(str(v) for v in (OWL, RDFS, RDF, XSD))
