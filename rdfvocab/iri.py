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

"""IRIs: the identifiers vocabulary terms are built on."""
import re
import sys
from abc import ABCMeta, abstractmethod
from typing import Final, Optional, Union, overload


# RFC 3987, section 2.2
_UCSCHAR: Final = ("\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF"
                   "\U00010000-\U0001FFFD\U00020000-\U0002FFFD\U00030000-\U0003FFFD"
                   "\U00040000-\U0004FFFD\U00050000-\U0005FFFD\U00060000-\U0006FFFD"
                   "\U00070000-\U0007FFFD\U00080000-\U0008FFFD\U00090000-\U0009FFFD"
                   "\U000A0000-\U000AFFFD\U000B0000-\U000BFFFD\U000C0000-\U000CFFFD"
                   "\U000D0000-\U000DFFFD\U000E1000-\U000EFFFD")
_IPRIVATE: Final = "\uE000-\uF8FF\U000F0000-\U000FFFFD\U00100000-\U0010FFFD"
_UNRESERVED: Final = "A-Za-z0-9\\-._~" + _UCSCHAR
_SUB_DELIMS: Final = "!$&'()*+,;="
_PCT: Final = "%[0-9A-Fa-f]{2}"

_IPCHAR: Final = f"(?:[{_UNRESERVED}{_SUB_DELIMS}:@]|{_PCT})"
_ISEGMENT: Final = f"{_IPCHAR}*"
_ISEGMENT_NZ: Final = f"{_IPCHAR}+"
_IUSERINFO: Final = f"(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT})*"
_IP_LITERAL: Final = r"\[[0-9A-Za-z:.\-_~!$&'()*+,;=]+\]"
_IREG_NAME: Final = f"(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT})*"
_IAUTHORITY: Final = f"(?:{_IUSERINFO}@)?(?:{_IP_LITERAL}|{_IREG_NAME})(?::[0-9]*)?"
_IHIER_PART: Final = (f"(?://{_IAUTHORITY}(?:/{_ISEGMENT})*"
                      f"|/(?:{_ISEGMENT_NZ}(?:/{_ISEGMENT})*)?"
                      f"|{_ISEGMENT_NZ}(?:/{_ISEGMENT})*"
                      f"|)")
_IQUERY: Final = f"(?:{_IPCHAR}|[{_IPRIVATE}/?])*"
_IFRAGMENT: Final = f"(?:{_IPCHAR}|[/?])*"
_SCHEME: Final = "[A-Za-z][A-Za-z0-9+\\-.]*"

IRI_PATTERN: Final = re.compile(f"{_SCHEME}:{_IHIER_PART}(?:\\?{_IQUERY})?(?:#{_IFRAGMENT})?")
_ABSOLUTE: Final = re.compile(f"{_SCHEME}:")


def is_valid_iri(string: str) -> bool:
    """Check a string against the RFC 3987 IRI grammar.

    Args:
        string: candidate IRI

    Returns:
        True if the whole string is an IRI
    """
    return IRI_PATTERN.fullmatch(string) is not None


class HasIRI(metaclass=ABCMeta):
    __slots__ = ()

    @abstractmethod
    def get_iri(self) -> 'IRI':
        """Gets the IRI of this object.

        Returns:
            The IRI of this object
        """
        pass


class IRI(HasIRI):
    """An IRI, consisting of a namespace and a remainder"""
    __slots__ = '_namespace', '_remainder'

    _namespace: str
    _remainder: str

    def __init__(self, namespace: Union[str, HasIRI], remainder: str = ""):
        if isinstance(namespace, HasIRI):
            namespace = namespace.get_iri().as_str()
        self._namespace = sys.intern(namespace)
        self._remainder = remainder

    @overload
    @staticmethod
    def create(namespace: str, remainder: str) -> 'IRI':
        """Creates an IRI by concatenating two strings. The full IRI is an IRI that contains the characters in
        namespace + remainder.

        Args:
            namespace: The first string
            remainder: The second string

        Returns:
            An IRI whose characters consist of prefix + suffix.
        """
        ...

    @overload
    @staticmethod
    def create(string: str) -> 'IRI':
        """Creates an IRI from the specified String.

        Args:
            string: The String that specifies the IRI

        Returns:
            The IRI that has the specified string representation.
        """
        ...

    @staticmethod
    def create(string, remainder=None) -> 'IRI':
        if isinstance(string, IRI) and remainder is None:
            return string
        if remainder is not None:
            return IRI(string, remainder)
        string = str(string)
        index = 1 + max(string.rfind("/"), string.rfind(":"), string.rfind("#"))
        return IRI(string[0:index], string[index:])

    @staticmethod
    def parse(string) -> Optional['IRI']:
        """Parses an absolute IRI.

        Only the presence of a scheme is checked, use :meth:`is_valid` for the full grammar.

        Args:
            string: the string to parse

        Returns:
            The IRI, or None if the string is not an absolute IRI.
        """
        if isinstance(string, HasIRI):
            return string.get_iri()
        string = str(string)
        if not _ABSOLUTE.match(string) or any(c.isspace() for c in string):
            return None
        return IRI.create(string)

    def __repr__(self):
        return f"IRI({repr(self._namespace)},{repr(self._remainder)})"

    def __str__(self):
        return self.as_str()

    def __eq__(self, other):
        if type(other) is type(self):
            return self.as_str() == other.as_str()
        return NotImplemented

    def __hash__(self):
        return hash(self.as_str())

    def is_valid(self) -> bool:
        """Determines if this IRI is valid according to RFC 3987.

        Returns:
            True if the IRI matches the grammar, otherwise False.
        """
        return is_valid_iri(self.as_str())

    def is_reserved_vocabulary(self) -> bool:
        """Determines if this IRI is in the reserved vocabulary. An IRI is in the reserved vocabulary if it starts with
        <http://www.w3.org/1999/02/22-rdf-syntax-ns#> or <http://www.w3.org/2000/01/rdf-schema#> or
        <http://www.w3.org/2001/XMLSchema#> or <http://www.w3.org/2002/07/owl#>

        Returns:
            True if the IRI is in the reserved vocabulary, otherwise False.
        """
        from rdfvocab.namespaces import RESERVED_BASES
        return self._namespace in RESERVED_BASES

    def get_iri(self) -> 'IRI':
        # documented in parent
        return self

    def as_str(self) -> str:
        """
        Returns:
            the string that specifies the IRI
        """
        return self._namespace + self._remainder

    def get_short_form(self) -> str:
        """Gets the short form.

        Returns:
            A string that represents the short form.
        """
        return self._remainder

    def get_namespace(self) -> str:
        """
        Returns:
            the namespace as string
        """
        return self._namespace

    def get_remainder(self) -> str:
        """
        Returns:
            the remainder (coincident with NCName usually) for this IRI.
        """
        return self._remainder
