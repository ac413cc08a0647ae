import unittest

from rdflib import Literal, URIRef

from rdfvocab.interner import TermInterner
from rdfvocab.iri import IRI
from rdfvocab.namespaces import RDFS
from rdfvocab.statement import Statement
from rdfvocab.term import AttributeKey, Term

base = "http://example.org/ex#"


class Term_Test(unittest.TestCase):
    def setUp(self):
        self.interner = TermInterner()

    def test_accessors(self):
        t = Term(IRI.create(base, "name"), {"label": "Name", "comment": "A person's name"})
        self.assertEqual(t.label(), "Name")
        self.assertEqual(t.comment(), "A person's name")
        self.assertEqual(t.canonical_id, IRI.create(base + "name"))
        self.assertEqual(t.get_iri(), t.canonical_id)
        self.assertEqual(str(t), base + "name")
        self.assertEqual(list(t.attributes), [AttributeKey.LABEL, AttributeKey.COMMENT])

    def test_defaults(self):
        t = Term(IRI.create(base, "bare"))
        self.assertEqual(t.label(), "")
        self.assertEqual(t.comment(), "")
        self.assertEqual(list(t.expand()), [])

    def test_missing_values(self):
        t = Term(IRI.create(base, "x"), {"label": "x", "comment": None, RDFS.seeAlso: []})
        self.assertEqual(list(t.expand()), [Statement(t, RDFS.label, "x")])

    def test_attributes_read_only(self):
        t = Term(IRI.create(base, "name"), {"label": "name"})
        with self.assertRaises(TypeError):
            t.attributes[AttributeKey.LABEL] = "other"

    def test_equality(self):
        t = Term(IRI.create(base, "name"))
        self.assertEqual(t, IRI.create(base, "name"))
        self.assertEqual(IRI.create(base, "name"), t)
        self.assertEqual(hash(t), hash(IRI.create(base, "name")))
        self.assertNotEqual(t, Term(IRI.create(base, "other")))
        self.assertNotEqual(t, base + "name")

    def test_dup(self):
        t = self.interner.intern(IRI.create(base, "name"), {"label": "name"})
        d = t.dup()
        self.assertIsNot(d, t)
        self.assertEqual(d, t)
        self.assertEqual(dict(d.attributes), dict(t.attributes))
        self.assertIs(self.interner.get(base + "name"), t)

    def test_repr(self):
        self.assertEqual(repr(Term(IRI.create(base, "name"))), "Term('http://example.org/ex#name')")

    def test_is_valid(self):
        self.assertTrue(Term(IRI.create(base, "name")).is_valid())
        self.assertFalse(Term(IRI.create(base, "has space")).is_valid())


class TestExpansion:
    def test_label_and_comment(self):
        t = Term(IRI.create(base, "name"), {"label": "name", "comment": "A person's name"})
        assert list(t.expand()) == [Statement(t, RDFS.label, "name"),
                                    Statement(t, RDFS.comment, "A person's name")]

    def test_subject_is_term(self):
        t = Term(IRI.create(base, "name"), {"label": "name"})
        assert all(s.subject is t for s in t.expand())

    def test_predicate_keys_and_multiple_values(self):
        see_also = RDFS.seeAlso
        a = IRI.create(base, "a")
        b = IRI.create(base, "b")
        t = Term(IRI.create(base, "x"), {"label": "x", see_also: [a, b]})
        assert list(t.expand()) == [Statement(t, RDFS.label, "x"),
                                    Statement(t, see_also, a),
                                    Statement(t, see_also, b)]

    def test_iri_and_uriref_keys(self):
        domain = IRI.create("http://www.w3.org/2000/01/rdf-schema#domain")
        rng = URIRef("http://www.w3.org/2000/01/rdf-schema#range")
        t = Term(IRI.create(base, "knows"), {domain: IRI.create(base, "Person"), rng: (IRI.create(base, "Person"),)})
        statements = list(t.expand())
        assert [s.predicate for s in statements] == [domain, IRI.create(str(rng))]

    def test_unknown_keys_are_skipped(self):
        t = Term(IRI.create(base, "x"), {"label": "x", "note": "kept but not a statement", 42: "neither"})
        assert list(t.expand()) == [Statement(t, RDFS.label, "x")]
        assert "note" in t.attributes

    def test_language_tagged_values(self):
        t = Term(IRI.create(base, "x"), {"label": [Literal("colour", lang="en"), Literal("Farbe", lang="de")]})
        assert [s.object.language for s in t.expand()] == ["en", "de"]

    def test_deterministic(self):
        t = Term(IRI.create(base, "x"), {"label": "x", "comment": ["c1", "c2"], RDFS.seeAlso: IRI.create(base, "y")})
        assert list(t.expand()) == list(t.expand())
        assert len(list(t.expand())) == 4

    def test_exactly_one_label_statement(self):
        t = Term(IRI.create(base, "x"), {"label": "L", "comment": "C"})
        labels = [s for s in t.expand() if s.predicate == RDFS.label]
        assert labels == [Statement(t, RDFS.label, "L")]


if __name__ == '__main__':
    unittest.main()
