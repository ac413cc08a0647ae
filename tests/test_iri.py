import unittest

from rdfvocab.iri import IRI, is_valid_iri

base = "http://example.org/"


class IRI_Test(unittest.TestCase):
    def test_iri(self):
        i1 = IRI(base, "I1")
        i2 = IRI(base, "I2")
        i1x = IRI(base, "I1")
        self.assertEqual(i1, i1x)
        self.assertEqual(hash(i1), hash(i1x))
        self.assertNotEqual(i1, i2)

    def test_create(self):
        iri = IRI.create("http://example.org/ex#name")
        self.assertEqual(iri.get_namespace(), "http://example.org/ex#")
        self.assertEqual(iri.get_remainder(), "name")
        self.assertEqual(iri.get_short_form(), "name")
        self.assertEqual(iri.as_str(), "http://example.org/ex#name")
        self.assertEqual(str(iri), "http://example.org/ex#name")
        self.assertEqual(iri, IRI.create("http://example.org/ex#", "name"))
        self.assertIs(IRI.create(iri), iri)

    def test_equality_ignores_split(self):
        self.assertEqual(IRI("http://example.org/ex#", "a/b"), IRI.create("http://example.org/ex#a/b"))

    def test_parse(self):
        self.assertEqual(IRI.parse("urn:isbn:0451450523"), IRI.create("urn:isbn:0451450523"))
        self.assertIsNone(IRI.parse(""))
        self.assertIsNone(IRI.parse("not an iri"))
        self.assertIsNone(IRI.parse("relative/path"))
        self.assertIsNone(IRI.parse("http://example.org/a b"))

    def test_fixed_set(self):
        fs = frozenset({IRI.create(base, "C1"), IRI.create(base, "C2")})
        self.assertIn(IRI.create(base, "C1"), fs)
        self.assertNotIn(IRI.create(base, "C3"), fs)

    def test_reserved_vocabulary(self):
        self.assertTrue(IRI.create("http://www.w3.org/2002/07/owl#Thing").is_reserved_vocabulary())
        self.assertTrue(IRI.create("http://www.w3.org/2000/01/rdf-schema#label").is_reserved_vocabulary())
        self.assertFalse(IRI.create(base, "Thing").is_reserved_vocabulary())


class TestIRIGrammar:
    def test_valid(self):
        assert is_valid_iri("http://example.org/ex#name")
        assert is_valid_iri("urn:isbn:0451450523")
        assert is_valid_iri("http://user@example.org:8080/a/b?x=1&y=2#frag")
        assert is_valid_iri("http://[::1]/path")
        assert is_valid_iri("http://例え.jp/パス")
        assert IRI.create("mailto:someone@example.org").is_valid()

    def test_invalid(self):
        assert not is_valid_iri("")
        assert not is_valid_iri("relative/path")
        assert not is_valid_iri("http://exa mple.org/")
        assert not is_valid_iri("http://example.org/ex#a#b")
        assert not is_valid_iri("http://example.org/%zz")
        assert not is_valid_iri("1http://example.org/")


if __name__ == '__main__':
    unittest.main()
