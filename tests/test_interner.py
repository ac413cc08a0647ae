from rdfvocab.interner import INTERNER, InternPolicy, TermInterner
from rdfvocab.iri import IRI
from rdfvocab.term import AttributeKey

base = "http://example.org/ex#"


class TestTermInterner:
    def test_identity(self):
        interner = TermInterner()
        a = interner.intern(IRI.create(base, "name"), {"label": "A"})
        b = interner.intern(IRI.create(base, "name"), {"label": "B"})
        assert a is b

    def test_first_wins(self):
        interner = TermInterner()
        assert interner.policy is InternPolicy.FIRST_WINS
        interner.intern(IRI.create(base, "name"), {"label": "A"})
        t = interner.intern(IRI.create(base, "name"), {"label": "B", "comment": "C"})
        assert t.label() == "A"
        assert t.comment() == ""

    def test_merge(self):
        interner = TermInterner(InternPolicy.MERGE)
        first = interner.intern(IRI.create(base, "name"), {"label": "A"})
        t = interner.intern(IRI.create(base, "name"), {"label": "B", "comment": "C"})
        assert t is first
        assert t.label() == "B"
        assert t.comment() == "C"
        assert list(t.attributes) == [AttributeKey.LABEL, AttributeKey.COMMENT]

    def test_merge_can_be_skipped(self):
        interner = TermInterner(InternPolicy.MERGE)
        interner.intern(IRI.create(base, "name"), {"label": "Name"})
        t = interner.intern(IRI.create(base, "name"), {"label": "name"}, merge=False)
        assert t.label() == "Name"

    def test_string_and_iri_keys(self):
        interner = TermInterner()
        t = interner.intern(base + "x")
        assert interner.intern(IRI.create(base, "x")) is t
        assert interner.intern(t) is t
        assert t.canonical_id == IRI.create(base + "x")

    def test_lookup(self):
        interner = TermInterner()
        assert interner.get(base + "y") is None
        assert base + "y" not in interner
        t = interner.intern(IRI.create(base, "y"))
        assert interner.get(base + "y") is t
        assert interner.get(IRI.create(base, "y")) is t
        assert IRI.create(base, "y") in interner
        assert len(interner) == 1

    def test_default_interner(self):
        assert isinstance(INTERNER, TermInterner)
        assert INTERNER.policy is InternPolicy.FIRST_WINS
