from concurrent.futures import ThreadPoolExecutor

from rdfvocab.errors import PendingBaseError
from rdfvocab.interner import TermInterner
from rdfvocab.iri import IRI
from rdfvocab.registry import VocabularyRegistry
from rdfvocab.vocabulary import Vocabulary

base = "http://example.org/ex#"
N = 32


class TestConcurrency:
    def test_intern_same_iri(self):
        interner = TermInterner()
        with ThreadPoolExecutor(max_workers=8) as executor:
            terms = list(executor.map(lambda i: interner.intern(IRI.create(base, "shared"), {"label": str(i)}),
                                      range(N)))
        assert all(t is terms[0] for t in terms)
        assert len(interner) == 1

    def test_resolve_from_many_vocabularies(self):
        interner = TermInterner()
        registry = VocabularyRegistry()
        vocabularies = [Vocabulary(base, interner=interner, registry=registry) for _ in range(4)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            terms = list(executor.map(lambda i: vocabularies[i % 4].resolve("name"), range(N)))
        assert all(t is terms[0] for t in terms)

    def test_concurrent_declarations(self):
        ns = Vocabulary(base, interner=TermInterner(), registry=VocabularyRegistry())
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda i: ns.declare(f"t{i}"), range(N)))
        assert len(ns) == N
        assert {t.label() for t in ns} == {f"t{i}" for i in range(N)}

    def test_concurrent_registration(self):
        registry = VocabularyRegistry()
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda i: Vocabulary(f"http://example.org/v{i}#", registry=registry), range(N)))
        assert len(registry) == N
        assert {str(v) for v in registry} == {f"http://example.org/v{i}#" for i in range(N)}
        assert registry.pending_base is None

    def test_single_announcement_wins(self):
        registry = VocabularyRegistry()

        def announce(i):
            try:
                registry.announce_base(f"http://example.org/v{i}#")
                return True
            except PendingBaseError:
                return False

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(announce, range(N)))
        assert results.count(True) == 1
        winner = registry.pending_base
        v = Vocabulary(interner=TermInterner(), registry=registry)
        assert v.base == winner
        assert registry.pending_base is None
