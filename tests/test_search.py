import pytest

from domain_brainstormer.checkers import AvailabilityService, LookupResult
from domain_brainstormer.config import Settings
from domain_brainstormer.generators import GeneratorOptions, NoKeywordsError
from domain_brainstormer.search import DomainSearchService, merge_results
from domain_brainstormer.utils import exporter

from stubs import StubRDAP, StubWhois


def registered_if_com(domain):
    return LookupResult.success('rdap', not domain.endswith('.com'))


@pytest.fixture
def service():
    checker = AvailabilityService(
        rdap_checker=StubRDAP(default=registered_if_com),
        whois_checker=StubWhois(),
        use_cache=False,
        retry_delay=0,
        batch_delay=0,
        max_concurrent=10,
    )
    return DomainSearchService(checker=checker, settings=Settings())


def test_search_merges_suggestions_with_availability(service):
    results = service.search("AI-powered task manager for teams", tlds=['.com', '.io'],
                             options=GeneratorOptions(max_suggestions=5, min_score=55))

    assert len(results.suggestions) <= 5
    assert len(results.results) == len(results.suggestions) * 2
    for i, r in enumerate(results.results):
        suggestion = results.suggestions[i // 2]
        assert r.name == suggestion.name
        assert r.score == suggestion.score
        assert r.domain == suggestion.name + r.tld
        assert r.availability.available is (r.tld == '.io')

    summary = results.summary
    assert summary.total_checked == len(results.results)
    assert summary.available == summary.registered == len(results.suggestions)
    assert summary.unknown == 0


def test_quick_preset_uses_its_tlds_and_restores_concurrency(service):
    results = service.search("AI-powered task manager for teams", preset='quick')

    assert {r.tld for r in results.results} == {'.com', '.io', '.dev'}
    assert len(results.suggestions) <= 10
    assert all(s.score >= 60 for s in results.suggestions)
    assert service.checker.max_concurrent == 10


def test_search_without_keywords_raises(service):
    with pytest.raises(NoKeywordsError):
        service.search("the and or")


def test_merge_results_checks_lengths(service):
    with pytest.raises(ValueError):
        merge_results([], ['.com'], service.checker.check_availability(["a"], ['.com']))


def test_grouped(service):
    results = service.search("task manager", tlds=['.com', '.io'])
    groups = results.grouped()

    assert all(r.tld == '.io' for r in groups['available'])
    assert all(r.tld == '.com' for r in groups['registered'])


@pytest.mark.parametrize("suffix,marker", [
    (".json", '"query": "task manager"'),
    (".csv", "domain,name,tld,score,grade"),
    (".md", "# Domain search: task manager"),
])
def test_export(service, tmp_path, suffix, marker):
    results = service.search("task manager", tlds=['.com'])

    path = exporter.save(results, str(tmp_path / "out" / ("results" + suffix)))

    assert marker in path.read_text()


def test_export_rejects_unknown_format(service, tmp_path):
    results = service.search("task manager", tlds=['.com'])
    with pytest.raises(ValueError):
        exporter.save(results, str(tmp_path / "results.xlsx"))
