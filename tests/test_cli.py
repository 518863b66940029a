import json

import pytest
from click.testing import CliRunner

from domain_brainstormer import cli as cli_module
from domain_brainstormer import search as search_module
from domain_brainstormer.checkers import AvailabilityService, LookupResult
from domain_brainstormer.cli import cli

from stubs import StubRDAP, StubWhois


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(f"cache:\n  file: {tmp_path / 'cache.json'}\n")
    return str(path)


def invoke(config_file, *args):
    return CliRunner().invoke(cli, ['--config', config_file, *args])


def test_score(config_file):
    result = invoke(config_file, 'score', 'taskify')

    assert result.exit_code == 0
    assert "93 (A)" in result.output
    assert "Typing ease:      90/100" in result.output


def test_generate(config_file):
    result = invoke(config_file, 'generate', 'AI-powered task manager for teams', '--count', '5')

    assert result.exit_code == 0
    assert "Total suggestions:" in result.output


def test_generate_without_keywords_fails(config_file):
    result = invoke(config_file, 'generate', 'the and or')

    assert result.exit_code != 0
    assert "meaningful keywords" in result.output


def test_bad_config_fails(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("checker:\n  max_concurrent: 0\n")

    result = CliRunner().invoke(cli, ['--config', str(path), 'score', 'taskify'])

    assert result.exit_code != 0
    assert "max_concurrent" in result.output


def test_cache_commands(config_file, tmp_path):
    cache_file = tmp_path / 'cache.json'
    cache_file.write_text(json.dumps({
        'a.com': {'data': {'available': True}, 'expires_at': 1e12, 'cached_at': 0},
        'b.com': {'data': {'available': False}, 'expires_at': 1, 'cached_at': 0},
    }))

    stats = invoke(config_file, 'cache', 'stats')
    assert stats.exit_code == 0
    assert "Valid:   1" in stats.output
    assert "Expired: 1" in stats.output

    cleanup = invoke(config_file, 'cache', 'cleanup')
    assert "Removed 1 expired entries" in cleanup.output

    clear = invoke(config_file, 'cache', 'clear')
    assert clear.exit_code == 0
    assert not cache_file.exists()


class RecordingService(AvailabilityService):
    """AvailabilityService over stub checkers that records progress updates."""

    def __init__(self):
        super().__init__(
            rdap_checker=StubRDAP(default=lambda d: LookupResult.success('rdap', not d.endswith('.com'))),
            whois_checker=StubWhois(),
            use_cache=False,
            retry_delay=0,
            batch_delay=0,
            max_concurrent=4,
        )
        self.progress = []

    async def check_availability_async(self, names, tlds, progress_callback=None):
        def record(done, total):
            self.progress.append((done, total))
            progress_callback(done, total)

        return await super().check_availability_async(names, tlds, record if progress_callback else None)


@pytest.fixture
def stub_service(monkeypatch):
    service = RecordingService()
    monkeypatch.setattr(cli_module, "build_availability_service", lambda settings: service)
    monkeypatch.setattr(search_module, "build_availability_service", lambda settings: service)
    return service


def test_check(config_file, stub_service):
    result = invoke(config_file, 'check', 'alpha', 'beta', 'gamma', '--tlds', 'com,io')

    assert result.exit_code == 0
    assert "alpha.io" in result.output
    assert "3 available, 3 registered, 0 unknown" in result.output
    assert stub_service.progress == [(4, 6), (6, 6)]


def test_search_exports_results(config_file, stub_service, tmp_path):
    output = tmp_path / "out" / "results.json"

    result = invoke(config_file, 'search', 'task manager', '--tlds', 'com,io', '--output', str(output))

    assert result.exit_code == 0
    assert "Summary:" in result.output
    assert stub_service.progress
    assert stub_service.progress[-1][0] == stub_service.progress[-1][1]

    data = json.loads(output.read_text())
    assert data['query'] == "task manager"
    assert data['summary']['available'] == data['summary']['registered']
    assert {r['tld'] for r in data['results']} == {'.com', '.io'}


def test_search_rejects_unknown_export_format(config_file, stub_service, tmp_path):
    result = invoke(config_file, 'search', 'task manager', '--tlds', 'com', '--output', str(tmp_path / "out.xlsx"))

    assert result.exit_code != 0
    assert "Unsupported export format" in result.output
