# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import json
import sys

import pytest

from reflectguard.cli.main import NO_URLS_MESSAGE, build_parser, iter_url_lines, load_urls, main
from reflectguard.http.models import HttpRequest, HttpResponse
from reflectguard.models import NotReflected, Reflected
from reflectguard.runtime import ReflectGuard


class EchoClient:
    """Echoes the raw URL into the body; ``down`` hosts fail."""

    def __init__(self):
        self.requests: list[HttpRequest] = []
        self.closed = False

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if "down" in request.url:
            return HttpResponse(ok=False, error_category="CONNECTION_ERROR", error_message="refused")
        return HttpResponse(ok=True, status_code=200, reason_phrase="OK", text=f"<p>{request.url}</p>")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def echo_client(monkeypatch):
    client = EchoClient()
    captured = {}

    def fake_factory(settings):
        captured["settings"] = settings
        return client

    monkeypatch.setattr("reflectguard.cli.main.create_default_http_client", fake_factory)
    client.captured = captured
    return client


def test_build_parser_defaults_and_options():
    parser = build_parser()
    args = parser.parse_args([])
    assert args.headers == []
    assert args.url_list is None
    assert args.threads is None
    assert args.json is False

    args = parser.parse_args(["-H", "X-A: 1", "--headers", "X-B: 2", "-l", "urls.txt", "-t", "8", "--json"])
    assert args.headers == ["X-A: 1", "X-B: 2"]
    assert args.url_list == "urls.txt"
    assert args.threads == 8
    assert args.json is True


def test_build_parser_rejects_non_positive_threads():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-t", "0"])


def test_iter_url_lines_strips_and_skips_blank_and_undecodable():
    stream = io.BytesIO(b"  http://a/?x=1  \n\n\xff\xfe bad\r\nhttp://b/\n   \n")
    assert list(iter_url_lines(stream)) == ["http://a/?x=1", "http://b/"]


def test_load_urls_from_file_and_stdin(tmp_path, monkeypatch):
    path = tmp_path / "urls.txt"
    path.write_text("http://a/\n\nhttp://b/\n")
    assert load_urls(str(path)) == ["http://a/", "http://b/"]

    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"http://c/\n")))
    assert load_urls(None) == ["http://c/"]


def test_main_prints_one_line_per_url(tmp_path, capsys, echo_client):
    path = tmp_path / "urls.txt"
    path.write_text("http://h/p?q=src=x\nhttp://down/p\nhttp://h/plain\n")

    exit_code = main(["-l", str(path), "-t", "2", "-H", "X-Test: 1", "-H", "broken"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out[0] == "Starting scan with 2 threads for 3 URLs"
    assert out[1:] == [
        "http://h/p?q=src=x -> Potential XSS found! Tag 'src=x' reflected (200 OK)",
        "http://down/p -> Error: Fetch error: refused",
        "http://h/plain -> No tag reflection found (200 OK)",
    ]
    assert all(req.headers == (("X-Test", "1"),) for req in echo_client.requests)
    assert echo_client.closed is True


def test_main_reads_stdin_when_no_list(capsys, monkeypatch, echo_client):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"http://h/p?q=%3Ci%3E\n")))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Starting scan with 5 threads for 1 URLs" in out
    assert "http://h/p?q=%3Ci%3E -> No tag reflection found (200 OK)" in out


def test_main_json_output(tmp_path, capsys, echo_client):
    path = tmp_path / "urls.txt"
    path.write_text("http://h/p?q=src=x\nhttp://h/p?q=%ZZ\n")

    assert main(["-l", str(path), "--json", "--ignore-ssl-errors", "--timeout", "2.5"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["task_errors"] == []
    first, second = payload["results"]
    assert first["outcome"] == "REFLECTED"
    assert first["tag"] == "src=x"
    assert first["status_code"] == 200
    assert second["outcome"] == "FAILED"
    assert second["error_kind"] == "decode"
    settings = echo_client.captured["settings"]
    assert settings.verify_ssl is False
    assert settings.timeout == 2.5


def test_main_without_urls(capsys, monkeypatch, echo_client):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\n  \n")))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == NO_URLS_MESSAGE
    assert echo_client.requests == []


def test_main_unreadable_list_aborts_before_requests(tmp_path, capsys, echo_client):
    assert main(["-l", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read URL list" in capsys.readouterr().err
    assert echo_client.requests == []


def test_runtime_scan_and_close():
    client = EchoClient()
    with ReflectGuard(http_client=client, headers=["X-Test: 1", "no-colon"], concurrency=3) as guard:
        assert guard.headers == (("X-Test", "1"),)
        result = guard.scan(["http://h/p?a=src=1", "http://h/p"])
        single = guard.scan_url("http://h/p?a=onclick=go")
    assert isinstance(result.outcomes[0], Reflected)
    assert isinstance(result.outcomes[1], NotReflected)
    assert isinstance(single, Reflected)
    assert single.tag == "onclick=go"
    assert client.closed is True


def test_runtime_concurrency_defaults_from_env(monkeypatch):
    monkeypatch.setenv("REFLECTGUARD_THREADS", "7")
    guard = ReflectGuard(http_client=EchoClient())
    assert guard.dispatcher.concurrency == 7


def test_main_reports_task_errors_only_on_stderr(tmp_path, capsys, monkeypatch, echo_client):
    original_request = echo_client.request

    def crashing_request(request):
        if "crash" in request.url:
            raise RuntimeError("client exploded")
        return original_request(request)

    monkeypatch.setattr(echo_client, "request", crashing_request)
    path = tmp_path / "urls.txt"
    path.write_text("http://h/crash?x=1\nhttp://h/plain\n")

    assert main(["-l", str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines()[1:] == ["http://h/plain -> No tag reflection found (200 OK)"]
    assert "Task error: http://h/crash?x=1: RuntimeError: client exploded" in captured.err
