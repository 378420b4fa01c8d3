"""
Tests for the check_domain command-line tool
"""
import json

import pytest

import check_domain
from subdomain_creator.config import AppConfig, AvailabilityConfig


@pytest.fixture(autouse=True)
def simulated_settings(monkeypatch):
    """Pin checker settings so outcomes depend only on --seed"""
    monkeypatch.setattr(AvailabilityConfig, "CHECKER_TYPE", "simulated")
    monkeypatch.setattr(AvailabilityConfig, "AVAILABILITY_RATE", 0.7)
    monkeypatch.setattr(AvailabilityConfig, "RANDOM_SEED", "")


def run_json(capsys, *argv):
    code = check_domain.main(list(argv) + ["--format", "json"])
    return code, json.loads(capsys.readouterr().out)


def test_list_extensions(capsys):
    """Test extensions are listed one per line"""
    assert check_domain.main(["--list-extensions"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [".net", ".cloud", ".dev"]


def test_check_json(capsys):
    """Test JSON result for a valid domain"""
    code, data = run_json(capsys, "myshop", "-x", ".dev", "--seed", "3", "--suggest")
    assert code == 0
    assert data["valid"] is True
    assert data["domain"] == "myshop.dev"
    assert data["suggestions"][:3] == ["myshop.dev", "myshop-app.dev", "my-myshop.dev"]


def test_seed_is_reproducible(capsys):
    """Test the same seed prints the same result"""
    _, first = run_json(capsys, "myshop", "-x", ".dev", "--seed", "8", "--suggest")
    _, second = run_json(capsys, "myshop", "-x", ".dev", "--seed", "8", "--suggest")
    assert first == second


def test_invalid_domain(capsys):
    """Test validation errors exit with 1"""
    code, data = run_json(capsys, "a-", "-x", ".zz")
    assert code == 1
    assert data["valid"] is False
    assert len(data["errors"]) == 3


def test_invalid_domain_list_output(capsys):
    """Test validation errors are listed"""
    assert check_domain.main(["ab", "-x", ".dev"]) == 1
    output = capsys.readouterr().out
    assert "ab.dev is not a valid domain" in output
    assert "at least 3 characters" in output


def test_generate_zone(capsys):
    """Test zone output for a generated configuration"""
    code = check_domain.main([
        "myshop", "-x", ".dev", "--seed", "1",
        "--target-url", "https://example.com", "--format", "zone",
    ])
    assert code == 0
    assert "www  3600 IN CNAME cname.render.com." in capsys.readouterr().out


def test_generate_json_path(capsys):
    """Test generated configuration is included in JSON output"""
    code, data = run_json(
        capsys, "myshop", "-x", ".dev", "--seed", "1",
        "--target-url", "https://example.com", "--type", "path",
    )
    assert code == 0
    assert data["config"]["pathForwarding"] == {"source": "/myshop", "destination": "https://example.com"}


def test_invalid_target_url(capsys):
    """Test client errors go to stderr with exit code 1"""
    code = check_domain.main(["myshop", "-x", ".dev", "--target-url", "not-a-url"])
    assert code == 1
    assert "Invalid target URL" in capsys.readouterr().err


def test_missing_extension(capsys):
    """Test missing extension is a client error"""
    assert check_domain.main(["myshop"]) == 1
    assert "Subdomain and extension are required" in capsys.readouterr().err


def test_missing_subdomain():
    """Test subdomain is required unless listing extensions"""
    with pytest.raises(SystemExit) as exc_info:
        check_domain.main([])
    assert exc_info.value.code == 2


def test_invalid_config(capsys, monkeypatch):
    """Test bad settings are reported before any check runs"""
    monkeypatch.setattr(AvailabilityConfig, "RANDOM_SEED", "abc")
    assert check_domain.main(["myshop", "-x", ".dev"]) == 1
    captured = capsys.readouterr()
    assert "Configuration validation failed" in captured.err
    assert "RANDOM_SEED" in captured.err
    assert captured.out == ""


def test_unexpected_error(capsys, monkeypatch):
    """Test unexpected failures exit with 1 instead of a traceback"""
    def fail(args, out=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(check_domain, "run", fail)
    assert check_domain.main(["myshop", "-x", ".dev"]) == 1
    assert "Unexpected error: boom" in capsys.readouterr().err


def test_default_format():
    """Test output format defaults to the configured one"""
    args = check_domain.build_parser().parse_args(["myshop"])
    assert args.format == AppConfig.DEFAULT_OUTPUT_FORMAT
