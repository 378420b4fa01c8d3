"""
Tests for the DNS configuration synthesizer
"""
import pytest

from subdomain_creator.errors import InvalidTargetUrlError, UnsupportedForwardTypeError
from subdomain_creator.models import DnsRecord, ForwardType
from subdomain_creator.services import ConfigurationSynthesizer


def test_permanent_redirect(synthesizer):
    """Test 301 configuration has two CNAMEs and a redirect"""
    config = synthesizer.generate_config("abc.dev", "https://example.com", "301")

    assert config.domain == "abc.dev"
    assert config.records == (
        DnsRecord("CNAME", "@", "cname.render.com", 3600),
        DnsRecord("CNAME", "www", "cname.render.com", 3600),
    )
    assert config.forwarding.to_dict() == {"type": "301", "from": "abc.dev", "to": "https://example.com"}
    assert config.path_forwarding is None


def test_wire_format(synthesizer):
    """Test dict form uses the public field names"""
    config = synthesizer.generate_config("abc.dev", "https://example.com", "301")
    assert config.to_dict() == {
        "domain": "abc.dev",
        "records": [
            {"type": "CNAME", "name": "@", "value": "cname.render.com", "ttl": 3600},
            {"type": "CNAME", "name": "www", "value": "cname.render.com", "ttl": 3600},
        ],
        "forwarding": {"type": "301", "from": "abc.dev", "to": "https://example.com"},
    }


@pytest.mark.parametrize("forward_type", [None, ""])
def test_default_forward_type_is_permanent(synthesizer, forward_type):
    """Test unspecified type defaults to 301"""
    config = synthesizer.generate_config("abc.dev", "https://example.com", forward_type)
    assert config.forwarding.kind == "301"


def test_temporary_redirect(synthesizer):
    """Test 302 is passed through"""
    config = synthesizer.generate_config("abc.dev", "https://example.com", "302")
    assert config.forwarding.kind == "302"
    assert config.path_forwarding is None


def test_path_forwarding(synthesizer):
    """Test path mode adds a path-forward rule from the subdomain"""
    config = synthesizer.generate_config("abc.dev", "https://example.com/app", "path")

    assert config.forwarding.to_dict() == {"type": "path", "from": "abc.dev", "to": "https://example.com/app"}
    assert config.path_forwarding.to_dict() == {"source": "/abc", "destination": "https://example.com/app"}
    assert len(config.records) == 2


def test_path_forwarding_multi_label_extension(synthesizer):
    """Test subdomain portion strips the whole catalog extension"""
    config = synthesizer.generate_config("shop.is.dev", "https://example.com", "path")
    assert config.path_forwarding.source == "/shop"


def test_path_forwarding_explicit_subdomain(synthesizer):
    """Test caller-supplied subdomain is used as is"""
    config = synthesizer.generate_config("shop.is.dev", "https://example.com", "path", subdomain="shop.is")
    assert config.path_forwarding.source == "/shop.is"


def test_invalid_target_url(synthesizer):
    """Test malformed URL emits no configuration"""
    with pytest.raises(InvalidTargetUrlError):
        synthesizer.generate_config("abc.dev", "not-a-url", "301")


def test_unsupported_forward_type(synthesizer):
    """Test unknown forwarding type is rejected"""
    with pytest.raises(UnsupportedForwardTypeError, match="Unsupported forwarding type 'proxy'"):
        synthesizer.generate_config("abc.dev", "https://example.com", "proxy")


def test_parse_forward_type():
    """Test forwarding type parsing"""
    assert ConfigurationSynthesizer.parse_forward_type(None) is ForwardType.PERMANENT
    assert ConfigurationSynthesizer.parse_forward_type("PATH") is ForwardType.PATH
    assert ConfigurationSynthesizer.parse_forward_type("308") is ForwardType.PERMANENT_KEEP_METHOD
    assert not ForwardType.PATH.is_redirect


def test_custom_platform_host_and_ttl():
    """Test configured platform host and TTL are used for both records"""
    synthesizer = ConfigurationSynthesizer(platform_host="edge.example.net", ttl=300)
    config = synthesizer.generate_config("abc.dev", "https://example.com")
    assert {r.value for r in config.records} == {"edge.example.net"}
    assert {r.ttl for r in config.records} == {300}


@pytest.mark.parametrize("kwargs", [{"platform_host": ""}, {"ttl": 0}, {"ttl": -60}])
def test_invalid_synthesizer_settings(kwargs):
    """Test platform host and TTL are checked on construction"""
    with pytest.raises(ValueError):
        ConfigurationSynthesizer(**kwargs)
