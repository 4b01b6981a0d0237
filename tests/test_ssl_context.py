import ssl
from unittest.mock import patch

import pytest
import truststore

from plugin_http import RequestClient, SecuritySetupError, create_ssl_context
from plugin_http._utils._ssl_context import create_permissive_ssl_context


class TestCreateSslContext:
    def test_strict_uses_system_trust_store(self):
        context = create_ssl_context(strict=True)
        assert isinstance(context, truststore.SSLContext)

    def test_permissive_context(self):
        context = create_permissive_ssl_context()
        assert context.check_hostname is False
        assert context.verify_mode == ssl.CERT_NONE

    def test_non_strict_is_permissive(self):
        context = create_ssl_context(strict=False)
        assert context.verify_mode == ssl.CERT_NONE

    def test_failure_is_wrapped(self):
        with patch(
            "plugin_http._utils._ssl_context.create_permissive_ssl_context",
            side_effect=ssl.SSLError("no usable protocol"),
        ):
            with pytest.raises(SecuritySetupError) as exc_info:
                create_ssl_context(strict=False)

        assert isinstance(exc_info.value.__cause__, ssl.SSLError)


class TestClientSecuritySetup:
    def test_client_construction_fails(self, base_url: str):
        with patch(
            "plugin_http._utils._ssl_context.create_permissive_ssl_context",
            side_effect=ssl.SSLError("no usable protocol"),
        ):
            with pytest.raises(SecuritySetupError):
                RequestClient(base_url, strict_ssl=False)

    def test_non_strict_client(self, base_url: str):
        with patch("plugin_http._services._request_client.HttpxEngine") as engine:
            RequestClient(base_url, strict_ssl=False)

        assert engine.call_args.kwargs["verify"].verify_mode == ssl.CERT_NONE
