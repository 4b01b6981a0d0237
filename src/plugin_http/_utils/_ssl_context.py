import ssl

import truststore

from ..models.errors import SecuritySetupError


def create_ssl_context(strict: bool = True) -> ssl.SSLContext:
    """Build the SSL context handed to the engine.

    Strict mode verifies peers against the operating system trust store.
    Non-strict mode accepts any certificate and skips hostname checks, for
    plugins talking to hosts with self-signed certificates.

    Raises:
        SecuritySetupError: If the context cannot be built.
    """
    try:
        if strict:
            return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        return create_permissive_ssl_context()
    except (ssl.SSLError, OSError, ValueError) as e:
        raise SecuritySetupError(f"Unable to build the SSL context: {e}") from e


def create_permissive_ssl_context() -> ssl.SSLContext:
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    # check_hostname must be cleared before verify_mode can drop to CERT_NONE
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context
