import os
import ssl
from typing import Optional, Union


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context(ca_file: Optional[str] = None) -> ssl.SSLContext:
    ca_file = expand_path(ca_file)
    if ca_file:
        return ssl.create_default_context(cafile=ca_file)

    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_verify(
    ignore_ssl: bool = False,
    ca_file: Optional[str] = None,
    cert_file: Optional[str] = None,
    key_file: Optional[str] = None,
) -> Union[bool, ssl.SSLContext]:
    """Build the ``verify`` argument for an httpx client.

    A client certificate is loaded into the context when ``cert_file`` is set;
    ``key_file`` may be omitted when the key is bundled with the certificate.
    """
    if ignore_ssl and not cert_file:
        return False

    context = create_ssl_context(ca_file)
    if ignore_ssl:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    if cert_file:
        context.load_cert_chain(
            certfile=expand_path(cert_file), keyfile=expand_path(key_file)
        )
    return context
