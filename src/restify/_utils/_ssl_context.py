import os
import ssl
import tempfile
from contextlib import contextmanager
from typing import Any, Generator, Optional

from httpx import Proxy, Timeout

from ..models.transport import ClientCertificate, ProxyInfo

PEM_MARKER = "-----BEGIN"


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
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


@contextmanager
def _pem_file(value: str) -> Generator[str, None, None]:
    """Yield a filesystem path holding ``value``.

    PEM text is written to a temporary file that is removed afterwards;
    anything else is treated as a path already.
    """
    if not value.lstrip().startswith(PEM_MARKER):
        yield expand_path(value)
        return

    with tempfile.NamedTemporaryFile("w", suffix=".pem", delete=False) as f:
        f.write(value)
    try:
        yield f.name
    finally:
        os.unlink(f.name)


def load_client_certificate(
    context: ssl.SSLContext, certificate: ClientCertificate
) -> None:
    if certificate.key is None:
        if certificate.certificate.lstrip().startswith(PEM_MARKER):
            context.load_verify_locations(cadata=certificate.certificate)
        else:
            context.load_verify_locations(cafile=expand_path(certificate.certificate))
        return

    with _pem_file(certificate.certificate) as certfile, _pem_file(
        certificate.key
    ) as keyfile:
        context.load_cert_chain(certfile=certfile, keyfile=keyfile)


def get_httpx_client_kwargs(
    *,
    connect_timeout: int,
    read_timeout: int,
    follow_redirects: bool,
    proxy: Optional[ProxyInfo] = None,
    client_certificate: Optional[ClientCertificate] = None,
    sni_verification_disabled: bool = False,
) -> dict[str, Any]:
    """Build the ``httpx.Client`` keyword arguments for one execution.

    Timeouts are given in milliseconds. A new SSL context is created on
    every call.
    """
    context = create_ssl_context()
    if client_certificate is not None:
        load_client_certificate(context, client_certificate)
    if sni_verification_disabled:
        context.check_hostname = False

    kwargs: dict[str, Any] = {
        "verify": context,
        "follow_redirects": follow_redirects,
        "timeout": Timeout(read_timeout / 1000, connect=connect_timeout / 1000),
    }

    if proxy is not None:
        kwargs["proxy"] = Proxy(proxy.url, auth=proxy.auth)

    return kwargs
